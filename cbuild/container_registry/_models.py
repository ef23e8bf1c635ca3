from datetime import datetime

from pydantic import SecretStr

from cbuild.core import DataModel


class RegistryCredential(DataModel):
    """Short-lived registry credential.

    Attributes:
        registry: Registry host without scheme.
        server_address: Registry endpoint as returned by the control plane.
        username: Registry user name.
        password: Registry password.
        auth_blob:
            X-Registry-Auth header value. Push passes auth_config()
            and docker-py derives the same header from it.
        expires_at: Expiry of the underlying token.
    """

    registry: str
    server_address: str
    username: str
    password: SecretStr
    auth_blob: SecretStr
    expires_at: datetime | None = None

    def auth_config(self) -> dict[str, str]:
        return {
            "username": self.username,
            "password": self.password.get_secret_value(),
            "serveraddress": self.server_address,
        }


class RepositoryItem(DataModel):
    """Registry repository.

    Attributes:
        name: Repository name.
        uri: Repository URI.
        created: Whether the repository was created by this call.
    """

    name: str
    uri: str | None = None
    created: bool = False
