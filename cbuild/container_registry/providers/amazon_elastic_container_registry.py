"""
Container registry on Amazon ECR.
"""

__all__ = ["AmazonElasticContainerRegistry"]

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from cbuild.core import AWSProvider, NCall, Response
from cbuild.core.exceptions import (
    RegistryAuthError,
    RepositoryCreateError,
    RepositoryLookupError,
)

from .._helper import (
    decode_authorization_token,
    encode_auth_blob,
    strip_scheme,
)
from .._models import RegistryCredential, RepositoryItem

logger = logging.getLogger(__name__)


class AmazonElasticContainerRegistry(AWSProvider):
    service_name = "ecr"

    registry_id: str | None

    def __init__(
        self,
        region: str | None = None,
        registry_id: str | None = None,
        **kwargs,
    ):
        """Initialize.

        Args:
            region:
                AWS region where the ECR registry is located.
            registry_id:
                AWS account ID that owns the ECR registry.
                If None, uses the default registry of the caller.
        """
        self.registry_id = registry_id
        super().__init__(region=region, **kwargs)

    def get_credential(
        self, registry_id: str | None = None
    ) -> Response[RegistryCredential]:
        """Get a short-lived push credential for the registry.

        Args:
            registry_id:
                Registry to scope the token to.
                Falls back to the provider registry, then to the
                default registry of the caller.

        Returns:
            Registry credential.
        """
        self.__setup__()
        registry_id = registry_id or self.registry_id
        args: dict[str, Any] = {}
        if registry_id:
            args["registryIds"] = [registry_id]
        nresult = NCall(
            self._client.get_authorization_token,
            args,
            None,
            {
                ClientError: RegistryAuthError,
                BotoCoreError: RegistryAuthError,
            },
        ).invoke()
        auth_data = nresult["authorizationData"][0]
        endpoint = auth_data["proxyEndpoint"]
        registry = strip_scheme(endpoint)
        logger.info("Got authentication token for registry: %s", registry)

        username, password = decode_authorization_token(
            auth_data["authorizationToken"]
        )
        result = RegistryCredential(
            registry=registry,
            server_address=endpoint,
            username=username,
            password=password,
            auth_blob=encode_auth_blob(username, password, endpoint),
            expires_at=auth_data.get("expiresAt"),
        )
        return Response(result=result)

    def ensure_repository(
        self, name: str, registry_id: str | None = None
    ) -> Response[RepositoryItem]:
        """Create the repository unless it already exists.

        Only a repository-not-found answer counts as absence. Any
        other lookup failure is raised without attempting creation.

        Args:
            name: Repository name.
            registry_id: Registry holding the repository.

        Returns:
            Repository item.
        """
        self.__setup__()
        registry_id = registry_id or self.registry_id
        ex = self._client.exceptions
        args: dict[str, Any] = {"repositoryNames": [name]}
        if registry_id:
            args["registryId"] = registry_id
        nresult, error = NCall(
            self._client.describe_repositories,
            args,
            None,
            {
                ex.RepositoryNotFoundException: None,
                ClientError: RepositoryLookupError,
                BotoCoreError: RepositoryLookupError,
            },
        ).invoke(return_error=True)
        if error is None:
            repository = nresult["repositories"][0]
            return Response(
                result=RepositoryItem(
                    name=repository["repositoryName"],
                    uri=repository.get("repositoryUri"),
                ),
                native=dict(result=nresult),
            )

        logger.info("Repository %s not found, creating it", name)
        args = {"repositoryName": name}
        if registry_id:
            args["registryId"] = registry_id
        nresult = NCall(
            self._client.create_repository,
            args,
            None,
            {
                ClientError: RepositoryCreateError,
                BotoCoreError: RepositoryCreateError,
            },
        ).invoke()
        repository = nresult["repository"]
        return Response(
            result=RepositoryItem(
                name=repository["repositoryName"],
                uri=repository.get("repositoryUri"),
                created=True,
            ),
            native=dict(result=nresult),
        )
