import base64
import binascii

from docker import auth

from cbuild.core.exceptions import CredentialDecodeError

SCHEME_SEPARATOR = "://"


def decode_authorization_token(token: str) -> tuple[str, str]:
    """Decode a base64 ``username:password`` authorization token.

    Args:
        token: Token returned by the registry control plane.

    Returns:
        Username and password.
    """
    try:
        data = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise CredentialDecodeError(
            f"Registry token is not valid base64: {e}"
        ) from e
    credentials = data.split(":")
    if len(credentials) != 2:
        raise CredentialDecodeError(
            "Registry token is not of the form username:password"
        )
    return credentials[0], credentials[1]


def encode_auth_blob(username: str, password: str, server_address: str) -> str:
    return auth.encode_header(
        {
            "username": username,
            "password": password,
            "serveraddress": server_address,
        }
    ).decode("ascii")


def strip_scheme(endpoint: str) -> str:
    if SCHEME_SEPARATOR in endpoint:
        return endpoint.split(SCHEME_SEPARATOR, 1)[1]
    return endpoint
