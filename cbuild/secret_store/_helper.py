import base64
import binascii

from cbuild.core.exceptions import CredentialDecodeError


def decode_secret_value(value: str) -> str:
    """Decode a url-safe base64 secret value.

    Line breaks are ignored, so values stored from wrapped or
    newline-terminated base64 files decode.
    """
    value = value.strip().replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(value, altchars=b"-_", validate=True).decode(
            "utf-8"
        )
    except (binascii.Error, ValueError) as e:
        raise CredentialDecodeError(
            f"Secret value is not valid base64: {e}"
        ) from e
