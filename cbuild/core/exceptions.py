__all__ = [
    "BaseError",
    "BadRequestError",
    "BuildInitiationError",
    "BuildStreamError",
    "CredentialDecodeError",
    "ForbiddenError",
    "InternalError",
    "InvalidSourceReferenceError",
    "NotFoundError",
    "PushInitiationError",
    "PushStreamError",
    "RegistryAuthError",
    "RepositoryCreateError",
    "RepositoryLookupError",
    "RuntimeUnavailableError",
    "SecretAccessError",
    "SecretNotFoundError",
    "StreamDecodeAnomaly",
]

from typing import Any


class BaseError(Exception):
    status_code: int = 500
    stage: str | None = None
    state: Any = None


class BadRequestError(BaseError):
    status_code = 400


class ForbiddenError(BaseError):
    status_code = 403


class NotFoundError(BaseError):
    status_code = 404


class InternalError(BaseError):
    status_code = 500


class InvalidSourceReferenceError(BadRequestError):
    """Source reference is not a version-control locator."""


class CredentialDecodeError(BadRequestError):
    """Credential payload is not valid base64 or not user:password."""


class SecretNotFoundError(NotFoundError):
    pass


class SecretAccessError(ForbiddenError):
    pass


class RegistryAuthError(InternalError):
    pass


class RepositoryLookupError(InternalError):
    pass


class RepositoryCreateError(InternalError):
    pass


class RuntimeUnavailableError(InternalError):
    """Container runtime could not be reached."""


class BuildInitiationError(InternalError):
    pass


class BuildStreamError(InternalError):
    pass


class PushInitiationError(InternalError):
    pass


class PushStreamError(InternalError):
    pass


class StreamDecodeAnomaly(BaseError):
    """Malformed progress record.

    Raised by the event decoder and always handled by the stream drain.
    """

    status_code = 422
