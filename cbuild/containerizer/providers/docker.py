"""
Docker provider for containerizer.
"""

__all__ = ["Docker"]

import itertools
import logging
from typing import Any
from urllib.parse import quote, quote_plus

import docker
from docker.errors import DockerException

from cbuild.container_registry import RegistryCredential
from cbuild.core import NCall, Provider, Response, warn
from cbuild.core.exceptions import (
    BuildInitiationError,
    BuildStreamError,
    PushInitiationError,
    PushStreamError,
    RuntimeUnavailableError,
)
from cbuild.secret_store import SourceCredential

from .._events import (
    BuildIdEvent,
    ErrorEvent,
    PushResultEvent,
    StatusEvent,
    StreamEvent,
    iter_events,
)
from .._models import ImageItem
from .._source import SourceReference

logger = logging.getLogger(__name__)

PUSHING_STATUS = "Pushing"


class Docker(Provider):
    base_url: str | None
    nparams: dict[str, Any]

    _client: Any

    def __init__(
        self,
        base_url: str | None = None,
        nparams: dict[str, Any] = dict(),
        **kwargs,
    ):
        """Initialize.

        Args:
            base_url:
                URL of the Docker daemon.
                If None, the environment decides (DOCKER_HOST).
            nparams:
                Native parameters to the docker client.
        """
        self.base_url = base_url
        self.nparams = nparams
        self._client = None
        super().__init__(**kwargs)

    def __setup__(self) -> None:
        if self._client is not None:
            return
        try:
            if self.base_url is not None:
                self._client = docker.DockerClient(
                    base_url=self.base_url, **self.nparams
                )
            else:
                self._client = docker.from_env(**self.nparams)
        except DockerException as e:
            raise RuntimeUnavailableError(str(e)) from e

    def build(
        self,
        source: str | SourceReference,
        registry: str,
        image_name: str | None = None,
        source_credential: SourceCredential | None = None,
    ) -> Response[ImageItem]:
        """Build an image from a remote repository.

        Args:
            source: Version-control reference of the build context.
            registry: Registry host the image is tagged for.
            image_name: Image name. Derived from the source if None.
            source_credential: Credential for a private repository.

        Returns:
            Built image.
        """
        if isinstance(source, str):
            source = SourceReference.parse(source)
        name = image_name or source.image_name()
        tag = f"{registry}/{name}"
        secret = (
            source_credential.value.get_secret_value()
            if source_credential is not None
            else None
        )

        self.__setup__()
        logger.info("Building %s from %s...", tag, source)
        try:
            stream = iter(
                self._client.api.build(
                    path=source.url(secret),
                    tag=tag,
                    forcerm=True,
                )
            )
            # The daemon's HTTP status only surfaces with the first chunk.
            first = list(itertools.islice(stream, 1))
        except (DockerException, OSError) as e:
            raise BuildInitiationError(_redact(str(e), secret)) from e

        image = ImageItem(name=name, tag=tag)
        errors: list[str] = []
        try:
            for event in iter_events(itertools.chain(first, stream)):
                if isinstance(event, StreamEvent):
                    text = event.text.rstrip()
                    if text:
                        logger.info("Build: %s", text)
                elif isinstance(event, BuildIdEvent):
                    logger.info("Build: ID: %s", event.id)
                    image.id = event.id
                elif isinstance(event, StatusEvent):
                    logger.info("Build: %s", _format_status(event))
                elif isinstance(event, ErrorEvent):
                    message = _redact(event.message, secret)
                    logger.error("Build: Error: %s", message)
                    errors.append(message)
                else:
                    warn(f"Build: Unexpected event: {event!r}", logger)
        except (DockerException, OSError) as e:
            raise BuildStreamError(_redact(str(e), secret)) from e
        if errors:
            raise BuildStreamError(errors[-1])
        return Response(result=image)

    def push(
        self,
        image: ImageItem,
        credential: RegistryCredential,
    ) -> Response[ImageItem]:
        """Push all tags of an image to the registry.

        Args:
            image: Built image.
            credential: Registry credential.

        Returns:
            Image with the per-tag push results.
        """
        self.__setup__()
        repository = f"{credential.registry}/{image.name}"
        logger.info("Pushing %s...", repository)
        stream = NCall(
            self._client.api.push,
            {
                "repository": repository,
                "stream": True,
                "auth_config": credential.auth_config(),
            },
            None,
            {DockerException: PushInitiationError},
        ).invoke()

        results: list[PushResultEvent] = []
        errors: list[str] = []
        try:
            for event in iter_events(stream):
                if isinstance(event, StatusEvent):
                    if event.status != PUSHING_STATUS:
                        logger.info("Push: %s", _format_status(event))
                elif isinstance(event, PushResultEvent):
                    logger.info(
                        "Push: Tag: %s, Digest: %s, Size: %d",
                        event.tag,
                        event.digest,
                        event.size,
                    )
                    results.append(event)
                elif isinstance(event, ErrorEvent):
                    logger.error("Push: Error: %s", event.message)
                    errors.append(event.message)
                elif isinstance(event, StreamEvent):
                    logger.info("Push: %s", event.text.rstrip())
                else:
                    warn(f"Push: Unexpected event: {event!r}", logger)
        except (DockerException, OSError) as e:
            raise PushStreamError(str(e)) from e
        if errors:
            raise PushStreamError(errors[-1])
        logger.info("Pushed %s", repository)
        return Response(result=image.copy(update={"pushed": results}))


def _format_status(event: StatusEvent) -> str:
    if event.id is not None:
        return f"{event.status} id:{event.id}"
    return event.status


def _redact(message: str, secret: str | None) -> str:
    """Mask a credential in a message.

    The remote context URL travels in the build query string, so the
    credential can also appear percent-encoded. The password is masked
    on its own as well.
    """
    if not secret:
        return message
    values = {secret}
    if ":" in secret:
        values.add(secret.split(":", 1)[1])
    forms = {
        form
        for value in values
        if value
        for form in (value, quote(value, safe=""), quote_plus(value))
    }
    for form in sorted(forms, key=len, reverse=True):
        message = message.replace(form, "***")
    return message
