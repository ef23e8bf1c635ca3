"""
Build-and-push pipeline.
"""

__all__ = ["Pipeline"]

import logging
from typing import Callable

from cbuild.container_registry import AmazonElasticContainerRegistry
from cbuild.containerizer import Docker, SourceReference
from cbuild.core import run_async
from cbuild.core.exceptions import BaseError
from cbuild.secret_store import AWSParameterStore

from ._models import BuildRequest, PipelineConfig, PipelineStage, PipelineState

logger = logging.getLogger(__name__)


class Pipeline:
    """Build an image from a remote repository and push it to ECR.

    Stages run in order and each one returns a new state:
    registry auth, source credential, build, repository, push.
    The first failure stops the run. Nothing is retried or rolled back.
    The raised error carries the failing stage and the run's final
    state in the failed stage.
    """

    config: PipelineConfig
    registry: AmazonElasticContainerRegistry
    secret_store: AWSParameterStore
    containerizer: Docker

    def __init__(
        self,
        config: PipelineConfig = PipelineConfig(),
        registry: AmazonElasticContainerRegistry | None = None,
        secret_store: AWSParameterStore | None = None,
        containerizer: Docker | None = None,
    ):
        self.config = config
        self.registry = registry or AmazonElasticContainerRegistry(
            region=config.region,
            profile_name=config.profile_name,
        )
        self.secret_store = secret_store or AWSParameterStore(
            region=config.region,
            profile_name=config.profile_name,
        )
        self.containerizer = containerizer or Docker(
            base_url=config.docker_url
        )

    def run(self, request: BuildRequest) -> PipelineState:
        state = PipelineState(request=request)
        stages: list[
            tuple[PipelineStage, Callable[[PipelineState], PipelineState]]
        ] = [
            (PipelineStage.START, self.resolve_source),
            (PipelineStage.RESOLVE_REGISTRY_AUTH, self.resolve_registry_auth),
            (
                PipelineStage.RESOLVE_SOURCE_CREDENTIAL,
                self.resolve_source_credential,
            ),
            (PipelineStage.BUILD, self.build),
            (PipelineStage.ENSURE_REPOSITORY, self.ensure_repository),
            (PipelineStage.PUSH, self.push),
        ]
        for stage, func in stages:
            state = state.copy(update={"stage": stage})
            try:
                state = func(state)
            except BaseError as e:
                e.stage = stage.value
                e.state = state.copy(update={"stage": PipelineStage.FAILED})
                logger.error("Stage %s failed: %s", stage.value, e)
                raise
        state = state.copy(update={"stage": PipelineStage.DONE})
        logger.info("Published %s", state.image.tag if state.image else None)
        return state

    async def arun(self, request: BuildRequest) -> PipelineState:
        return await run_async(self.run, request)

    def resolve_source(self, state: PipelineState) -> PipelineState:
        # Runs before any network call.
        reference = SourceReference.parse(state.request.source)
        image_name = state.request.image_name or reference.image_name()
        return state.copy(
            update={"reference": reference, "image_name": image_name}
        )

    def resolve_registry_auth(self, state: PipelineState) -> PipelineState:
        credential = self.registry.get_credential(
            registry_id=state.request.registry_id
        ).result
        return state.copy(update={"credential": credential})

    def resolve_source_credential(
        self, state: PipelineState
    ) -> PipelineState:
        source_credential = self.secret_store.get_source_credential(
            state.request.secret_key
        ).result
        return state.copy(update={"source_credential": source_credential})

    def build(self, state: PipelineState) -> PipelineState:
        assert state.reference is not None and state.credential is not None
        image = self.containerizer.build(
            source=state.reference,
            registry=state.credential.registry,
            image_name=state.image_name,
            source_credential=state.source_credential,
        ).result
        return state.copy(update={"image": image})

    def ensure_repository(self, state: PipelineState) -> PipelineState:
        assert state.image is not None
        repository = self.registry.ensure_repository(
            state.image.name,
            registry_id=state.request.registry_id,
        ).result
        return state.copy(update={"repository": repository})

    def push(self, state: PipelineState) -> PipelineState:
        assert state.image is not None and state.credential is not None
        image = self.containerizer.push(
            image=state.image,
            credential=state.credential,
        ).result
        return state.copy(update={"image": image})
