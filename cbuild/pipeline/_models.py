from enum import Enum

from cbuild.container_registry import RegistryCredential, RepositoryItem
from cbuild.containerizer import ImageItem, SourceReference
from cbuild.core import DataModel
from cbuild.secret_store import SourceCredential

DEFAULT_REGION = "eu-west-1"


class BuildRequest(DataModel):
    """Build request.

    Attributes:
        source:
            Version-control reference of the build context,
            e.g. github.com/org/repo.git#branch:subdir.
        image_name:
            Image name. Derived from the source if None.
        secret_key:
            Secret store key of the source repository credential.
            Public repositories need none.
        registry_id:
            Registry to push to. The default registry of the
            caller if None.
    """

    source: str
    image_name: str | None = None
    secret_key: str | None = None
    registry_id: str | None = None


class PipelineConfig(DataModel):
    """Pipeline config.

    Args:
        region:
            AWS region of the registry and the secret store.
        profile_name:
            AWS profile name.
        docker_url:
            URL of the Docker daemon.
    """

    region: str = DEFAULT_REGION
    profile_name: str | None = None
    docker_url: str | None = None


class PipelineStage(str, Enum):
    START = "start"
    RESOLVE_REGISTRY_AUTH = "resolve_registry_auth"
    RESOLVE_SOURCE_CREDENTIAL = "resolve_source_credential"
    BUILD = "build"
    ENSURE_REPOSITORY = "ensure_repository"
    PUSH = "push"
    DONE = "done"
    FAILED = "failed"


class PipelineState(DataModel):
    """State of a pipeline run, replaced at every stage."""

    request: BuildRequest
    stage: PipelineStage = PipelineStage.START
    reference: SourceReference | None = None
    image_name: str | None = None
    credential: RegistryCredential | None = None
    source_credential: SourceCredential | None = None
    image: ImageItem | None = None
    repository: RepositoryItem | None = None
