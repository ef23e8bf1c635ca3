from ._models import (
    DEFAULT_REGION,
    BuildRequest,
    PipelineConfig,
    PipelineStage,
    PipelineState,
)
from .component import Pipeline

__all__ = [
    "DEFAULT_REGION",
    "BuildRequest",
    "Pipeline",
    "PipelineConfig",
    "PipelineStage",
    "PipelineState",
]
