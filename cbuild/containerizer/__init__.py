from ._events import (
    BuildIdEvent,
    ErrorEvent,
    ProgressEvent,
    PushResultEvent,
    StatusEvent,
    StreamEvent,
    iter_events,
)
from ._models import ImageItem
from ._source import SourceReference
from .providers.docker import Docker

__all__ = [
    "BuildIdEvent",
    "Docker",
    "ErrorEvent",
    "ImageItem",
    "ProgressEvent",
    "PushResultEvent",
    "SourceReference",
    "StatusEvent",
    "StreamEvent",
    "iter_events",
]
