from cbuild.core import DataModel

from ._events import PushResultEvent


class ImageItem(DataModel):
    """Built image.

    Attributes:
        name: Image name, also the registry repository name.
        tag: Full image reference, registry host and name.
        id: Build identifier reported by the runtime.
        pushed: Per-tag results of the push.
    """

    name: str
    tag: str
    id: str | None = None
    pushed: list[PushResultEvent] = []
