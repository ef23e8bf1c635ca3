from typing import Any, Generic, TypeVar

from .data_model import DataModel

T = TypeVar("T")


class Response(DataModel, Generic[T]):
    result: T
    """Result of the provider call."""

    native: dict[str, Any] | None = None
    """Native call and raw result."""
