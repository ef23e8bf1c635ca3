"""
Progress events of the build and push streams.

The container runtime reports progress as newline delimited JSON
records. Each record is decoded once into one of the event variants
below.
"""

from __future__ import annotations

import json
import logging
from typing import (
    Annotated,
    Any,
    Callable,
    Iterable,
    Iterator,
    Literal,
    Union,
)

from pydantic import Field, ValidationError

from cbuild.core import DataModel, warn
from cbuild.core.exceptions import StreamDecodeAnomaly

logger = logging.getLogger(__name__)


class StreamEvent(DataModel):
    kind: Literal["stream"] = "stream"
    text: str


class BuildIdEvent(DataModel):
    kind: Literal["build_id"] = "build_id"
    id: str


class StatusEvent(DataModel):
    kind: Literal["status"] = "status"
    status: str
    id: str | None = None


class PushResultEvent(DataModel):
    kind: Literal["push_result"] = "push_result"
    tag: str
    digest: str
    size: int


class ErrorEvent(DataModel):
    kind: Literal["error"] = "error"
    message: str


ProgressEvent = Annotated[
    Union[
        StreamEvent,
        BuildIdEvent,
        StatusEvent,
        PushResultEvent,
        ErrorEvent,
    ],
    Field(discriminator="kind"),
]


def decode_record(record: Any) -> ProgressEvent:
    """Classify a decoded JSON record.

    Raises:
        StreamDecodeAnomaly: The record matches no event variant.
    """
    if not isinstance(record, dict):
        raise StreamDecodeAnomaly(f"Unexpected record: {record!r}")
    if "error" in record or "errorDetail" in record:
        detail = record.get("errorDetail") or {}
        message = record.get("error") or detail.get("message") or ""
        return ErrorEvent(message=str(message))
    if set(record) == {"message"}:
        # Error body of a request the runtime rejected outright.
        return ErrorEvent(message=str(record["message"]))
    if "aux" in record:
        return _decode_aux(record["aux"])
    if "stream" in record:
        return StreamEvent(text=str(record["stream"]))
    if "status" in record:
        id = record.get("id")
        return StatusEvent(
            status=str(record["status"]),
            id=str(id) if id is not None else None,
        )
    raise StreamDecodeAnomaly(f"Unexpected record: {record!r}")


def _decode_aux(aux: Any) -> ProgressEvent:
    # Build streams report {"ID": ...}, push streams report
    # {"Tag": ..., "Digest": ..., "Size": ...}.
    if isinstance(aux, dict):
        try:
            if "ID" in aux:
                return BuildIdEvent(id=aux["ID"])
            if "Digest" in aux:
                return PushResultEvent(
                    tag=aux.get("Tag", ""),
                    digest=aux["Digest"],
                    size=aux.get("Size", 0),
                )
        except ValidationError as e:
            raise StreamDecodeAnomaly(
                f"Unexpected aux record: {aux!r}"
            ) from e
    raise StreamDecodeAnomaly(f"Unexpected aux record: {aux!r}")


def decode_line(line: bytes | str) -> ProgressEvent:
    try:
        record = json.loads(line)
    except ValueError as e:
        raise StreamDecodeAnomaly(f"Malformed record: {line!r}") from e
    return decode_record(record)


def iter_events(
    chunks: Iterable[bytes | str | dict],
) -> Iterator[ProgressEvent]:
    """Decode a raw progress stream into events.

    Chunks may split or join records arbitrarily. Malformed records are
    logged and skipped. The iterator ends with the stream.
    """
    buffer = b""
    for chunk in chunks:
        if isinstance(chunk, dict):
            yield from _tolerant(decode_record, chunk)
            continue
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        buffer += chunk
        *lines, buffer = buffer.split(b"\n")
        for line in lines:
            if line.strip():
                yield from _tolerant(decode_line, line)
    if buffer.strip():
        yield from _tolerant(decode_line, buffer)


def _tolerant(
    decoder: Callable[[Any], ProgressEvent], value: Any
) -> Iterator[ProgressEvent]:
    try:
        yield decoder(value)
    except StreamDecodeAnomaly as e:
        warn(f"Skipping progress record: {e}", logger)
