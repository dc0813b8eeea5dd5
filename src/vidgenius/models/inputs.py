"""Input sources and the canonical request payload."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import EmptyInputError


@dataclass(frozen=True)
class TextInput:
    """Pasted or uploaded transcript text."""

    value: str


@dataclass(frozen=True)
class ExternalReference:
    """A link to a hosted video. Passed along as text, never fetched."""

    url: str


@dataclass(frozen=True)
class BinaryUpload:
    """Raw bytes of a local video file."""

    data: bytes
    media_type: str
    name: str = ""

    def __repr__(self) -> str:
        return (
            f"BinaryUpload(name={self.name!r}, media_type={self.media_type!r}, "
            f"size={len(self.data)})"
        )


InputSource = Union[TextInput, ExternalReference, BinaryUpload]


class ContentKind(str, Enum):
    TEXT = "text"
    VIDEO_BINARY = "video-binary"


@dataclass(frozen=True)
class AnalysisRequest:
    """Normalized payload handed to the request builder."""

    content: str  # transcript text, URL string, or base64 video bytes
    content_kind: ContentKind
    engagement_context: str
    media_type: str = "text/plain"

    def __post_init__(self) -> None:
        if not self.content:
            raise EmptyInputError("Nothing to analyze: content is empty.")
