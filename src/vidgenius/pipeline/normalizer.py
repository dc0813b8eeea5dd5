"""Turn the three input modes into a single AnalysisRequest."""

from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_ENGAGEMENT, MAX_UPLOAD_BYTES
from ..errors import (
    EmptyInputError,
    FileTooLargeError,
    InputError,
    MissingInputError,
    UnsupportedMediaError,
)
from ..models.inputs import (
    AnalysisRequest,
    BinaryUpload,
    ContentKind,
    ExternalReference,
    InputSource,
    TextInput,
)

logger = logging.getLogger(__name__)

# Extensions mimetypes does not always know about
_VIDEO_TYPES = {
    ".mp4": "video/mp4",
    ".m4v": "video/mp4",
    ".mov": "video/quicktime",
    ".webm": "video/webm",
    ".mkv": "video/x-matroska",
    ".avi": "video/x-msvideo",
    ".mpeg": "video/mpeg",
    ".mpg": "video/mpeg",
    ".3gp": "video/3gpp",
}


def guess_media_type(path: str | Path) -> str:
    """Best-effort media type for a local file."""
    path = Path(path)
    known = _VIDEO_TYPES.get(path.suffix.lower())
    if known:
        return known
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def _check_size(size: int, name: str = "") -> None:
    if size > MAX_UPLOAD_BYTES:
        raise FileTooLargeError(size, MAX_UPLOAD_BYTES, name=name)


def _stat_file(path: Path) -> int:
    if not path.is_file():
        raise MissingInputError(f"File not found: {path}")
    size = path.stat().st_size
    _check_size(size, name=path.name)
    return size


async def load_transcript_file(path: str | Path) -> TextInput:
    """Read a UTF-8 transcript file into a TextInput."""
    path = Path(path)
    _stat_file(path)
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputError(f"{path.name} is not UTF-8 text.") from e
    logger.debug("Loaded transcript %s (%d chars)", path, len(text))
    return TextInput(text)


async def load_video_file(
    path: str | Path, media_type: Optional[str] = None
) -> BinaryUpload:
    """Read a local video into a BinaryUpload.

    Size is checked from the filesystem before the file is opened, so an
    oversized upload is rejected without being read.
    """
    path = Path(path)
    size = _stat_file(path)
    media_type = media_type or guess_media_type(path)
    if not media_type.startswith("video/"):
        raise UnsupportedMediaError(
            f"{path.name} does not look like a video ({media_type})."
        )
    data = await asyncio.to_thread(path.read_bytes)
    logger.debug("Loaded video %s (%d bytes, %s)", path, size, media_type)
    return BinaryUpload(data=data, media_type=media_type, name=path.name)


def resolve_engagement(engagement_context: Optional[str]) -> str:
    """Fall back to the sample statistics when none were given."""
    if engagement_context is None or not engagement_context.strip():
        return DEFAULT_ENGAGEMENT
    return engagement_context


def normalize(
    source: InputSource, engagement_context: Optional[str] = None
) -> AnalysisRequest:
    """Map an input source to the canonical request payload.

    Raises an InputError subclass when the source cannot be analyzed; nothing
    downstream should run in that case.
    """
    engagement = resolve_engagement(engagement_context)

    if isinstance(source, TextInput):
        if not source.value.strip():
            raise EmptyInputError("Please paste a transcript first.")
        return AnalysisRequest(source.value, ContentKind.TEXT, engagement)

    if isinstance(source, ExternalReference):
        if not source.url.strip():
            raise EmptyInputError("Please enter a video URL first.")
        # The link is context for the model only; it is never fetched here.
        return AnalysisRequest(source.url, ContentKind.TEXT, engagement)

    if isinstance(source, BinaryUpload):
        _check_size(len(source.data), name=source.name)
        if not source.data:
            raise EmptyInputError(f"{source.name or 'Upload'} is empty.")
        if not source.media_type.startswith("video/"):
            raise UnsupportedMediaError(
                f"Expected a video upload, got {source.media_type}."
            )
        encoded = base64.b64encode(source.data).decode("ascii")
        return AnalysisRequest(
            encoded,
            ContentKind.VIDEO_BINARY,
            engagement,
            media_type=source.media_type,
        )

    raise InputError(f"Unsupported input source: {type(source).__name__}")
