"""Exception hierarchy for the content analysis pipeline."""

from __future__ import annotations

# Shown to the user for every analysis failure, whatever its kind.
USER_FAILURE_MESSAGE = (
    "Failed to process content. Please check your API key and try again. "
    "If using a large video, it may have exceeded the limit."
)


class VidGeniusError(Exception):
    """Base class for all VidGenius errors."""


# ── Input preconditions (raised before any request is built) ──────────────


class InputError(VidGeniusError):
    """The submitted input cannot be analyzed."""


class EmptyInputError(InputError):
    """Transcript text or URL is blank."""


class MissingInputError(InputError):
    """A referenced local file does not exist."""


class UnsupportedMediaError(InputError):
    """An uploaded file is not a video."""


class FileTooLargeError(InputError):
    """An upload exceeds the size limit."""

    def __init__(self, size: int, limit: int, name: str = ""):
        self.size = size
        self.limit = limit
        self.name = name
        label = f"{name} is" if name else "File is"
        super().__init__(
            f"{label} {size / (1024 * 1024):.1f} MB; "
            f"please use video files under {limit // (1024 * 1024)} MB."
        )


# ── Analysis failures (collapsed into one message for the user) ───────────


class AnalysisError(VidGeniusError):
    """The external analysis could not produce a usable result."""

    kind = "analysis"


class TransportError(AnalysisError):
    """The generation call raised (network, auth, quota, ...)."""

    kind = "transport"


class EmptyResponseError(AnalysisError):
    """The generation call succeeded but returned no content."""

    kind = "empty-response"


class DecodeError(AnalysisError):
    """The response is not a well-formed analysis result."""

    kind = "decode"


class AnalysisInProgressError(VidGeniusError):
    """Another analysis is still pending."""
