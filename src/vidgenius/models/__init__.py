"""Data models for the content analysis pipeline."""

from .analysis import (
    SEO_PLATFORMS,
    AnalysisResult,
    AnalyticsSummary,
    Highlight,
    ScheduleItem,
    SeoData,
    SocialMetadata,
)
from .inputs import (
    AnalysisRequest,
    BinaryUpload,
    ContentKind,
    ExternalReference,
    InputSource,
    TextInput,
)

__all__ = [
    "SEO_PLATFORMS",
    "AnalysisResult",
    "AnalyticsSummary",
    "Highlight",
    "ScheduleItem",
    "SeoData",
    "SocialMetadata",
    "AnalysisRequest",
    "BinaryUpload",
    "ContentKind",
    "ExternalReference",
    "InputSource",
    "TextInput",
]
