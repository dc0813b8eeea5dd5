"""Structured analysis result returned by the generation service.

Wire names are camelCase (as requested in the response schema); the Python
attributes are snake_case aliases of them.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Highlight(_WireModel):
    """A short-form clip candidate."""

    timestamp: str  # "MM:SS - MM:SS", not enforced
    snippet: str
    reason: str
    title: str
    visual_prompt: str = Field(alias="visualPrompt")


class SocialMetadata(_WireModel):
    title: str
    description: str
    tags: List[str]


# Attribute name -> display label, in rendering order.
SEO_PLATFORMS: Tuple[Tuple[str, str], ...] = (
    ("youtube_shorts", "YouTube Shorts"),
    ("tik_tok", "TikTok"),
    ("instagram_reels", "Instagram Reels"),
    ("facebook", "Facebook"),
)


class SeoData(_WireModel):
    """Per-platform metadata; all four platforms are always present."""

    youtube_shorts: SocialMetadata = Field(alias="youtubeShorts")
    tik_tok: SocialMetadata = Field(alias="tikTok")
    instagram_reels: SocialMetadata = Field(alias="instagramReels")
    facebook: SocialMetadata

    def platforms(self) -> Iterator[Tuple[str, SocialMetadata]]:
        """Yield (label, metadata) pairs in SEO_PLATFORMS order."""
        for attr, label in SEO_PLATFORMS:
            yield label, getattr(self, attr)


class ScheduleItem(_WireModel):
    day: str
    platform: str
    time: str
    content_title: str = Field(alias="contentTitle")


class AnalyticsSummary(_WireModel):
    top_clip: str = Field(alias="topClip")
    best_hashtags: List[str] = Field(alias="bestHashtags")
    improvements: List[str]


class AnalysisResult(_WireModel):
    """Complete, validated analysis. Never partially populated."""

    cleaned_transcript: str = Field(alias="cleanedTranscript")
    highlights: List[Highlight]
    seo: SeoData
    captions: str  # SRT text
    ffmpeg_commands: str = Field(alias="ffmpegCommands")
    schedule: List[ScheduleItem]
    analytics_report: AnalyticsSummary = Field(alias="analyticsReport")

    def to_wire(self) -> dict:
        """Dump back to the camelCase shape the service returned."""
        return self.model_dump(by_alias=True)
