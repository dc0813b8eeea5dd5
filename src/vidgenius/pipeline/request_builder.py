"""Assemble the schema-constrained generation request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import INPUT_PLACEHOLDER
from ..models.inputs import AnalysisRequest, ContentKind

SYSTEM_INSTRUCTION = f"""\
You are an expert video content strategist.
Process the provided video content (or transcript) and engagement context.

Perform these tasks:
1. If the input is a video, generate a clean transcript. If it's text, clean it \
(remove filler words, fix grammar).
2. Identify 3 engaging highlights (under 30s) suitable for Shorts/Reels. For each \
highlight, provide a viral title and a detailed visual prompt for an AI thumbnail \
generator.
3. Generate SEO metadata for Shorts, TikTok, Reels, FB.
4. Create SRT captions for the highlights (max 6 words per line).
5. Generate FFmpeg commands to cut '{INPUT_PLACEHOLDER}', crop to 9:16, and overlay \
captions.
6. Create a 7-day posting schedule.
7. Generate a brief analytics report based on the provided engagement context \
(or simulate a projection if context is generic).

Return ONLY the structured JSON matching the schema."""

VIDEO_PROMPT = "Analyze this video."


def _string(description: Optional[str] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string"}
    if description:
        schema["description"] = description
    return schema


def _string_list() -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}}


def _object(properties: Dict[str, Any], **extra: Any) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        **extra,
    }


_SOCIAL_METADATA = _object(
    {"title": _string(), "description": _string(), "tags": _string_list()}
)

RESPONSE_SCHEMA: Dict[str, Any] = _object(
    {
        "cleanedTranscript": _string(
            "The transcript with filler words removed, grammar corrected, and "
            "formatted into paragraphs. If video input is provided, transcribe "
            "the main speech."
        ),
        "highlights": {
            "type": "array",
            "items": _object(
                {
                    "timestamp": _string("Start and end time, e.g., '00:15 - 00:45'"),
                    "snippet": _string("The text content of the highlight"),
                    "reason": _string(
                        "Why this was selected (emotional hook, quote, etc.)"
                    ),
                    "title": _string(
                        "A catchy, viral title for this short clip (max 50 chars)"
                    ),
                    "visualPrompt": _string(
                        "A creative, detailed prompt for an AI image generator "
                        "(like Midjourney) to create a high-quality "
                        "thumbnail/cover for this specific clip."
                    ),
                }
            ),
        },
        "seo": _object(
            {
                "youtubeShorts": _SOCIAL_METADATA,
                "tikTok": _SOCIAL_METADATA,
                "instagramReels": _SOCIAL_METADATA,
                "facebook": _SOCIAL_METADATA,
            }
        ),
        "captions": _string("The full SRT format content string for the highlights."),
        "ffmpegCommands": _string(
            "The raw FFmpeg command lines to cut, resize, and subtitle the clips."
        ),
        "schedule": {
            "type": "array",
            "items": _object(
                {
                    "day": _string("Day of the week (Day 1 - Day 7)"),
                    "platform": _string(),
                    "time": _string("Best local posting time"),
                    "contentTitle": _string(),
                }
            ),
        },
        "analyticsReport": _object(
            {
                "topClip": _string(),
                "bestHashtags": _string_list(),
                "improvements": _string_list(),
            }
        ),
    }
)


@dataclass(frozen=True)
class ContentPart:
    """One request part: either text or inline base64 media."""

    text: Optional[str] = None
    inline_data: Optional[str] = None
    mime_type: Optional[str] = None

    @property
    def is_media(self) -> bool:
        return self.inline_data is not None


@dataclass(frozen=True)
class GenerationRequest:
    system_instruction: str
    response_schema: Dict[str, Any]
    parts: List[ContentPart] = field(default_factory=list)


def build_request(request: AnalysisRequest) -> GenerationRequest:
    """Embed the normalized content and engagement context into a request."""
    if request.content_kind is ContentKind.VIDEO_BINARY:
        parts = [
            ContentPart(inline_data=request.content, mime_type=request.media_type),
            ContentPart(text=VIDEO_PROMPT),
        ]
    else:
        parts = [ContentPart(text=f'Raw Transcript or Content URL: """{request.content}"""')]

    parts.append(ContentPart(text=f'Engagement Context: """{request.engagement_context}"""'))

    return GenerationRequest(
        system_instruction=SYSTEM_INSTRUCTION,
        response_schema=RESPONSE_SCHEMA,
        parts=parts,
    )
