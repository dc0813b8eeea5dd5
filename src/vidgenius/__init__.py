"""VidGenius - turn long-form video into short-form assets.

Feed a transcript, a video file or a video link and VidGenius returns a
cleaned transcript, highlight clips, per-platform SEO metadata, captions,
ffmpeg cut commands, a posting schedule and an analytics report.
"""

__version__ = "1.0.0"

from .config import Config
from .llm_client import LLMClient
from .models import (
    AnalysisResult,
    BinaryUpload,
    ExternalReference,
    TextInput,
)
from .pipeline import AnalysisPipeline, AnalysisSession

__all__ = [
    "Config",
    "LLMClient",
    "AnalysisResult",
    "BinaryUpload",
    "ExternalReference",
    "TextInput",
    "AnalysisPipeline",
    "AnalysisSession",
]
