"""Content analysis pipeline stages."""

from .analyzer import AnalysisPipeline, AnalysisSession
from .cut_commands import (
    FALLBACK_CUT_COMMAND,
    build_cut_script,
    derive_cut_command,
    derive_cut_commands,
)
from .decoder import decode_result
from .normalizer import load_transcript_file, load_video_file, normalize
from .request_builder import (
    RESPONSE_SCHEMA,
    SYSTEM_INSTRUCTION,
    ContentPart,
    GenerationRequest,
    build_request,
)

__all__ = [
    "AnalysisPipeline",
    "AnalysisSession",
    "FALLBACK_CUT_COMMAND",
    "build_cut_script",
    "derive_cut_command",
    "derive_cut_commands",
    "decode_result",
    "load_transcript_file",
    "load_video_file",
    "normalize",
    "RESPONSE_SCHEMA",
    "SYSTEM_INSTRUCTION",
    "ContentPart",
    "GenerationRequest",
    "build_request",
]
