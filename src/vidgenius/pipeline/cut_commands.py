"""Per-highlight ffmpeg cut commands, derived locally from timestamps."""

from __future__ import annotations

from typing import List, Sequence

from ..config import INPUT_PLACEHOLDER
from ..models.analysis import Highlight

FALLBACK_CUT_COMMAND = f"ffmpeg -i {INPUT_PLACEHOLDER} -c copy clip.mp4"


def derive_cut_command(timestamp: str, index: int) -> str:
    """Stream-copy cut for one highlight.

    ``timestamp`` is expected as "MM:SS - MM:SS"; anything that does not split
    into two non-empty marks gets the full-file copy fallback instead.
    """
    marks = [m.strip() for m in timestamp.split("-")]
    if len(marks) != 2 or not all(marks):
        return FALLBACK_CUT_COMMAND
    start, end = marks
    return (
        f"ffmpeg -i {INPUT_PLACEHOLDER} -ss {start} -to {end} "
        f"-c copy clip_{index + 1}.mp4"
    )


def derive_cut_commands(highlights: Sequence[Highlight]) -> List[str]:
    return [derive_cut_command(h.timestamp, i) for i, h in enumerate(highlights)]


def build_cut_script(highlights: Sequence[Highlight]) -> str:
    """Shell script cutting every highlight from the placeholder input."""
    lines = ["#!/bin/sh", "set -e", ""]
    for i, h in enumerate(highlights):
        title = " ".join(h.title.split())
        lines.append(f"# {i + 1}. {title} ({h.timestamp})")
        lines.append(derive_cut_command(h.timestamp, i))
    return "\n".join(lines) + "\n"
