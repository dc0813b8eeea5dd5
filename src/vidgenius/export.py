"""Write an analysis result out as ready-to-use asset files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from .models.analysis import AnalysisResult, SocialMetadata
from .pipeline.cut_commands import build_cut_script

logger = logging.getLogger(__name__)


def format_hashtags(tags: List[str]) -> str:
    return " ".join(f"#{tag.replace('#', '')}" for tag in tags)


def format_social_post(meta: SocialMetadata) -> str:
    """Title, description and hashtags as one paste-ready block."""
    return f"{meta.title}\n\n{meta.description}\n\n{format_hashtags(meta.tags)}"


def _seo_markdown(result: AnalysisResult) -> str:
    sections = []
    for label, meta in result.seo.platforms():
        sections.append(f"## {label}\n\n{format_social_post(meta)}\n")
    return "# SEO Metadata\n\n" + "\n".join(sections)


def export_assets(result: AnalysisResult, out_dir: str | Path) -> List[Path]:
    """Write every asset of ``result`` under ``out_dir``.

    Returns the written paths. Existing files with the same names are
    overwritten.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    files = {
        "result.json": json.dumps(result.to_wire(), indent=2, ensure_ascii=False) + "\n",
        "cleaned_transcript.txt": result.cleaned_transcript.rstrip("\n") + "\n",
        "captions.srt": result.captions.rstrip("\n") + "\n",
        "ffmpeg_commands.sh": result.ffmpeg_commands.rstrip("\n") + "\n",
        "cut_clips.sh": build_cut_script(result.highlights),
        "seo.md": _seo_markdown(result),
    }

    written = []
    for name, text in files.items():
        path = out / name
        path.write_text(text, encoding="utf-8")
        written.append(path)

    logger.info("Exported %d assets to %s", len(written), out)
    return written
