"""Tests for terminal rendering of an analysis result."""

import io

from rich.console import Console

from vidgenius.models.analysis import AnalysisResult
from vidgenius.tui.results import render_result


def _render(sample_payload, sections=None) -> str:
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    render_result(AnalysisResult.model_validate(sample_payload), console, sections=sections)
    return buf.getvalue()


class TestRenderResult:
    def test_all_sections_by_default(self, sample_payload):
        out = _render(sample_payload)
        for heading in ("Viral Clips", "SEO Metadata", "Cleaned Transcript",
                        "Captions (.srt)", "FFmpeg Scripts", "Schedule", "Analytics"):
            assert heading in out

    def test_highlights_show_derived_cut_command(self, sample_payload):
        out = _render(sample_payload, ["highlights"])
        assert "ffmpeg -i input.mp4 -ss 00:15 -to 00:45 -c copy clip_1.mp4" in out
        assert "ffmpeg -i input.mp4 -c copy clip.mp4" in out

    def test_only_requested_sections(self, sample_payload):
        out = _render(sample_payload, ["schedule"])
        assert "Schedule" in out
        assert "Day 1" in out
        assert "Viral Clips" not in out
        assert "Welcome back" not in out
        assert "Hook in the first second" not in out

    def test_seo_platform_order(self, sample_payload):
        out = _render(sample_payload, ["seo"])
        positions = [out.index(label) for label in
                     ("YouTube Shorts", "TikTok", "Instagram Reels", "Facebook")]
        assert positions == sorted(positions)
