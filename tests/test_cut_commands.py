"""Tests for locally derived ffmpeg cut commands."""

from vidgenius.models.analysis import Highlight
from vidgenius.pipeline.cut_commands import (
    FALLBACK_CUT_COMMAND,
    build_cut_script,
    derive_cut_command,
    derive_cut_commands,
)


def _highlight(timestamp: str, title: str = "Clip") -> Highlight:
    return Highlight(
        timestamp=timestamp, snippet="s", reason="r", title=title, visual_prompt="v"
    )


class TestDeriveCutCommand:
    def test_first_clip(self):
        assert derive_cut_command("00:15 - 00:45", 0) == (
            "ffmpeg -i input.mp4 -ss 00:15 -to 00:45 -c copy clip_1.mp4"
        )

    def test_index_is_one_based_in_filename(self):
        assert derive_cut_command("01:00 - 01:30", 2).endswith("clip_3.mp4")

    def test_marks_are_trimmed(self):
        cmd = derive_cut_command("  00:05   -00:10 ", 0)
        assert "-ss 00:05 -to 00:10 " in cmd

    def test_malformed_falls_back(self):
        for idx in (0, 1, 7):
            assert derive_cut_command("malformed", idx) == FALLBACK_CUT_COMMAND

    def test_too_many_separators_fall_back(self):
        assert derive_cut_command("00:10 - 00:20 - 00:30", 0) == FALLBACK_CUT_COMMAND

    def test_missing_end_falls_back(self):
        assert derive_cut_command("00:10 -", 0) == FALLBACK_CUT_COMMAND

    def test_empty_falls_back(self):
        assert derive_cut_command("", 0) == FALLBACK_CUT_COMMAND

    def test_fallback_is_full_copy(self):
        assert FALLBACK_CUT_COMMAND == "ffmpeg -i input.mp4 -c copy clip.mp4"

    def test_idempotent(self):
        assert derive_cut_command("00:15 - 00:45", 4) == derive_cut_command("00:15 - 00:45", 4)


class TestCutScript:
    def test_commands_follow_highlight_order(self):
        cmds = derive_cut_commands([_highlight("00:01 - 00:02"), _highlight("bad")])
        assert cmds[0].endswith("clip_1.mp4")
        assert cmds[1] == FALLBACK_CUT_COMMAND

    def test_script_has_shebang_and_one_command_per_clip(self):
        script = build_cut_script(
            [_highlight("00:01 - 00:02", "First\nline"), _highlight("00:03 - 00:04")]
        )
        lines = script.splitlines()
        assert lines[0] == "#!/bin/sh"
        assert sum(1 for line in lines if line.startswith("ffmpeg ")) == 2
        assert "# 1. First line (00:01 - 00:02)" in lines
        assert script.endswith("\n")
