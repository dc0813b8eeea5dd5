"""Tests for asset export."""

import json

from vidgenius.export import export_assets, format_social_post
from vidgenius.models.analysis import AnalysisResult, SocialMetadata


class TestFormatSocialPost:
    def test_hashtags_normalized(self):
        meta = SocialMetadata(title="T", description="D", tags=["#one", "two"])
        assert format_social_post(meta) == "T\n\nD\n\n#one #two"


class TestExportAssets:
    def test_writes_all_files(self, tmp_path, sample_payload):
        result = AnalysisResult.model_validate(sample_payload)
        paths = export_assets(result, tmp_path / "out")
        names = {p.name for p in paths}
        assert names == {
            "result.json", "cleaned_transcript.txt", "captions.srt",
            "ffmpeg_commands.sh", "cut_clips.sh", "seo.md",
        }
        out = tmp_path / "out"
        assert json.loads((out / "result.json").read_text()) == sample_payload
        assert (out / "captions.srt").read_text().startswith("1\n00:00:15,000")

    def test_cut_script_uses_fallback_for_bad_timestamp(self, tmp_path, sample_payload):
        result = AnalysisResult.model_validate(sample_payload)
        export_assets(result, tmp_path)
        script = (tmp_path / "cut_clips.sh").read_text()
        assert "-ss 00:15 -to 00:45 -c copy clip_1.mp4" in script
        assert "ffmpeg -i input.mp4 -c copy clip.mp4" in script

    def test_seo_sections_in_platform_order(self, tmp_path, sample_payload):
        result = AnalysisResult.model_validate(sample_payload)
        export_assets(result, tmp_path)
        seo = (tmp_path / "seo.md").read_text()
        positions = [seo.index(f"## {label}") for label in
                     ("YouTube Shorts", "TikTok", "Instagram Reels", "Facebook")]
        assert positions == sorted(positions)
