"""Configuration management for VidGenius."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

# ── Hardcoded defaults ─────────────────────────────────────────────────────
DEFAULT_MODEL = "gemini/gemini-2.5-flash"
TEMPERATURE = 0.7
MAX_UPLOAD_BYTES = 20 * 1024 * 1024  # 20 MiB
DEFAULT_ENGAGEMENT = "Views: 1000, Likes: 150, Comments: 20"
INPUT_PLACEHOLDER = "input.mp4"
OUTPUT_DIR = "./vidgenius_output"
SETTINGS_FILE = "settings.yaml"


class LLMConfig(BaseModel):
    """Structured-generation provider configuration."""

    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    api_base: Optional[str] = None


class Config(BaseModel):
    """Top-level application configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    engagement_default: str = DEFAULT_ENGAGEMENT
    # Seconds; None means the analysis call may run as long as the provider allows.
    request_timeout: Optional[float] = None
    output_dir: str = OUTPUT_DIR

    @classmethod
    def load_from_file(cls, path: str | Path) -> Config:
        """Load config from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def save_to_file(self, path: str | Path) -> None:
        """Save config to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
