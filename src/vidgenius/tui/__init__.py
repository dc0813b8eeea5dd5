"""Terminal UI: result rendering and settings."""

from .results import render_result
from .settings import SettingsScreen

__all__ = ["render_result", "SettingsScreen"]
