"""Rich rendering of a finished analysis."""

from __future__ import annotations

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..config import INPUT_PLACEHOLDER
from ..export import format_hashtags
from ..models.analysis import AnalysisResult
from ..pipeline.cut_commands import derive_cut_command

# Section key -> heading, in display order
SECTIONS = (
    ("highlights", "Viral Clips"),
    ("seo", "SEO Metadata"),
    ("clean", "Cleaned Transcript"),
    ("captions", "Captions (.srt)"),
    ("ffmpeg", "FFmpeg Scripts"),
    ("schedule", "Schedule"),
    ("analytics", "Analytics"),
)

_PLATFORM_STYLES = {
    "youtube": "red",
    "tiktok": "cyan",
    "instagram": "magenta",
}


def _platform_style(platform: str) -> str:
    lowered = platform.lower()
    for key, style in _PLATFORM_STYLES.items():
        if key in lowered:
            return style
    return "blue"


def _highlights(result: AnalysisResult) -> Group:
    panels = []
    for i, h in enumerate(result.highlights):
        body = Text()
        body.append(f"{h.timestamp}\n", style="bold cyan")
        body.append(f"“{h.snippet}”\n\n", style="italic")
        body.append("Why: ", style="dim")
        body.append(f"{h.reason}\n\n")
        body.append("Thumbnail prompt: ", style="dim")
        body.append(f"{h.visual_prompt}\n\n")
        body.append(derive_cut_command(h.timestamp, i), style="green")
        panels.append(
            Panel(body, title=f"[bold]{i + 1}. {h.title}[/bold]", border_style="magenta")
        )
    return Group(*panels)


def _seo(result: AnalysisResult) -> Group:
    panels = []
    for label, meta in result.seo.platforms():
        body = Text()
        body.append(f"{meta.title}\n\n", style="bold")
        body.append(f"{meta.description}\n\n")
        body.append(format_hashtags(meta.tags), style="blue")
        panels.append(Panel(body, title=label, border_style=_platform_style(label)))
    return Group(*panels)


def _schedule(result: AnalysisResult) -> Table:
    table = Table(expand=True)
    table.add_column("Day", style="bold")
    table.add_column("Time")
    table.add_column("Platform")
    table.add_column("Content")
    for item in result.schedule:
        table.add_row(
            item.day,
            item.time,
            Text(item.platform, style=_platform_style(item.platform)),
            item.content_title,
        )
    return table


def _analytics(result: AnalysisResult) -> Group:
    report = result.analytics_report
    text = Text()
    text.append("Top clip: ", style="dim")
    text.append(f"{report.top_clip}\n\n", style="bold")
    text.append("Best hashtags: ", style="dim")
    text.append(format_hashtags(report.best_hashtags) + "\n\n", style="blue")
    text.append("Improvements:\n", style="dim")
    for imp in report.improvements:
        text.append(f"  • {imp}\n")
    return Group(text, Text("Engagement projection is simulated.", style="dim italic"))


def _ffmpeg(result: AnalysisResult) -> Group:
    note = Text(
        f"Run these commands in your terminal. Ensure {INPUT_PLACEHOLDER} and the "
        "saved captions.srt are in the same folder.",
        style="dim",
    )
    return Group(note, Syntax(result.ffmpeg_commands, "bash", word_wrap=True))


def render_section(result: AnalysisResult, key: str):
    if key == "highlights":
        return _highlights(result)
    if key == "seo":
        return _seo(result)
    if key == "clean":
        return Text(result.cleaned_transcript)
    if key == "captions":
        return Text(result.captions)
    if key == "ffmpeg":
        return _ffmpeg(result)
    if key == "schedule":
        return _schedule(result)
    if key == "analytics":
        return _analytics(result)
    raise KeyError(key)


def render_result(
    result: AnalysisResult,
    console: Optional[Console] = None,
    sections: Optional[list[str]] = None,
) -> None:
    """Print the requested sections (all by default)."""
    console = console or Console()
    wanted = sections or [key for key, _ in SECTIONS]
    for key, heading in SECTIONS:
        if key not in wanted:
            continue
        console.print(Rule(f"[bold cyan]{heading}[/bold cyan]"))
        console.print(render_section(result, key))
        console.print()
