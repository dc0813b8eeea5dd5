"""CLI entry point for VidGenius."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Awaitable, Callable, Optional

import click
import questionary
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from .config import SETTINGS_FILE, Config
from .errors import InputError
from .export import export_assets
from .llm_client import LLMClient
from .models.analysis import AnalysisResult
from .models.inputs import ExternalReference, InputSource, TextInput
from .pipeline.analyzer import AnalysisPipeline, AnalysisSession
from .pipeline.normalizer import load_transcript_file, load_video_file
from .tui.results import SECTIONS, render_result
from .tui.settings import MENU_STYLE, SettingsScreen, settings_table

console = Console()

URL_NOTE = (
    "Note: links are passed to the model as text only. They work best for popular "
    "videos with accessible captions; for personal videos, upload the file instead."
)

SourceFactory = Callable[[], Awaitable[InputSource]]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _print_settings(cfg: Config) -> None:
    console.print(
        Panel(
            settings_table(cfg),
            title="[bold cyan]Current Settings[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
    )
    console.print()


def _run_analysis(
    cfg: Config,
    make_source: SourceFactory,
    engagement: Optional[str],
    timeout: Optional[float] = None,
) -> Optional[AnalysisResult]:
    """Load the input, run one analysis and report failures to the console."""
    session = AnalysisSession(
        AnalysisPipeline(LLMClient(cfg)),
        timeout=timeout if timeout is not None else cfg.request_timeout,
    )

    async def _go() -> Optional[AnalysisResult]:
        source = await make_source()
        return await session.submit(source, engagement)

    try:
        with console.status(f"[bold magenta]Processing with {cfg.llm.model}...[/]"):
            result = asyncio.run(_go())
    except InputError as e:
        console.print(f"[bold red]Error:[/] {e}")
        return None

    if result is None:
        console.print(f"[bold red]Error:[/] {session.error}")
    return result


def _export(result: AnalysisResult, out_dir: str) -> None:
    paths = export_assets(result, out_dir)
    console.print(f"[green]Saved {len(paths)} files to {out_dir}[/green]")
    for path in paths:
        console.print(f"  [dim]{path}[/dim]")


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", default=SETTINGS_FILE, show_default=True,
              help="Settings YAML file.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """Turn transcripts and videos into short-form content assets."""
    _setup_logging(verbose)
    ctx.obj = {"config_path": config_path, "config": Config.load_from_file(config_path)}
    if ctx.invoked_subcommand is None:
        _interactive(ctx.obj["config"], config_path)


@cli.command()
@click.option("--text", help="Raw transcript text.")
@click.option("--transcript", type=click.Path(dir_okay=False), help="Transcript .txt file.")
@click.option("--video", type=click.Path(dir_okay=False), help="Video file (max 20 MB).")
@click.option("--url", help="Video URL, passed to the model as text context.")
@click.option("--media-type", help="Override the detected video media type.")
@click.option("--engagement", help="Engagement stats, e.g. 'Views: 1000, Likes: 150'.")
@click.option("--export", "export_dir", type=click.Path(file_okay=False),
              help="Write all assets to this directory.")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON.")
@click.option("--timeout", type=float, help="Give up after this many seconds.")
@click.option("--section", "sections", multiple=True,
              type=click.Choice([key for key, _ in SECTIONS]),
              help="Only show these sections (repeatable).")
@click.pass_obj
def analyze(
    obj: dict,
    text: Optional[str],
    transcript: Optional[str],
    video: Optional[str],
    url: Optional[str],
    media_type: Optional[str],
    engagement: Optional[str],
    export_dir: Optional[str],
    as_json: bool,
    timeout: Optional[float],
    sections: tuple,
) -> None:
    """Analyze one transcript, video file or video link."""
    given = [opt for opt, val in
             (("--text", text), ("--transcript", transcript), ("--video", video), ("--url", url))
             if val is not None]
    if len(given) != 1:
        raise click.UsageError("Pass exactly one of --text, --transcript, --video, --url.")

    cfg: Config = obj["config"]

    async def make_source() -> InputSource:
        if text is not None:
            return TextInput(text)
        if transcript is not None:
            return await load_transcript_file(transcript)
        if video is not None:
            return await load_video_file(video, media_type)
        return ExternalReference(url)

    if url is not None and not as_json:
        console.print(f"[dim]{URL_NOTE}[/dim]")

    result = _run_analysis(cfg, make_source, engagement or cfg.engagement_default, timeout)
    if result is None:
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_wire(), indent=2, ensure_ascii=False))
    else:
        render_result(result, console, sections=list(sections) or None)

    if export_dir:
        _export(result, export_dir)


@cli.command()
@click.pass_obj
def settings(obj: dict) -> None:
    """Edit settings interactively."""
    cfg = SettingsScreen(obj["config"]).run()
    cfg.save_to_file(obj["config_path"])
    console.print(f"[green]Settings saved to {obj['config_path']}[/green]")


def _prompt_source() -> Optional[SourceFactory]:
    mode = questionary.select(
        "Input type:",
        choices=[
            questionary.Choice("  Paste transcript", value="text"),
            questionary.Choice("  Transcript file (.txt)", value="transcript"),
            questionary.Choice("  Upload video", value="video"),
            questionary.Choice("  YouTube link", value="url"),
        ],
        style=MENU_STYLE,
    ).ask()
    if mode is None:
        return None

    if mode == "text":
        value = questionary.text(
            "Paste your raw, unedited transcript (Esc then Enter to finish):",
            multiline=True, style=MENU_STYLE,
        ).ask()
        if not value or not value.strip():
            return None

        async def from_text() -> InputSource:
            return TextInput(value)
        return from_text

    if mode == "url":
        console.print(f"[dim]{URL_NOTE}[/dim]")
        link = questionary.text("YouTube video URL:", style=MENU_STYLE).ask()
        if not link or not link.strip():
            return None

        async def from_url() -> InputSource:
            return ExternalReference(link)
        return from_url

    path = questionary.path("File path:", style=MENU_STYLE).ask()
    if not path:
        return None

    async def from_file() -> InputSource:
        if mode == "video":
            return await load_video_file(path)
        return await load_transcript_file(path)
    return from_file


def _interactive_analyze(cfg: Config) -> None:
    make_source = _prompt_source()
    if make_source is None:
        return

    engagement = questionary.text(
        "Engagement data (optional):", default=cfg.engagement_default, style=MENU_STYLE
    ).ask()

    result = _run_analysis(cfg, make_source, engagement)
    if result is None:
        return

    render_result(result, console)
    if questionary.confirm(f"Export assets to {cfg.output_dir}?", default=False,
                           style=MENU_STYLE).ask():
        _export(result, cfg.output_dir)


def _interactive(cfg: Config, config_path: str) -> None:
    """Interactive menu loop."""
    while True:
        console.clear()
        _print_settings(cfg)

        choice = questionary.select(
            "What would you like to do?",
            choices=[
                questionary.Choice("  Analyze content", value="analyze"),
                questionary.Choice("  Settings", value="settings"),
                questionary.Choice("  Exit", value="exit"),
            ],
            style=MENU_STYLE,
        ).ask()

        if choice is None or choice == "exit":
            break
        elif choice == "analyze":
            try:
                _interactive_analyze(cfg)
            except KeyboardInterrupt:
                console.print("\n[yellow]Interrupted.[/yellow]")
            click.prompt("\nPress Enter to continue", default="", show_default=False)
        elif choice == "settings":
            cfg = SettingsScreen(cfg).run()
            cfg.save_to_file(config_path)
            console.print(f"[green]Settings saved to {config_path}[/green]")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
