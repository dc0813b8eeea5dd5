"""Interactive settings screen."""

from __future__ import annotations

import os
from typing import Optional

import questionary
from questionary import Style
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import Config

MENU_STYLE = Style([
    ("qmark", "fg:ansibrightcyan bold"),
    ("question", "fg:ansiwhite bold"),
    ("answer", "fg:ansicyan bold"),
    ("pointer", "fg:ansibrightmagenta bold"),
    ("highlighted", "fg:ansibrightcyan bold"),
    ("selected", "fg:ansicyan"),
])

# Providers whose models accept schema-constrained JSON output.
# Only Gemini takes inline video; the others are text/URL only.
PROVIDERS = {
    "gemini": {
        "name": "Google Gemini",
        "models": [
            "gemini/gemini-2.5-flash",
            "gemini/gemini-2.5-pro",
            "gemini/gemini-2.0-flash",
        ],
        "env_var": "GEMINI_API_KEY",
    },
    "openai": {
        "name": "OpenAI (text only)",
        "models": ["gpt-4o", "gpt-4o-mini"],
        "env_var": "OPENAI_API_KEY",
    },
    "openrouter": {
        "name": "OpenRouter",
        "models": ["openrouter/google/gemini-2.5-flash"],
        "env_var": "OPENROUTER_API_KEY",
    },
}


def mask_key(key: Optional[str]) -> str:
    if not key:
        return "not set"
    if len(key) > 12:
        return f"{key[:4]}...{key[-4:]}"
    return "***"


def settings_table(cfg: Config) -> Table:
    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 2), expand=True)
    table.add_column("Setting", min_width=20)
    table.add_column("Value", style="green")

    table.add_row("  Model", cfg.llm.model)
    table.add_row("  API key", mask_key(cfg.llm.api_key))
    table.add_row("  API base", cfg.llm.api_base or "default")
    table.add_row("  Engagement", cfg.engagement_default)
    timeout = f"{cfg.request_timeout:.0f}s" if cfg.request_timeout else "none"
    table.add_row("  Timeout", timeout)
    return table


class SettingsScreen:
    """Edit model, API key and default engagement text."""

    def __init__(self, config: Config) -> None:
        self.config = config.model_copy(deep=True)
        self.console = Console()

    def _print_header(self) -> None:
        self.console.print(
            Panel(
                settings_table(self.config),
                title="[bold cyan]VidGenius Settings[/bold cyan]",
                border_style="cyan",
                padding=(1, 2),
            )
        )
        self.console.print()

    def _configure_model(self) -> None:
        provider_choices = []
        for key, info in PROVIDERS.items():
            has_key = bool(os.environ.get(info["env_var"]))
            status = "✓" if has_key else "○"
            provider_choices.append(questionary.Choice(f"{status} {info['name']}", value=key))
        provider_choices.append(questionary.Choice("← Back", value="_back"))

        provider = questionary.select(
            "Select provider:", choices=provider_choices, style=MENU_STYLE
        ).ask()
        if provider is None or provider == "_back":
            return

        models = list(PROVIDERS[provider]["models"]) + ["Custom...", "← Back"]
        model = questionary.select("Select model:", choices=models, style=MENU_STYLE).ask()
        if model is None or model == "← Back":
            return
        if model == "Custom...":
            model = questionary.text(
                "Enter model identifier:", default=self.config.llm.model, style=MENU_STYLE
            ).ask()
        if not model:
            return

        self.config.llm.model = model
        self.config.llm.api_base = None
        self.console.print(f"[green]Updated model to {model}[/green]")
        self._configure_api_key(PROVIDERS[provider]["name"])

    def _configure_api_key(self, label: str = "model") -> None:
        hint = " (Enter to keep current)" if self.config.llm.api_key else ""
        key = questionary.password(f"API key for {label}{hint}:", style=MENU_STYLE).ask()
        if key:
            self.config.llm.api_key = key
            self.console.print("[green]API key updated[/green]")

    def _configure_engagement(self) -> None:
        text = questionary.text(
            "Default engagement stats:",
            default=self.config.engagement_default,
            style=MENU_STYLE,
        ).ask()
        if text and text.strip():
            self.config.engagement_default = text.strip()

    def _configure_timeout(self) -> None:
        current = str(int(self.config.request_timeout)) if self.config.request_timeout else ""
        raw = questionary.text(
            "Analysis timeout in seconds (blank for none):", default=current, style=MENU_STYLE
        ).ask()
        if raw is None:
            return
        raw = raw.strip()
        if not raw:
            self.config.request_timeout = None
        elif raw.isdigit() and int(raw) > 0:
            self.config.request_timeout = float(raw)
        else:
            self.console.print("[red]Timeout must be a positive whole number[/red]")

    def run(self) -> Config:
        """Run settings menu."""
        while True:
            self.console.clear()
            self._print_header()

            choice = questionary.select(
                "What would you like to configure?",
                choices=[
                    questionary.Choice("  Model", value="model"),
                    questionary.Choice("  API key", value="api_key"),
                    questionary.Choice("  Default engagement", value="engagement"),
                    questionary.Choice("  Timeout", value="timeout"),
                    questionary.Choice("  Done", value="_done"),
                ],
                style=MENU_STYLE,
            ).ask()

            if choice is None or choice == "_done":
                break
            elif choice == "model":
                self._configure_model()
            elif choice == "api_key":
                self._configure_api_key()
            elif choice == "engagement":
                self._configure_engagement()
            elif choice == "timeout":
                self._configure_timeout()

        return self.config
