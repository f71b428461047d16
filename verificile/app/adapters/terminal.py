"""Terminal prompt adapter using Typer's echo and prompt helpers."""

from __future__ import annotations

from typing import Any

import typer

from verificile.app.ports import MessageStyle, PromptPort

_STYLES: dict[str, dict[str, Any]] = {
    "info": {},
    "heading": {"fg": typer.colors.YELLOW, "bold": True},
    "notice": {"fg": typer.colors.CYAN},
    "success": {"fg": typer.colors.GREEN},
    "warning": {"fg": typer.colors.YELLOW},
    "error": {"fg": typer.colors.RED, "bold": True},
    "forensic": {"fg": typer.colors.MAGENTA},
}


class TerminalPrompter(PromptPort):
    """Read operator choices from the terminal and print styled messages."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def ask(self, prompt: str, default: str = "") -> str:
        value = typer.prompt(prompt, default=default, show_default=bool(default))
        return str(value)

    def show(self, message: str, *, style: MessageStyle = "info") -> None:
        if self.color:
            typer.secho(message, **_STYLES.get(style, {}))
        else:
            typer.echo(message)
