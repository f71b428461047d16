"""Prompt port interface for operator interaction."""

from typing import Literal, Protocol

MessageStyle = Literal["info", "heading", "notice", "success", "warning", "error", "forensic"]


class PromptPort(Protocol):
    """Port interface for blocking, line-based operator prompts."""

    def ask(self, prompt: str, default: str = "") -> str:
        """Read one line from the operator, returning ``default`` for empty input."""
        ...

    def show(self, message: str, *, style: MessageStyle = "info") -> None:
        """Display ``message`` to the operator."""
        ...
