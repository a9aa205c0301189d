"""
Terminal adapters: line/key input providers and a plain-text renderer.
"""

import logging
from collections.abc import Callable

import typer

from flashdeck.application.intents import Intent, parse_intent
from flashdeck.application.session import ReviewView
from flashdeck.domain.constants import GAUGE_WIDTH
from flashdeck.domain.models import Side
from flashdeck.domain.ports import InputProvider, Renderer

logger = logging.getLogger(__name__)


def _prompt_line() -> str:
    return typer.prompt(">", default="", show_default=False, prompt_suffix=" ")


class LineInputProvider(InputProvider):
    """Reads one text command per line. End of input counts as quit."""

    def __init__(self, commands: dict[str, Intent], read_line: Callable[[], str] | None = None):
        self.commands = commands
        self._read_line = read_line or _prompt_line

    def next_intent(self) -> Intent:
        try:
            raw = self._read_line()
        except (typer.Abort, EOFError, KeyboardInterrupt):
            return Intent.QUIT
        intent = parse_intent(raw, self.commands)
        if intent is Intent.UNKNOWN:
            logger.debug(f"Unknown command {raw!r}")
        return intent


class KeyInputProvider(InputProvider):
    """Reads single key presses without waiting for Enter."""

    def __init__(self, keys: dict[str, Intent], read_key: Callable[[], str] | None = None):
        self.keys = keys
        self._read_key = read_key or typer.getchar

    def next_intent(self) -> Intent:
        try:
            key = self._read_key()
        except (EOFError, KeyboardInterrupt):
            return Intent.QUIT
        return parse_intent(key, self.keys)


def progress_gauge(position: int, total: int, width: int = GAUGE_WIDTH) -> str:
    """Text gauge such as ``[#####-----]`` for ``position`` of ``total``."""
    filled = round(width * position / total) if total else 0
    return "[" + "#" * filled + "-" * (width - filled) + "]"


class TerminalRenderer(Renderer):
    def __init__(self, hint: str = "", clear_screen: bool = False):
        self.hint = hint
        self.clear_screen = clear_screen

    def render(self, view: ReviewView) -> None:
        if self.clear_screen:
            typer.clear()

        typer.secho(
            f"{view.mode} {progress_gauge(view.position, view.total)} {view.position}/{view.total}",
            bold=True,
        )
        label = "Front" if view.side is Side.FRONT else "Back"
        color = "cyan" if view.side is Side.FRONT else "green"
        typer.secho(f"{label}: {view.text}", fg=color)

        if view.correct is not None and view.incorrect is not None:
            typer.echo(f"correct: {view.correct}  incorrect: {view.incorrect}")
        if self.hint:
            typer.secho(self.hint, dim=True)

    def notify(self, message: str) -> None:
        typer.secho(message, fg="yellow")
