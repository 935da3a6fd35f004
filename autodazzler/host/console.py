"""Terminal implementation of the host dialogs."""

from __future__ import annotations

import logging
import math
import select
import sys
import time

import typer

from ..core.context import ConfirmationResult

logger = logging.getLogger(__name__)


def _stdin_is_interactive() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _wait_for_enter(timeout_s: float) -> bool:
    """Block up to ``timeout_s`` seconds; True when a line was entered."""
    try:
        ready, _, _ = select.select([sys.stdin], [], [], timeout_s)
    except (OSError, ValueError):
        # stdin cannot be polled (e.g. Windows consoles), only the timeout applies.
        time.sleep(timeout_s)
        return False
    if not ready:
        return False
    if not sys.stdin.readline():
        # End of input, only the timeout applies.
        time.sleep(timeout_s)
        return False
    return True


class ConsoleDialogs:
    """Blocking, titled prompts written to the terminal."""

    def __init__(self, acknowledge: bool | None = None) -> None:
        self._acknowledge = _stdin_is_interactive() if acknowledge is None else acknowledge

    def _show(self, message: str, title: str, color: str) -> None:
        typer.secho(title, fg=color, bold=True, err=True)
        typer.echo(message, err=True)
        if self._acknowledge:
            typer.prompt(
                "Press Enter to continue",
                default="",
                show_default=False,
                err=True,
            )

    def critical(self, message: str, title: str) -> None:
        self._show(message, title, typer.colors.RED)

    def information(self, message: str, title: str) -> None:
        self._show(message, title, typer.colors.BLUE)

    def ask_to_abort(
        self, message: str, timeout_s: float, interval_ms: int
    ) -> ConfirmationResult:
        """Show a countdown; Enter aborts every remaining render.

        Args:
            message: Prompt text, ``{seconds}`` is replaced with the time left
            timeout_s: Seconds before the prompt closes on its own
            interval_ms: Countdown refresh period

        Returns:
            ``ABORT`` when the user pressed Enter, ``CONTINUE`` on timeout
        """
        typer.secho("Autodazzler render error", fg=typer.colors.YELLOW, bold=True, err=True)
        interval_s = interval_ms / 1000
        deadline = time.monotonic() + timeout_s

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                typer.echo("", err=True)
                logger.debug("Abort prompt timed out, carrying on")
                return ConfirmationResult.CONTINUE

            text = message.format(seconds=math.ceil(remaining))
            typer.echo(f"\r{text} [Enter: cancel all renders]", nl=False, err=True)
            if _wait_for_enter(min(interval_s, remaining)):
                typer.echo("", err=True)
                return ConfirmationResult.ABORT

    def ask_for_configuration_path(self) -> str | None:
        path = typer.prompt(
            "Please provide a configuration file to Autodazzler (JSON)",
            default="",
            show_default=False,
            err=True,
        )
        path = path.strip()
        return path or None
