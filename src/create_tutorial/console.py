"""Colored terminal output for user facing progress messages."""

from __future__ import annotations

import os
import sys
from typing import TextIO

__all__ = ["Console"]


_COLORS = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
}


def _supports_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    """Write status lines to ``stdout`` and diagnostics to ``stderr``."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        *,
        color: bool | None = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._color = color

    def _paint(self, message: str, color: str | None, stream: TextIO) -> str:
        enabled = self._color if self._color is not None else _supports_color(stream)
        if not enabled or color is None:
            return message
        codes = "".join(_COLORS[name] for name in color.split("+"))
        return f"{codes}{message}{_COLORS['reset']}"

    def echo(self, message: str = "", color: str | None = None, *, err: bool = False) -> None:
        stream = self.stderr if err else self.stdout
        print(self._paint(message, color, stream), file=stream, flush=True)

    def info(self, message: str) -> None:
        self.echo(f"ℹ️  {message}", "cyan")

    def success(self, message: str) -> None:
        self.echo(f"✅ {message}", "green")

    def warning(self, message: str) -> None:
        self.echo(f"⚠️  {message}", "yellow", err=True)

    def error(self, message: str) -> None:
        self.echo(f"❌ {message}", "red", err=True)

    def hint(self, message: str) -> None:
        self.echo(f"ℹ️  {message}", "cyan", err=True)

    def step(self, index: int, total: int, message: str) -> None:
        self.echo()
        self.echo(f"Step {index}/{total}: {message}", "cyan")
