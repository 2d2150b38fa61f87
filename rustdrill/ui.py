"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_console = Console(highlight=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, style: str) -> str:
    line = f"{symbol} {message}"
    _console.print(Text(line, style=style), soft_wrap=True)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    symbol = "!" if no_emoji() else "⚠️ "
    return _emit(symbol, message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    symbol = "✓" if no_emoji() else "✅"
    return _emit(symbol, message, "green")