"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> None:
    prefix = fallback if no_emoji() else symbol
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((prefix, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a warning line in red."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _emit("✅", "✓", message, "green")