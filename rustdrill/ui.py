"""Coloured status lines printed while checking exercises."""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.text import Text


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> str:
    prefix = fallback if _no_emoji() else symbol
    text = Text(prefix, style=colour)
    text.append(" ")
    text.append(message, style=colour)
    console = Console(file=sys.stdout, soft_wrap=True, highlight=False, emoji=False)
    console.print(text)
    return text.plain


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit("✅", "✓", message, "green")