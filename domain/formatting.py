from __future__ import annotations

from typing import Sequence

_RESET = "\x1b[0m"

# 24-bit foreground colours, matching the named colours of the CSS palette.
_FOREGROUND = {
    "red": "\x1b[38;2;255;0;0m",
    "green": "\x1b[38;2;0;128;0m",
    "blue": "\x1b[38;2;0;0;255m",
}


def format_list(items: Sequence[str]) -> str:
    """Render items as ``['a', 'b']``."""
    if not items:
        return "[]"
    return "[" + ", ".join(f"'{item}'" for item in items) + "]"


def format_colored(text: str, color: str) -> str:
    """Wrap text in an ANSI foreground colour; unknown colours pass through."""
    code = _FOREGROUND.get(color)
    if code is None:
        return text
    return f"{code}{text}{_RESET}"
