"""
reporter.py

Responsibility: Print colored one-line status messages to stdout.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

# ANSI foreground codes; 39 resets to the default foreground.
COLORS: dict[str, int] = {
    "red": 31,
    "green": 32,
    "yellow": 33,
    "cyan": 36,
}
_RESET = "\x1b[39m"


def colorize(text: str, color: str) -> str:
    try:
        code = COLORS[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color!r}") from None
    return f"\x1b[{code}m{text}{_RESET}"


def log(message: Any, color: str) -> str:
    """
    Print message in color and return the colored string.

    Empty messages print as an empty line; mappings are printed as JSON.
    """
    if not message:
        text = ""
    elif isinstance(message, Mapping):
        text = json.dumps(message, ensure_ascii=False)
    else:
        text = str(message)

    msg = colorize(text, color)
    print(msg)
    return msg


def error(message: Any = "") -> str:
    return log(message, "red")


def info(message: Any = "") -> str:
    return log(message, "cyan")


def warn(message: Any = "") -> str:
    return log(message, "yellow")


def success(message: Any = "") -> str:
    return log(message, "green")
