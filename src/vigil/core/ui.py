"""Console output and interactive session selection."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from rich.console import Console
from rich.text import Text

from vigil.errors import SelectionError

if TYPE_CHECKING:
    from vigil.models import Config

TAG = "[vigil]"
SELECT_PROMPT = "Enter number (or press Enter for 1): "

LineReader = Callable[[], str]

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _tagged(message: str, style: Optional[str] = None) -> Text:
    text = Text(f"{TAG} ", style="bold")
    text.append(message, style=style)
    return text


def status(message: str) -> None:
    err_console.print(_tagged(message))


def warn(message: str) -> None:
    err_console.print(_tagged(message, style="yellow"))


def error(message: str) -> None:
    err_console.print(_tagged(f"ERROR: {message}", style="red"))


def trace(message: str) -> None:
    err_console.print(_tagged(message, style="dim"))


def debug(config: Config, message: str) -> None:
    if config.debug:
        trace(message)


def emit(line: str) -> None:
    """Write one line of primary output to stdout."""

    console.print(Text(line))


def read_stdin_line() -> str:
    return sys.stdin.readline()


def select_session(
    action: str, sessions: Sequence[str], read_line: Optional[LineReader] = None
) -> str:
    """Ask the user to pick one of ``sessions`` by its 1-based number.

    An empty answer picks the first entry. Anything that is not a number
    counts as 0 and is rejected along with out-of-range numbers.
    """

    reader = read_line or read_stdin_line
    status(f"Select a session to {action}:")
    for idx, name in enumerate(sessions, start=1):
        err_console.print(Text(f"  {idx}. {name}"))
    err_console.print(SELECT_PROMPT, end="", markup=False)
    try:
        answer = reader().strip()
    except OSError as exc:
        raise SelectionError(f"failed to read selection: {exc}") from exc
    digits = answer[1:] if answer.startswith("+") else answer
    if not answer:
        idx = 1
    elif digits.isascii() and digits.isdigit():
        idx = int(digits)
    else:
        idx = 0
    if idx <= 0 or idx > len(sessions):
        raise SelectionError("invalid selection")
    return sessions[idx - 1]


__all__ = [
    "LineReader",
    "SELECT_PROMPT",
    "TAG",
    "console",
    "debug",
    "emit",
    "err_console",
    "error",
    "read_stdin_line",
    "select_session",
    "status",
    "trace",
    "warn",
]
