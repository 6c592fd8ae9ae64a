"""Shell quoting and argument-vector helpers."""

from __future__ import annotations

import shlex
from typing import Iterable, List

TTY_FLAGS = ("-t", "-tt")
TTY_FLAG = "-t"


def shell_escape(value: str) -> str:
    """Quote ``value`` so a POSIX shell reads it back as one literal word.

    Unlike :func:`shlex.quote` the result is always wrapped in single quotes,
    so ``#{session_name}`` can never be mistaken for a comment.
    """

    return "'" + value.replace("'", "'\\''") + "'"


def split_extra_args(raw: str) -> List[str]:
    """Lex free-form extra arguments; malformed input yields nothing."""

    if not raw.strip():
        return []
    try:
        return shlex.split(raw)
    except ValueError:
        return []


def has_tty_flag(args: Iterable[str]) -> bool:
    return any(arg in TTY_FLAGS for arg in args)


def ensure_tty(args: Iterable[str]) -> List[str]:
    output = list(args)
    if not has_tty_flag(output):
        output.insert(0, TTY_FLAG)
    return output


def strip_tty(args: Iterable[str]) -> List[str]:
    return [arg for arg in args if arg not in TTY_FLAGS]


__all__ = [
    "TTY_FLAG",
    "TTY_FLAGS",
    "ensure_tty",
    "has_tty_flag",
    "shell_escape",
    "split_extra_args",
    "strip_tty",
]
