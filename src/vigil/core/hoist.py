"""Recover vigil's own flags from the trailing ssh argument vector.

The CLI hands everything after the destination to ssh, so ``vigil host --kill``
would otherwise pass ``--kill`` straight to ssh. :func:`hoist_args` scans the
vector once, left to right, removing the flags it recognises and turning them
into structured fields.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from vigil.core.shell import ensure_tty
from vigil.models import ATTACH_FLAGS, KILL_FLAG, LIST_FLAG, HoistedArgs, ModeFlag


def looks_like_session_name(token: str) -> bool:
    # Purely syntactic: a name containing "@" or ":" is taken for a destination.
    # An empty token is never a session name and stays with the ssh arguments.
    return bool(token) and not token.startswith("-") and "@" not in token and ":" not in token


def _take_optional_name(tokens: List[str], index: int) -> ModeFlag:
    if index < len(tokens) and looks_like_session_name(tokens[index]):
        return ModeFlag.named(tokens.pop(index))
    return ModeFlag.bare()


def hoist_args(
    tokens: Sequence[str],
    *,
    list_mode: bool = False,
    attach: Optional[ModeFlag] = None,
    kill: Optional[ModeFlag] = None,
) -> HoistedArgs:
    """Extract ``--list``, ``--attach``/``--select`` and ``--kill`` from ``tokens``.

    Already-set modes (``list_mode``, ``attach``, ``kill``) are kept and their
    flags are left in place. The returned ssh arguments always request a TTY.
    """

    remaining = list(tokens)
    attach = attach or ModeFlag.unset()
    kill = kill or ModeFlag.unset()

    index = 0
    while index < len(remaining):
        token = remaining[index]
        if token == LIST_FLAG and not list_mode:
            list_mode = True
            del remaining[index]
            continue
        if token in ATTACH_FLAGS and not attach.is_set:
            del remaining[index]
            attach = _take_optional_name(remaining, index)
            continue
        if token == KILL_FLAG and not kill.is_set:
            del remaining[index]
            kill = _take_optional_name(remaining, index)
            continue
        index += 1

    return HoistedArgs(
        ssh_args=ensure_tty(remaining),
        list_mode=list_mode,
        attach=attach,
        kill=kill,
    )


__all__ = ["hoist_args", "looks_like_session_name"]
