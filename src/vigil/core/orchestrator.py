"""Pick and run the single mode of an invocation: list, kill or attach."""

from __future__ import annotations

from typing import Optional

from vigil.core import ui
from vigil.core.ssh import SshExecutor
from vigil.core.tmux import TmuxManager
from vigil.core.ui import LineReader
from vigil.models import Config, FlagState, ModeFlag, ModeKind, OperatingMode


# ---------------------------------------------------------------------------
# Mode routines
# ---------------------------------------------------------------------------


def show_sessions(tmux: TmuxManager) -> None:
    """Print every remote session name on stdout, one per line."""

    sessions = tmux.list_sessions()
    if not sessions:
        ui.status("No tmux sessions found remotely.")
        return
    for name in sessions:
        ui.emit(name)


def kill_session(
    tmux: TmuxManager, target: ModeFlag, read_line: Optional[LineReader] = None
) -> Optional[str]:
    """Kill the named session, or one chosen interactively.

    Returns the killed session name, or ``None`` when there was nothing to kill.
    """

    if target.state is FlagState.NAMED:
        name = target.name
    else:
        sessions = tmux.list_sessions()
        if not sessions:
            ui.status("No tmux sessions found remotely to kill.")
            return None
        name = ui.select_session("kill", sessions, read_line)
    tmux.kill_session(name)
    ui.status(f"Killed session '{name}'.")
    return name


def resolve_attach_target(
    tmux: TmuxManager, target: ModeFlag, read_line: Optional[LineReader] = None
) -> str:
    config = tmux.config
    if target.state is FlagState.NAMED:
        return target.name
    if target.state is FlagState.UNSET:
        return config.default_session_name
    sessions = tmux.list_sessions()
    if sessions:
        return ui.select_session("attach", sessions, read_line)
    name = config.default_session_name
    ui.status(f"No tmux sessions found remotely; will create/attach to '{name}'.")
    return name


def attach_session(
    tmux: TmuxManager, target: ModeFlag, read_line: Optional[LineReader] = None
) -> str:
    name = resolve_attach_target(tmux, target, read_line)
    tmux.attach_session(name)
    return name


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(
    config: Config,
    mode: OperatingMode,
    *,
    ssh: Optional[SshExecutor] = None,
    read_line: Optional[LineReader] = None,
) -> None:
    """Run ``mode`` against the host in ``config``; fatal problems raise ``VigilError``."""

    tmux = TmuxManager(ssh or SshExecutor(config))

    if config.debug:
        ui.debug(config, "List mode enabled")
        if mode.kind is not ModeKind.LIST:
            show_sessions(tmux)

    if mode.kind is ModeKind.LIST:
        show_sessions(tmux)
    elif mode.kind is ModeKind.KILL:
        kill_session(tmux, mode.target, read_line)
    else:
        attach_session(tmux, mode.target, read_line)


__all__ = [
    "attach_session",
    "kill_session",
    "resolve_attach_target",
    "run",
    "show_sessions",
]
