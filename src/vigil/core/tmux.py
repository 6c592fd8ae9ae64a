"""tmux command construction and remote session helpers."""

from __future__ import annotations

from typing import List

from vigil.core import ui
from vigil.core.shell import ensure_tty, shell_escape, split_extra_args, strip_tty
from vigil.core.ssh import COMMAND_NOT_FOUND, SshExecutor, report_missing_tmux
from vigil.models import Config

SESSION_NAME_FORMAT = "#{session_name}"


def build_session_command(tmux_bin: str, session_name: str, tmux_args: str = "") -> List[str]:
    """``tmux new-session -A`` attaches when the session exists and creates it otherwise."""

    command = [tmux_bin, "new-session", "-A", "-s", session_name]
    command.extend(split_extra_args(tmux_args))
    return command


def build_list_command(tmux_bin: str) -> str:
    return f"{tmux_bin} list-sessions -F {shell_escape(SESSION_NAME_FORMAT)}"


def build_kill_command(tmux_bin: str, session_name: str) -> str:
    return f"{tmux_bin} kill-session -t {shell_escape(session_name)}"


def build_attach_args(config: Config, session_name: str) -> List[str]:
    tmux_cmd = build_session_command(config.tmux_bin, session_name, config.tmux_args)
    ssh_args = ensure_tty(config.ssh_args)
    ui.debug(config, f"ssh args (pre-tmux): {ssh_args}")
    ui.debug(config, f"tmux argv: {tmux_cmd}")
    return ssh_args + tmux_cmd


def build_batch_args(config: Config, command: str) -> List[str]:
    return strip_tty(config.ssh_args) + [command]


class TmuxManager:
    """List, kill and attach to tmux sessions on the configured host."""

    def __init__(self, ssh: SshExecutor) -> None:
        self.ssh = ssh

    @property
    def config(self) -> Config:
        return self.ssh.config

    def list_sessions(self) -> List[str]:
        command = build_list_command(self.config.tmux_bin)
        result = self.ssh.run_capture(build_batch_args(self.config, command))
        if result.exit_code == COMMAND_NOT_FOUND:
            report_missing_tmux()
            return []
        if result.exit_code != 0:
            # tmux exits non-zero when no server is running.
            ui.debug(self.config, f"list-sessions exited with status {result.exit_code}")
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def kill_session(self, session_name: str) -> None:
        command = build_kill_command(self.config.tmux_bin, session_name)
        self.ssh.run_interactive(build_batch_args(self.config, command))

    def attach_session(self, session_name: str) -> None:
        self.ssh.run_interactive(build_attach_args(self.config, session_name))


__all__ = [
    "SESSION_NAME_FORMAT",
    "TmuxManager",
    "build_attach_args",
    "build_batch_args",
    "build_kill_command",
    "build_list_command",
    "build_session_command",
]
