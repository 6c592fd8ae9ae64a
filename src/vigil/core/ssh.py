"""Run the ssh client, either attached to the terminal or capturing output."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Sequence

from vigil.core import ui
from vigil.core.shell import strip_tty
from vigil.errors import (
    TMUX_INSTALL_HINT,
    RemoteCommandError,
    RemoteNotFoundError,
    SpawnError,
)
from vigil.models import Config

COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    exit_code: int
    stdout: str
    stderr: str

    def check(self) -> CommandResult:
        if self.exit_code == COMMAND_NOT_FOUND:
            raise RemoteNotFoundError(self.exit_code)
        if self.exit_code != 0:
            raise RemoteCommandError(self.exit_code)
        return self


def report_missing_tmux() -> None:
    ui.error(TMUX_INSTALL_HINT)


class SshExecutor:
    """Invoke ``config.ssh_prog`` with a prepared argument vector."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def program(self) -> str:
        return self.config.ssh_prog

    def _argv(self, args: Sequence[str]) -> List[str]:
        return [self.program, *args]

    def _dry_run(self, argv: Sequence[str]) -> None:
        ui.trace(f"dry-run: {shlex.join(argv)}")

    def run_interactive(self, args: Sequence[str], *, check: bool = True) -> int:
        """Run with the terminal's stdio attached and return the exit status.

        With ``check`` a non-zero status raises; 127 additionally prints the
        tmux install hint.
        """

        argv = self._argv(args)
        ui.debug(self.config, f"ssh prog: {self.program}")
        ui.debug(self.config, f"ssh args (final): {list(args)}")
        if self.config.dry_run:
            self._dry_run(argv)
            return 0
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as exc:
            raise SpawnError(self.program, exc) from exc
        if completed.returncode == COMMAND_NOT_FOUND:
            report_missing_tmux()
        if check and completed.returncode != 0:
            CommandResult(completed.returncode, "", "").check()
        return completed.returncode

    def run_capture(self, args: Sequence[str]) -> CommandResult:
        """Run without a TTY and capture output; a non-zero status is returned, not raised."""

        argv = self._argv(strip_tty(args))
        ui.debug(self.config, f"executing remote (capture): {shlex.join(argv)}")
        if self.config.dry_run:
            self._dry_run(argv)
            return CommandResult(exit_code=0, stdout="", stderr="")
        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise SpawnError(self.program, exc) from exc
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout.decode("utf-8", "replace"),
            stderr=completed.stderr.decode("utf-8", "replace"),
        )


__all__ = ["COMMAND_NOT_FOUND", "CommandResult", "SshExecutor", "report_missing_tmux"]
