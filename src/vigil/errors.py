"""Errors raised by vigil's core and turned into process exits by the CLI."""

from __future__ import annotations

TMUX_INSTALL_HINT = (
    "tmux not found on remote host.\n"
    "  - Debian/Ubuntu: sudo apt-get install tmux\n"
    "  - RHEL/CentOS/Fedora: sudo yum install tmux (or dnf)\n"
    "  - macOS (Homebrew): brew install tmux"
)


class VigilError(RuntimeError):
    """Base class for fatal vigil errors."""

    exit_code = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class SshUnavailableError(VigilError):
    """The remote execution program is not on PATH."""


class SpawnError(VigilError):
    """The remote execution program could not be started."""

    def __init__(self, program: str, error: OSError) -> None:
        super().__init__(f"failed to execute {program}: {error}")
        self.program = program
        self.error = error


class RemoteCommandError(VigilError):
    """The remote command ran but exited with a non-zero status."""

    def __init__(self, exit_code: int, message: str | None = None) -> None:
        super().__init__(
            message or f"remote command exited with status: {exit_code}", exit_code=exit_code
        )


class RemoteNotFoundError(RemoteCommandError):
    """The remote shell reported status 127 (tmux is missing)."""

    def __init__(self, exit_code: int = 127) -> None:
        super().__init__(exit_code, f"remote command not found (status {exit_code}); is tmux installed?")


class SelectionError(VigilError):
    """Interactive session selection failed."""


__all__ = [
    "RemoteCommandError",
    "RemoteNotFoundError",
    "SelectionError",
    "SpawnError",
    "SshUnavailableError",
    "TMUX_INSTALL_HINT",
    "VigilError",
]
