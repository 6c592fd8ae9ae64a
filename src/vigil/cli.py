"""vigil CLI entrypoint."""

from __future__ import annotations

import os
import shutil
from typing import List, Mapping, Optional

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand

from vigil import __version__
from vigil.core import orchestrator, ui
from vigil.core.hoist import hoist_args
from vigil.errors import SshUnavailableError, VigilError
from vigil.models import (
    DEBUG_ENV,
    DEFAULT_SESSION,
    DEFAULT_SSH_PROG,
    DEFAULT_TMUX_BIN,
    FALLBACK_USERNAME,
    SSH_PROG_ENV,
    USERNAME_ENVS,
    Config,
    HoistedArgs,
)

app = typer.Typer(
    help="Persistent remote tmux sessions over SSH.",
    add_completion=False,
)

HOISTED_META = "vigil.hoisted"

EPILOG = (
    "Mode flags, accepted anywhere on the command line: "
    "--list (list sessions and exit), "
    "--attach [NAME] / --select [NAME] (attach, choosing interactively without NAME), "
    "--kill [NAME] (kill, choosing interactively without NAME)."
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def abort(message: str, code: int = 1) -> None:
    ui.error(message)
    raise typer.Exit(code)


def resolve_local_username(environ: Mapping[str, str]) -> str:
    for key in USERNAME_ENVS:
        value = environ.get(key)
        if value:
            return value
    return FALLBACK_USERNAME


def resolve_ssh_prog(environ: Mapping[str, str]) -> str:
    prog = environ.get(SSH_PROG_ENV) or DEFAULT_SSH_PROG
    if shutil.which(prog) is None:
        raise SshUnavailableError(f"`{prog}` not found in PATH")
    return prog


def build_config(
    hoisted: HoistedArgs,
    *,
    session: Optional[str] = None,
    tmux_bin: str = DEFAULT_TMUX_BIN,
    tmux_args: str = "",
    dry_run: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Combine parsed options, hoisted arguments and the environment into a Config."""

    env = os.environ if environ is None else environ
    return Config(
        session=session or DEFAULT_SESSION,
        session_provided=session is not None,
        tmux_bin=tmux_bin,
        tmux_args=tmux_args,
        ssh_prog=resolve_ssh_prog(env),
        ssh_args=tuple(hoisted.ssh_args),
        local_user=resolve_local_username(env),
        debug=DEBUG_ENV in env,
        dry_run=dry_run,
    )


class HoistingCommand(TyperCommand):
    """Hoist the mode flags out of the raw arguments before click parses them.

    Click removes its own options from the positional stream, so hoisting after
    parsing would no longer see which token really followed ``--attach`` or
    ``--kill``.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        hoisted = hoist_args(args)
        ctx.meta[HOISTED_META] = hoisted
        return super().parse_args(ctx, hoisted.ssh_args)


def _version_callback(value: bool) -> None:
    if value:
        ui.console.print(f"vigil {__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Root command
# ---------------------------------------------------------------------------


@app.command(
    cls=HoistingCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=EPILOG,
)
def main(
    ctx: typer.Context,
    ssh_args: Optional[List[str]] = typer.Argument(
        None, metavar="[SSH_ARGS]...", help="ssh arguments and destination (e.g. user@host)"
    ),
    session: Optional[str] = typer.Option(
        None,
        "--session",
        help=f"Base tmux session name, suffixed with the local user [default: {DEFAULT_SESSION}]",
        show_default=False,
    ),
    tmux_bin: str = typer.Option(DEFAULT_TMUX_BIN, "--tmux", help="tmux binary on the remote host"),
    tmux_args: str = typer.Option(
        "", "--tmuxargs", help="Extra arguments passed to tmux new-session", show_default=False
    ),
    list_mode: bool = typer.Option(False, "--list", help="List remote sessions and exit"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print ssh commands without running them"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the vigil version and exit",
    ),
) -> None:
    """Attach to (or create) a persistent tmux session on a remote host."""

    raw = ctx.meta.get(HOISTED_META) or HoistedArgs()
    hoisted = hoist_args(
        ssh_args or [],
        list_mode=list_mode or raw.list_mode,
        attach=raw.attach,
        kill=raw.kill,
    )
    try:
        config = build_config(
            hoisted,
            session=session,
            tmux_bin=tmux_bin,
            tmux_args=tmux_args,
            dry_run=dry_run,
        )
    except ValidationError as exc:
        abort(f"invalid arguments: {exc.errors()[0]['msg']}", code=2)
    except VigilError as exc:
        abort(str(exc), exc.exit_code)

    try:
        orchestrator.run(config, hoisted.mode())
    except VigilError as exc:
        abort(str(exc), exc.exit_code)


def run() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    run()
