"""Data models shared across vigil components."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SESSION = "default"
DEFAULT_TMUX_BIN = "tmux"
DEFAULT_SSH_PROG = "ssh"
FALLBACK_USERNAME = "user"

DEBUG_ENV = "VIGIL_DEBUG"
SSH_PROG_ENV = "VIGIL_SSH"
USERNAME_ENVS = ("USER", "LOGNAME")

LIST_FLAG = "--list"
ATTACH_FLAGS = ("--attach", "--select")
KILL_FLAG = "--kill"
RESERVED_FLAGS = frozenset((LIST_FLAG, KILL_FLAG, *ATTACH_FLAGS))


class FlagState(str, Enum):
    UNSET = "unset"
    BARE = "bare"
    NAMED = "named"


class ModeFlag(BaseModel):
    """Three-state value of an ``--attach``/``--kill`` style flag.

    ``UNSET`` means the flag was never given, ``BARE`` means it was given
    without a session name and ``NAMED`` carries the explicit name.
    """

    model_config = ConfigDict(frozen=True)

    state: FlagState = FlagState.UNSET
    name: Optional[str] = None

    @model_validator(mode="after")
    def _name_matches_state(self) -> ModeFlag:
        if self.state is FlagState.NAMED and not self.name:
            raise ValueError("a named flag requires a non-empty session name")
        if self.state is not FlagState.NAMED and self.name is not None:
            raise ValueError(f"a {self.state.value} flag cannot carry a session name")
        return self

    @classmethod
    def unset(cls) -> ModeFlag:
        return cls()

    @classmethod
    def bare(cls) -> ModeFlag:
        return cls(state=FlagState.BARE)

    @classmethod
    def named(cls, name: str) -> ModeFlag:
        return cls(state=FlagState.NAMED, name=name)

    @property
    def is_set(self) -> bool:
        return self.state is not FlagState.UNSET


class ModeKind(str, Enum):
    LIST = "list"
    KILL = "kill"
    ATTACH = "attach"


class OperatingMode(BaseModel):
    """The single mode selected for an invocation."""

    model_config = ConfigDict(frozen=True)

    kind: ModeKind
    target: ModeFlag = Field(default_factory=ModeFlag.unset)


class HoistedArgs(BaseModel):
    """Result of scanning the trailing argument vector for vigil's own flags."""

    ssh_args: List[str] = Field(default_factory=list)
    list_mode: bool = False
    attach: ModeFlag = Field(default_factory=ModeFlag.unset)
    kill: ModeFlag = Field(default_factory=ModeFlag.unset)

    def mode(self) -> OperatingMode:
        if self.list_mode:
            return OperatingMode(kind=ModeKind.LIST)
        if self.kill.is_set:
            return OperatingMode(kind=ModeKind.KILL, target=self.kill)
        return OperatingMode(kind=ModeKind.ATTACH, target=self.attach)


class Config(BaseModel):
    """Immutable per-invocation configuration."""

    model_config = ConfigDict(frozen=True)

    session: str = Field(DEFAULT_SESSION, description="Base session-name stem")
    session_provided: bool = Field(False, description="Whether --session was given explicitly")
    tmux_bin: str = Field(DEFAULT_TMUX_BIN, description="tmux binary on the remote host")
    tmux_args: str = Field("", description="Extra arguments spliced into tmux new-session")
    ssh_prog: str = Field(DEFAULT_SSH_PROG, description="Program used for remote execution")
    ssh_args: Tuple[str, ...] = Field(default_factory=tuple, description="ssh arguments and destination")
    local_user: str = Field(FALLBACK_USERNAME, description="Local username")
    debug: bool = False
    dry_run: bool = False

    @field_validator("ssh_args")
    @classmethod
    def _no_reserved_flags(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        leaked = [token for token in value if token in RESERVED_FLAGS]
        if leaked:
            raise ValueError(f"ssh arguments still contain vigil flags: {', '.join(leaked)}")
        return value

    @property
    def default_session_name(self) -> str:
        return f"{self.session}_{self.local_user}"


__all__ = [
    "ATTACH_FLAGS",
    "Config",
    "DEBUG_ENV",
    "DEFAULT_SESSION",
    "DEFAULT_SSH_PROG",
    "DEFAULT_TMUX_BIN",
    "FALLBACK_USERNAME",
    "FlagState",
    "HoistedArgs",
    "KILL_FLAG",
    "LIST_FLAG",
    "ModeFlag",
    "ModeKind",
    "OperatingMode",
    "RESERVED_FLAGS",
    "SSH_PROG_ENV",
    "USERNAME_ENVS",
]
