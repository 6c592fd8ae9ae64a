"""Tests for hoisting vigil's flags out of the trailing ssh arguments."""

import pytest

from vigil.core.hoist import hoist_args, looks_like_session_name
from vigil.models import FlagState, ModeFlag, ModeKind


def rehoist(result):
    return hoist_args(
        result.ssh_args,
        list_mode=result.list_mode,
        attach=result.attach,
        kill=result.kill,
    )


def test_list_after_destination():
    result = hoist_args(["user@host", "--list"])
    assert result.list_mode is True
    assert result.ssh_args == ["-t", "user@host"]
    assert result.mode().kind is ModeKind.LIST


def test_attach_with_name_before_destination():
    result = hoist_args(["--attach", "work", "user@host"])
    assert result.attach == ModeFlag.named("work")
    assert result.ssh_args == ["-t", "user@host"]
    assert result.mode().kind is ModeKind.ATTACH
    assert result.mode().target.name == "work"


def test_no_flags_leaves_attach_unset():
    result = hoist_args(["user@host"])
    assert result.attach.state is FlagState.UNSET
    assert result.kill.state is FlagState.UNSET
    assert result.list_mode is False
    assert result.ssh_args == ["-t", "user@host"]


def test_select_is_an_alias_for_attach():
    result = hoist_args(["user@host", "--select", "dev"])
    assert result.attach == ModeFlag.named("dev")
    assert result.ssh_args == ["-t", "user@host"]


def test_attach_followed_by_destination_is_bare():
    result = hoist_args(["--attach", "user@host"])
    assert result.attach == ModeFlag.bare()
    assert result.ssh_args == ["-t", "user@host"]


def test_attach_followed_by_flag_is_bare():
    result = hoist_args(["--attach", "-p", "2222", "user@host"])
    assert result.attach == ModeFlag.bare()
    assert result.ssh_args == ["-t", "-p", "2222", "user@host"]


def test_attach_as_last_token_is_bare():
    result = hoist_args(["user@host", "--attach"])
    assert result.attach == ModeFlag.bare()
    assert result.ssh_args == ["-t", "user@host"]


def test_kill_with_name_after_destination():
    result = hoist_args(["user@host", "--kill", "old"])
    assert result.kill == ModeFlag.named("old")
    assert result.ssh_args == ["-t", "user@host"]
    assert result.mode().kind is ModeKind.KILL


def test_kill_followed_by_host_with_port_is_bare():
    result = hoist_args(["--kill", "host:22"])
    assert result.kill == ModeFlag.bare()
    assert result.ssh_args == ["-t", "host:22"]


def test_session_name_with_at_sign_is_taken_for_destination():
    result = hoist_args(["--kill", "me@work", "user@host"])
    assert result.kill == ModeFlag.bare()
    assert result.ssh_args == ["-t", "me@work", "user@host"]


def test_consecutive_removals_do_not_skip_tokens():
    result = hoist_args(["--list", "--kill", "old", "--attach", "--select", "user@host"])
    assert result.list_mode is True
    assert result.kill == ModeFlag.named("old")
    assert result.attach == ModeFlag.bare()
    # Only the first attach-style flag is hoisted.
    assert result.ssh_args == ["-t", "--select", "user@host"]


def test_second_list_flag_is_left_in_place():
    result = hoist_args(["--list", "host", "--list"])
    assert result.list_mode is True
    assert result.ssh_args == ["-t", "host", "--list"]


def test_preset_modes_are_kept():
    result = hoist_args(["--attach", "x", "host"], attach=ModeFlag.named("first"))
    assert result.attach == ModeFlag.named("first")
    assert result.ssh_args == ["-t", "--attach", "x", "host"]


def test_existing_tty_flag_is_not_duplicated():
    result = hoist_args(["-tt", "user@host", "--list"])
    assert result.ssh_args == ["-tt", "user@host"]


def test_input_is_not_mutated():
    tokens = ["--kill", "old", "host"]
    hoist_args(tokens)
    assert tokens == ["--kill", "old", "host"]


def test_empty_vector_still_requests_tty():
    assert hoist_args([]).ssh_args == ["-t"]


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["user@host"],
        ["user@host", "--list"],
        ["--attach", "work", "user@host"],
        ["--kill", "--attach", "host"],
        ["--list", "--list", "--kill", "a", "--kill", "b", "host"],
        ["-o", "ServerAliveInterval=30", "--select", "host:2222"],
        ["-tt", "--kill", "x", "--attach"],
    ],
)
def test_hoisting_is_idempotent(tokens):
    first = hoist_args(tokens)
    second = rehoist(first)
    assert second == first


@pytest.mark.parametrize("flag", ["--attach", "--select", "--kill"])
@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_flag_before_name_records_name_anywhere(flag, position):
    tokens = ["-p", "22", "user@host"]
    tokens[position:position] = [flag, "build_42"]
    result = hoist_args(tokens)
    recorded = result.kill if flag == "--kill" else result.attach
    assert recorded == ModeFlag.named("build_42")
    assert result.ssh_args == ["-t", "-p", "22", "user@host"]


@pytest.mark.parametrize(
    "token,expected",
    [
        ("work", True),
        ("my-session.2", True),
        ("-p", False),
        ("user@host", False),
        ("host:22", False),
        ("", False),
    ],
)
def test_looks_like_session_name(token, expected):
    assert looks_like_session_name(token) is expected


def test_empty_token_after_flag_is_not_a_name():
    result = hoist_args(["--attach", "", "host"])
    assert result.attach == ModeFlag.bare()
    assert result.ssh_args == ["-t", "", "host"]
