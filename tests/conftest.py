"""Shared test fixtures for vigil tests."""

from unittest.mock import Mock

import pytest

from vigil.core.ssh import CommandResult, SshExecutor
from vigil.models import Config


@pytest.fixture
def sample_config():
    """Return a configuration targeting user@host as alice."""
    return Config(
        session="default",
        tmux_bin="tmux",
        tmux_args="",
        ssh_prog="ssh",
        ssh_args=("-t", "user@host"),
        local_user="alice",
    )


@pytest.fixture
def debug_config(sample_config):
    """Return the sample configuration with debug tracing enabled."""
    return sample_config.model_copy(update={"debug": True})


@pytest.fixture
def mock_ssh(sample_config):
    """Return an SshExecutor double whose remote calls all succeed quietly."""
    mock = Mock(spec=SshExecutor)
    mock.config = sample_config
    mock.run_capture.return_value = CommandResult(exit_code=0, stdout="", stderr="")
    mock.run_interactive.return_value = 0
    return mock


@pytest.fixture
def completed():
    """Build a fake subprocess.CompletedProcess."""

    def _build(returncode=0, stdout=b"", stderr=b""):
        return Mock(returncode=returncode, stdout=stdout, stderr=stderr)

    return _build
