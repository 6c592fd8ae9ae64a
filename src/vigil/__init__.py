"""vigil: persistent remote tmux sessions over SSH."""

__version__ = "0.1.0"

__all__ = ["__version__"]
