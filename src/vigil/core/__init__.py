"""Core building blocks: argument hoisting, remote execution and tmux orchestration."""
