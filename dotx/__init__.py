"""Track configuration files in a dotfiles directory and deploy them as symlinks."""

__version__ = "0.1.0"

__all__ = ["cli", "config", "fs", "logger", "tui"]