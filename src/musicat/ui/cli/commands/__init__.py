"""Command execution package for CLI."""

from musicat.ui.cli.commands.sync import SyncCommand

__all__ = ["SyncCommand"]
