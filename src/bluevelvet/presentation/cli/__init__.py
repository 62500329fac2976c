"""Command-line interface for Blue Velvet."""

from bluevelvet.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
