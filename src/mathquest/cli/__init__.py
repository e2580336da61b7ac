"""CLI package for MathQuest.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from mathquest.cli.app import app, console

__all__ = ["app", "console"]
