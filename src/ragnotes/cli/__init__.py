# src/ragnotes/cli/__init__.py
"""CLI package for ragnotes.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from ragnotes.cli.app import app, console

__all__ = ["app", "console"]
