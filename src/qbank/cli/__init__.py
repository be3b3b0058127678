# src/qbank/cli/__init__.py
"""CLI package for the question bank.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from qbank.cli.app import app, console

__all__ = ["app", "console"]
