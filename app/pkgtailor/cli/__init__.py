"""CLI package for pkgtailor.

This package contains the Typer application.
"""

from pkgtailor.cli.main import app

__all__ = ["app"]
