"""Command-line interface for Lectern."""

from lectern.cli.main import app

__all__ = ["app"]
