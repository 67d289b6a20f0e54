"""Command-line demos for griddle."""

from griddle.cli.main import main

__all__ = ["main"]
