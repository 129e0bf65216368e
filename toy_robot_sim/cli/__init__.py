"""Command-line entry points."""

from .run import main

__all__ = ["main"]
