"""Command line interface for the help assistant."""

from .app import app

__all__ = ["app"]
