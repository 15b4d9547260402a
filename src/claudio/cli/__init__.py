"""Command-line entry points for claudio."""

from claudio.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
