"""Command line interface for publish-tool"""

from .main import cli, main

__all__ = ["cli", "main"]
