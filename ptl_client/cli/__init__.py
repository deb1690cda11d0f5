"""Command line interface for ptl-client"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
