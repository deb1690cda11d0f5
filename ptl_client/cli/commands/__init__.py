# ptl_client/cli/commands/__init__.py
"""CLI commands"""

from . import run
from . import deploy
from . import whoami
from . import pack

__all__ = [
    "run",
    "deploy",
    "whoami",
    "pack",
]
