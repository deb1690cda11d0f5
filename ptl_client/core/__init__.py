"""Core functionality for ptl-client"""

from .manifest_loader import load_manifest, parse_manifest
from .repo_context import resolve_context
from .zippack import ZipPacker, build_archive

__all__ = [
    "load_manifest",
    "parse_manifest",
    "resolve_context",
    "ZipPacker",
    "build_archive",
]
