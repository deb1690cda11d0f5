# ptl_client/utils/__init__.py
"""Utility functions for ptl-client"""

from .file_utils import (
    format_size,
    read_key_value_file,
    remove_file,
)

__all__ = [
    "format_size",
    "read_key_value_file",
    "remove_file",
]
