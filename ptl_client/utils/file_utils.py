# ptl_client/utils/file_utils.py
"""File operation utilities"""

import os
from pathlib import Path
from typing import Dict, Union

from dotenv import dotenv_values


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def read_key_value_file(file_path: Union[str, Path]) -> Dict[str, str]:
    """
    Read a KEY=value file

    Blank lines, comments and keys without a value are dropped.

    Args:
        file_path: Path to file

    Returns:
        Mapping of keys to values
    """
    values = dotenv_values(file_path)
    return {key: value for key, value in values.items() if value is not None}


def remove_file(file_path: Union[str, Path]) -> None:
    """
    Remove a file if it is still there

    Args:
        file_path: Path to file
    """
    try:
        os.unlink(file_path)
    except FileNotFoundError:
        pass
