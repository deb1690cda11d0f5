# ptl_client/core/manifest_loader.py
"""Manifest discovery and parsing"""

import logging
from pathlib import Path
from typing import Iterable, Union

import yaml

from ..api.exceptions import ManifestError, ManifestNotFoundError
from ..models.manifest import AppManifest

logger = logging.getLogger(__name__)


def load_manifest(candidate_paths: Iterable[Union[str, Path]]) -> AppManifest:
    """
    Load the first manifest that exists

    Args:
        candidate_paths: Paths to try, highest priority first

    Returns:
        Parsed manifest

    Raises:
        ManifestNotFoundError: If none of the paths exist
        ManifestError: If the document lacks a name or services
        yaml.YAMLError: If the document can't be parsed
    """
    tried = []
    for candidate in candidate_paths:
        path = Path(candidate)
        tried.append(path)
        if path.is_file():
            logger.debug(f"Found config: {path}")
            return parse_manifest(path)

    raise ManifestNotFoundError(tried)


def parse_manifest(path: Union[str, Path]) -> AppManifest:
    """
    Parse a manifest file

    Args:
        path: Manifest file

    Returns:
        Parsed manifest
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} is not a mapping")

    if not isinstance(data.get('name'), str) or not data['name']:
        raise ManifestError(f"Manifest {path} has no application name")

    if not isinstance(data.get('services'), dict):
        raise ManifestError(f"Manifest {path} has no services mapping")

    return AppManifest(data, source=str(path))
