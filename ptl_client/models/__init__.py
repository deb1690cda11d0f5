# ptl_client/models/__init__.py
"""Data models for ptl-client"""

from .manifest import AppManifest, RepoContext, ServiceZippack
from .identity import Identity
from .config import Credentials, Settings
from .result import OperationStatus, Result, DeployResult, UndeployResult, PackResult

__all__ = [
    # Manifest models
    "AppManifest",
    "RepoContext",
    "ServiceZippack",

    # Identity
    "Identity",

    # Config models
    "Credentials",
    "Settings",

    # Result models
    "OperationStatus",
    "Result",
    "DeployResult",
    "UndeployResult",
    "PackResult",
]
