# ptl_client/services/__init__.py
"""Business logic services for ptl-client"""

from .config_service import ConfigService
from .deploy_service import DeployService

__all__ = [
    "ConfigService",
    "DeployService",
]
