"""API client and exceptions for ptl-client"""

from .client import PushToLiveClient
from .exceptions import (
    PtlError,
    ConfigError,
    CredentialsError,
    ManifestNotFoundError,
    ManifestError,
    RemoteError,
    TransportError,
    RemoteServerError,
    RemoteClientError,
    AuthenticationError,
    DeployError,
    MissingContextError,
    ZippackError,
)

__all__ = [
    "PushToLiveClient",
    "PtlError",
    "ConfigError",
    "CredentialsError",
    "ManifestNotFoundError",
    "ManifestError",
    "RemoteError",
    "TransportError",
    "RemoteServerError",
    "RemoteClientError",
    "AuthenticationError",
    "DeployError",
    "MissingContextError",
    "ZippackError",
]
