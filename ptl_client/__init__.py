"""ptl-client - Deploy applications to PushToLive from CI.

Packs the build contexts declared in ptl.yml into zippacks, submits the
manifest to the PushToLive API and terminates deployments when the
branch or tag they belong to goes away.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.client import PushToLiveClient
from .core import load_manifest, resolve_context, build_archive, ZipPacker
from .services import ConfigService, DeployService

# Data models
from .models import (
    AppManifest,
    RepoContext,
    Identity,
    Credentials,
    Settings,
    DeployResult,
    UndeployResult,
)

# Exceptions
from .api.exceptions import (
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
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "PushToLiveClient",
    "ConfigService",
    "DeployService",
    "ZipPacker",

    # Core API functions
    "load_manifest",
    "resolve_context",
    "build_archive",

    # Data models
    "AppManifest",
    "RepoContext",
    "Identity",
    "Credentials",
    "Settings",
    "DeployResult",
    "UndeployResult",

    # Exceptions
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
