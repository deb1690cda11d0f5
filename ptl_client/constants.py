"""Global constants for ptl-client"""

from enum import Enum

# Application
APP_NAME = "ptl"
LOG_FORMAT = "%(message)s"

# Remote API
DEFAULT_ENDPOINT = "http://pushto.live/"
DEFAULT_TIMEOUT = 300  # seconds
API_WHOAMI = "v0/whoami"
API_DEPLOY = "v0/deploy"
API_PROJECT = "v0/projects/{app}/{ref_type}/{ref_name}"
STATUS_OKAY = "Okay"

# Auth headers
HEADER_ACCESS_KEY = "Access-Key"
HEADER_SECRET_KEY = "Secret-Key"

# Configuration files
DEFAULT_CONFIG_DIR = "/config"
CONFIG_FILE_NAME = "config"
CREDENTIALS_FILE_NAME = "credentials"

# Keys inside the config / credentials files
CONFIG_KEY_ENDPOINT = "ENDPOINT"
CONFIG_KEY_CURL_DEBUG = "CURL_DEBUG"
CONFIG_KEY_TIMEOUT = "TIMEOUT"
CREDENTIALS_KEY_ACCESS = "ACCESS_KEY"
CREDENTIALS_KEY_SECRET = "SECRET_KEY"

# Manifest
MANIFEST_FILE_NAME = "ptl.yml"
DEFAULT_WORKSPACE = "/github/workspace"
MANIFEST_SEARCH_DIRS = [
    "/app",
    "/context",
]

# Zippack
ZIPPACK_PREFIX = "ptlz_"
ZIPPACK_SUFFIX = ".zip"
ZIPPACK_IGNORE_GLOBS = [
    ".git/*",
    ".github/*",
    ".gitignore",
    ".gitmodules",
    MANIFEST_FILE_NAME,
]

# Environment variables
ENV_ENDPOINT = "ENDPOINT"
ENV_CONFIG_DIR = "PTL_CONFIG_DIR"
ENV_ACCESS_KEY = "PTL_ACCESS_KEY"
ENV_SECRET_KEY = "PTL_SECRET_KEY"
ENV_EVENT_NAME = "GITHUB_EVENT_NAME"
ENV_REF_TYPE = "GITHUB_REF_TYPE"
ENV_REF_NAME = "GITHUB_REF_NAME"
ENV_WORKSPACE = "GITHUB_WORKSPACE"


# Trigger events
class TriggerEvent(Enum):
    PUSH = "push"
    DELETE = "delete"


DEFAULT_EVENT = TriggerEvent.PUSH.value


# Error codes
class ErrorCode:
    CONFIG_ERROR = "PTL001"
    CREDENTIALS_MISSING = "PTL002"
    MANIFEST_NOT_FOUND = "PTL003"
    MANIFEST_INVALID = "PTL004"
    TRANSPORT_FAILED = "PTL005"
    REMOTE_SERVER_ERROR = "PTL006"
    REMOTE_CLIENT_ERROR = "PTL007"
    AUTHENTICATION_FAILED = "PTL008"
    DEPLOY_FAILED = "PTL009"
    REPO_CONTEXT_MISSING = "PTL010"
    ZIPPACK_FAILED = "PTL011"


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_WARNING = "⚠"

# Messages templates
MSG_RUNNING = "Running PushToLive!"
MSG_HELLO = "Hello, '{username}' from '{org_name}'!"
MSG_CREDENTIALS_MISSING = "Cannot find credentials file or ACCESS_KEY and SECRET_KEY!"
MSG_MANIFEST_NOT_FOUND = "Cant find config in any path: {paths}"
MSG_NO_REPO_CONTEXT = "Cannot undeploy an app that doesn't have a repo context"
MSG_INSTANCE_MISSING = (
    "The service we were supposed to terminate ({app} {ref_type} {ref_name}) does not exist."
)
MSG_UNSUPPORTED_EVENT = "Ignoring unsupported event '{event}'; nothing to do."
MSG_DEPLOY_FAILED = "Failed to deploy!"
