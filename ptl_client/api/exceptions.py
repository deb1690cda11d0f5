"""Exception definitions for ptl-client"""

from typing import Optional

from ..constants import ErrorCode, MSG_MANIFEST_NOT_FOUND


class PtlError(Exception):
    """Base exception for ptl-client"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(PtlError):
    """Configuration error"""

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIG_ERROR):
        super().__init__(message, error_code)


class CredentialsError(ConfigError):
    """No usable access/secret key pair"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CREDENTIALS_MISSING)


class ManifestNotFoundError(ConfigError):
    """None of the manifest candidate paths exist"""

    def __init__(self, paths):
        self.paths = [str(p) for p in paths]
        message = MSG_MANIFEST_NOT_FOUND.format(paths=", ".join(self.paths))
        super().__init__(message, ErrorCode.MANIFEST_NOT_FOUND)


class ManifestError(PtlError):
    """Manifest content is unusable"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_INVALID)


class RemoteError(PtlError):
    """Remote API request error"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        error_code: str = None,
    ):
        super().__init__(message, error_code)
        self.status_code = status_code
        self.body = body


class TransportError(RemoteError):
    """Request never produced a response"""

    def __init__(self, message: str):
        super().__init__(message, error_code=ErrorCode.TRANSPORT_FAILED)


class RemoteServerError(RemoteError):
    """5xx response from the remote API"""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message, status_code, body, ErrorCode.REMOTE_SERVER_ERROR)


class RemoteClientError(RemoteError):
    """4xx response from the remote API"""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message, status_code, body, ErrorCode.REMOTE_CLIENT_ERROR)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class AuthenticationError(PtlError):
    """Credentials were rejected or never validated"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED)


class DeployError(PtlError):
    """Deploy request was answered with a non-Okay status"""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message, ErrorCode.DEPLOY_FAILED)
        self.reason = reason


class MissingContextError(PtlError):
    """Operation needs a repository context"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.REPO_CONTEXT_MISSING)


class ZippackError(PtlError):
    """Building a zippack failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.ZIPPACK_FAILED)
