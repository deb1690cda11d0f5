"""
PushToLive API client.
"""

import http.client
import logging
from typing import Dict, Optional, Any

import requests

from ..__version__ import __version__
from ..constants import (
    API_DEPLOY,
    API_PROJECT,
    API_WHOAMI,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    HEADER_ACCESS_KEY,
    HEADER_SECRET_KEY,
)
from ..models.config import Credentials
from .exceptions import RemoteClientError, RemoteError, RemoteServerError, TransportError

logger = logging.getLogger(__name__)


class PushToLiveClient:
    """Client for the PushToLive orchestration API."""

    def __init__(
        self,
        credentials: Credentials,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            credentials: Access/secret key pair attached to every request
            endpoint: Base URL of the API
            timeout: Request timeout in seconds
            debug: Dump raw HTTP traffic
            session: Pre-built session (tests)
        """
        self.endpoint = endpoint if endpoint.endswith("/") else endpoint + "/"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers[HEADER_ACCESS_KEY] = credentials.access_key
        self.session.headers[HEADER_SECRET_KEY] = credentials.secret_key
        self.session.headers["User-Agent"] = f"ptl-client/{__version__}"

        if debug:
            enable_transport_debug()

    def _url(self, path: str) -> str:
        return f"{self.endpoint}{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Make an authenticated request and map HTTP failures to exceptions."""
        kwargs.setdefault("timeout", self.timeout)
        url = self._url(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.status_code >= 500:
            raise RemoteServerError(
                response.text or f"Server error: {response.status_code}",
                response.status_code,
                response.text,
            )
        if response.status_code >= 400:
            raise RemoteClientError(
                response.text or f"API error: {response.status_code}",
                response.status_code,
                response.text,
            )

        return response

    @staticmethod
    def _json(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(
                f"Invalid JSON in response: {response.text[:200]}",
                response.status_code,
                response.text,
            ) from e
        if not isinstance(data, dict):
            raise RemoteError(
                f"Unexpected response: {response.text[:200]}",
                response.status_code,
                response.text,
            )
        return data

    @staticmethod
    def project_path(app_name: str, ref_type: str, ref_name: str) -> str:
        """Build the project path for an app and repository context.

        Values go into the path as they are, so a branch like ``feature/x``
        spans two segments.
        """
        return API_PROJECT.format(app=app_name, ref_type=ref_type, ref_name=ref_name)

    # Identity

    def whoami(self) -> Dict[str, Any]:
        """Ask the API who the credentials belong to."""
        response = self._request("POST", API_WHOAMI)
        return self._json(response)

    # Projects

    def get_project(self, app_name: str, ref_type: str, ref_name: str) -> Dict[str, Any]:
        """Look up a deployed project instance."""
        response = self._request("GET", self.project_path(app_name, ref_type, ref_name))
        if not response.content:
            return {}
        return self._json(response)

    def deploy(self, manifest_yaml: str) -> Dict[str, Any]:
        """Submit a serialized manifest for deployment."""
        response = self._request(
            "PUT",
            API_DEPLOY,
            data=manifest_yaml.encode("utf-8"),
            headers={"Content-Type": "application/x-yaml"},
        )
        return self._json(response)

    def delete_project(self, app_name: str, ref_type: str, ref_name: str) -> Dict[str, Any]:
        """Terminate a deployed project instance."""
        response = self._request("DELETE", self.project_path(app_name, ref_type, ref_name))
        if not response.content:
            return {}
        return self._json(response)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> "PushToLiveClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def enable_transport_debug() -> None:
    """Dump request/response lines and headers to stdout."""
    http.client.HTTPConnection.debuglevel = 1
    logging.getLogger("urllib3").setLevel(logging.DEBUG)
