"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from ..api.exceptions import ConfigError, CredentialsError
from ..core.repo_context import resolve_context
from ..models.config import Credentials, Settings
from ..utils.file_utils import read_key_value_file
from ..constants import (
    CONFIG_FILE_NAME,
    CONFIG_KEY_CURL_DEBUG,
    CONFIG_KEY_ENDPOINT,
    CONFIG_KEY_TIMEOUT,
    CREDENTIALS_FILE_NAME,
    CREDENTIALS_KEY_ACCESS,
    CREDENTIALS_KEY_SECRET,
    DEFAULT_CONFIG_DIR,
    DEFAULT_ENDPOINT,
    DEFAULT_EVENT,
    DEFAULT_TIMEOUT,
    DEFAULT_WORKSPACE,
    ENV_ACCESS_KEY,
    ENV_CONFIG_DIR,
    ENV_ENDPOINT,
    ENV_EVENT_NAME,
    ENV_SECRET_KEY,
    ENV_WORKSPACE,
    MANIFEST_FILE_NAME,
    MANIFEST_SEARCH_DIRS,
    MSG_CREDENTIALS_MISSING,
)

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for resolving run configuration from files and environment"""

    def __init__(
            self,
            environ: Optional[Mapping[str, str]] = None,
            config_dir: Optional[Union[str, Path]] = None
    ):
        """Initialize config service

        Args:
            environ: Environment to read (defaults to os.environ)
            config_dir: Directory holding ``config`` and ``credentials``
        """
        self.environ = os.environ if environ is None else environ
        self.config_dir = Path(
            config_dir or self.environ.get(ENV_CONFIG_DIR) or DEFAULT_CONFIG_DIR
        )
        self.config_path = self.config_dir / CONFIG_FILE_NAME
        self.credentials_path = self.config_dir / CREDENTIALS_FILE_NAME

    def load_overrides(self) -> Dict[str, str]:
        """Load the optional config override file

        Returns:
            Override values, empty if there is no config file
        """
        if not self.config_path.is_file():
            return {}

        overrides = read_key_value_file(self.config_path)
        logger.debug("Loaded overriding config file.")
        return overrides

    def load_credentials(self) -> Credentials:
        """Find the access/secret key pair

        The credentials file wins over the environment.

        Returns:
            Credentials

        Raises:
            CredentialsError: If neither source provides both keys
        """
        if self.credentials_path.is_file():
            values = read_key_value_file(self.credentials_path)
            access_key = values.get(CREDENTIALS_KEY_ACCESS)
            secret_key = values.get(CREDENTIALS_KEY_SECRET)
            if not access_key or not secret_key:
                raise CredentialsError(
                    f"Credentials file {self.credentials_path} must define "
                    f"{CREDENTIALS_KEY_ACCESS} and {CREDENTIALS_KEY_SECRET}"
                )
            logger.debug(f"Using credentials from {self.credentials_path}")
            return Credentials(access_key=access_key, secret_key=secret_key)

        access_key = self.environ.get(ENV_ACCESS_KEY)
        secret_key = self.environ.get(ENV_SECRET_KEY)
        if access_key and secret_key:
            logger.debug("Using credentials from environment")
            return Credentials(access_key=access_key, secret_key=secret_key)

        raise CredentialsError(MSG_CREDENTIALS_MISSING)

    def manifest_candidates(self) -> List[Path]:
        """Get manifest paths to try, highest priority first"""
        workspace = self.environ.get(ENV_WORKSPACE) or DEFAULT_WORKSPACE
        candidates = [Path(d) / MANIFEST_FILE_NAME for d in MANIFEST_SEARCH_DIRS]
        candidates.append(Path(workspace) / MANIFEST_FILE_NAME)
        return candidates

    def load_settings(
            self,
            event: Optional[str] = None,
            manifest: Optional[Union[str, Path]] = None
    ) -> Settings:
        """Resolve everything a run needs

        Args:
            event: Trigger event override
            manifest: Explicit manifest path, replaces the candidate list

        Returns:
            Settings
        """
        overrides = self.load_overrides()

        endpoint = (
            overrides.get(CONFIG_KEY_ENDPOINT)
            or self.environ.get(ENV_ENDPOINT)
            or DEFAULT_ENDPOINT
        )
        if not endpoint.endswith('/'):
            endpoint += '/'

        timeout = DEFAULT_TIMEOUT
        if overrides.get(CONFIG_KEY_TIMEOUT):
            try:
                timeout = float(overrides[CONFIG_KEY_TIMEOUT])
            except ValueError:
                raise ConfigError(
                    f"Invalid {CONFIG_KEY_TIMEOUT} in {self.config_path}: "
                    f"{overrides[CONFIG_KEY_TIMEOUT]}"
                )

        credentials = self.load_credentials()

        if manifest:
            candidates = [Path(manifest)]
        else:
            candidates = self.manifest_candidates()

        settings = Settings(
            credentials=credentials,
            endpoint=endpoint,
            debug_transport=overrides.get(CONFIG_KEY_CURL_DEBUG, 'no').lower() == 'yes',
            timeout=timeout,
            event_name=event or self.environ.get(ENV_EVENT_NAME) or DEFAULT_EVENT,
            repo_context=resolve_context(self.environ),
            manifest_candidates=candidates,
        )

        logger.debug(f"Endpoint is {settings.endpoint}")
        return settings
