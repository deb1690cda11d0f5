"""Deploy service: drives deploy/undeploy against the PushToLive API"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..api.client import PushToLiveClient
from ..api.exceptions import (
    AuthenticationError,
    DeployError,
    MissingContextError,
    RemoteClientError,
)
from ..core.manifest_loader import load_manifest
from ..core.zippack import ZipPacker
from ..models import (
    AppManifest,
    DeployResult,
    Identity,
    OperationStatus,
    Result,
    Settings,
    UndeployResult,
)
from ..constants import (
    MSG_DEPLOY_FAILED,
    MSG_HELLO,
    MSG_INSTANCE_MISSING,
    MSG_NO_REPO_CONTEXT,
    MSG_UNSUPPORTED_EVENT,
    STATUS_OKAY,
    TriggerEvent,
)

logger = logging.getLogger(__name__)


class DeployService:
    """Service for deploying and terminating applications"""

    def __init__(
        self,
        settings: Settings,
        client: Optional[PushToLiveClient] = None,
        packer: Optional[ZipPacker] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        """Initialize deploy service

        Args:
            settings: Resolved run settings
            client: API client (built from settings if not given)
            packer: Zippack builder
            base_dir: Directory build paths are relative to (defaults to the
                working directory)
        """
        self.settings = settings
        self.client = client or PushToLiveClient(
            settings.credentials,
            endpoint=settings.endpoint,
            timeout=settings.timeout,
            debug=settings.debug_transport,
        )
        self.packer = packer or ZipPacker()
        self.base_dir = Path(base_dir) if base_dir else None
        self._identity: Optional[Identity] = None
        self._manifest: Optional[AppManifest] = None

    @property
    def identity(self) -> Optional[Identity]:
        """Identity resolved by validate_credentials"""
        return self._identity

    @property
    def manifest(self) -> AppManifest:
        """Application manifest (lazy load)"""
        if self._manifest is None:
            self._manifest = load_manifest(self.settings.manifest_candidates)
        return self._manifest

    def validate_credentials(self) -> Identity:
        """Check the credentials against the API

        Returns:
            Identity of the caller

        Raises:
            AuthenticationError: If the API does not answer Okay
        """
        whoami = self.client.whoami()
        if whoami.get('Status') != STATUS_OKAY:
            raise AuthenticationError(whoami.get('Reason') or "Credentials were rejected")

        self._identity = Identity.from_response(whoami)
        logger.info(MSG_HELLO.format(
            username=self._identity.username,
            org_name=self._identity.org_name,
        ))
        return self._identity

    def _require_identity(self) -> None:
        if self._identity is None:
            raise AuthenticationError("Credentials have not been validated")

    def instance_exists(self, app_name: str, ref_type: str, ref_name: str) -> bool:
        """Check if a deployed instance exists for the app and context

        Args:
            app_name: Application name
            ref_type: Repository context type
            ref_name: Repository context name

        Returns:
            False if the API answers 404, True on success

        Raises:
            RemoteClientError: For any other 4xx answer
            RemoteServerError: For 5xx answers
        """
        self._require_identity()
        try:
            self.client.get_project(app_name, ref_type, ref_name)
        except RemoteClientError as e:
            if e.is_not_found:
                return False
            raise
        return True

    def deploy_app(self, dry_run: bool = False) -> DeployResult:
        """Pack the build paths and submit the manifest

        Args:
            dry_run: Build the payload but don't send it

        Returns:
            DeployResult

        Raises:
            DeployError: If the API answers with a non-Okay status
        """
        manifest = self.manifest
        repo_context = self.settings.repo_context
        result = DeployResult(
            status=OperationStatus.IN_PROGRESS,
            app_name=manifest.name,
            repo_context=repo_context,
            dry_run=dry_run,
        )

        logger.info(f"Submitting '{manifest.name}' to deploy")
        if repo_context is not None:
            logger.info(f" > Context is {repo_context}")
            manifest = manifest.with_context(repo_context)

        manifest, result.zippacks = self.packer.pack_services(
            manifest, self.base_dir or Path.cwd()
        )
        payload = manifest.dump()

        if dry_run:
            logger.info("Dry run, not sending request to PushToLive")
            result.payload = payload
            result.complete(OperationStatus.SKIPPED)
            return result

        self._require_identity()
        logger.info("Sending request to PushToLive...")
        response = self.client.deploy(payload)
        result.apply_response(response)

        if not DeployResult.is_okay(response):
            result.complete(OperationStatus.FAILED)
            raise DeployError(MSG_DEPLOY_FAILED, reason=result.reason)

        logger.info("Services deploying:")
        for service_name in result.services:
            logger.info(f" > {service_name}")

        result.complete(OperationStatus.SUCCESS)
        return result

    def undeploy_app(self) -> UndeployResult:
        """Terminate the deployment for the current repository context

        Returns:
            UndeployResult

        Raises:
            MissingContextError: If the run has no repository context
        """
        if not self.settings.has_repo_context:
            raise MissingContextError(MSG_NO_REPO_CONTEXT)

        repo_context = self.settings.repo_context
        manifest = self.manifest
        result = UndeployResult(
            status=OperationStatus.IN_PROGRESS,
            app_name=manifest.name,
            repo_context=repo_context,
        )

        logger.info(
            f"Terminating '{manifest.name}' ({repo_context.type} {repo_context.name})."
        )

        if not self.instance_exists(manifest.name, repo_context.type, repo_context.name):
            message = MSG_INSTANCE_MISSING.format(
                app=manifest.name,
                ref_type=repo_context.type,
                ref_name=repo_context.name,
            )
            logger.warning(message)
            result.existed = False
            result.add_warning(message)
            result.complete(OperationStatus.SKIPPED)
            return result

        response = self.client.delete_project(
            manifest.name, repo_context.type, repo_context.name
        )
        result.apply_response(response)

        if result.services:
            logger.info("Services terminating:")
            for service_name in result.services:
                logger.info(f" > {service_name}")
        else:
            logger.debug("Nothing to terminate.")

        result.complete(OperationStatus.SUCCESS)
        return result

    def run(self) -> Optional[Result]:
        """Deploy or undeploy depending on the trigger event

        Returns:
            Result of the chosen operation, None for unsupported events
        """
        # Manifest must load before branching, even for unsupported events
        manifest = self.manifest
        event = self.settings.event_name
        logger.debug(f"Event is '{event}' for '{manifest.name}'")

        if event == TriggerEvent.DELETE.value:
            return self.undeploy_app()
        if event == TriggerEvent.PUSH.value:
            return self.deploy_app()

        logger.warning(MSG_UNSUPPORTED_EVENT.format(event=event))
        return None
