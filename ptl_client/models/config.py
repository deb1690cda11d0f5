"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..constants import DEFAULT_ENDPOINT, DEFAULT_EVENT, DEFAULT_TIMEOUT
from .manifest import RepoContext


@dataclass(frozen=True)
class Credentials:
    """Access/secret key pair sent with every request"""

    access_key: str
    secret_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key!r}, secret_key='***')"


@dataclass(frozen=True)
class Settings:
    """Everything a run needs, resolved once at startup"""

    credentials: Credentials
    endpoint: str = DEFAULT_ENDPOINT
    debug_transport: bool = False
    timeout: float = DEFAULT_TIMEOUT
    event_name: str = DEFAULT_EVENT
    repo_context: Optional[RepoContext] = None
    manifest_candidates: List[Path] = field(default_factory=list)

    @property
    def has_repo_context(self) -> bool:
        """Check if the run was triggered with a branch/tag context"""
        return self.repo_context is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (credentials redacted)"""
        return {
            "endpoint": self.endpoint,
            "debug_transport": self.debug_transport,
            "timeout": self.timeout,
            "event_name": self.event_name,
            "repo_context": self.repo_context.to_dict() if self.repo_context else None,
            "manifest_candidates": [str(p) for p in self.manifest_candidates],
        }
