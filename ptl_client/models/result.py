"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Any

from ..constants import STATUS_OKAY
from .manifest import RepoContext


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    warnings: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=_utcnow)
    end_time: Optional[datetime] = None

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = _utcnow()
        if status:
            self.status = status


def service_names(entries: Optional[List[Dict[str, Any]]]) -> List[str]:
    """Pull ``Name`` out of a list of service entries from the API"""
    names = []
    for entry in entries or []:
        if isinstance(entry, dict) and entry.get('Name'):
            names.append(entry['Name'])
    return names


@dataclass
class DeployResult(Result):
    """Result of a deploy request"""

    app_name: str = ""
    repo_context: Optional[RepoContext] = None
    services: List[str] = field(default_factory=list)
    zippacks: Dict[str, int] = field(default_factory=dict)  # service -> archive size
    reason: Optional[str] = None
    dry_run: bool = False
    payload: Optional[str] = None

    @staticmethod
    def is_okay(response: Dict[str, Any]) -> bool:
        """Check the ``Status`` field of a deploy response"""
        return response.get('Status') == STATUS_OKAY

    def apply_response(self, response: Dict[str, Any]) -> None:
        """Fill in services and reason from the deploy response"""
        self.services = service_names(response.get('Services'))
        self.reason = response.get('Reason')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "app_name": self.app_name,
            "repo_context": self.repo_context.to_dict() if self.repo_context else None,
            "services": self.services,
            "zippacks": self.zippacks,
            "reason": self.reason,
            "dry_run": self.dry_run,
            "warnings": self.warnings,
            "duration": self.duration,
        }


@dataclass
class UndeployResult(Result):
    """Result of an undeploy request"""

    app_name: str = ""
    repo_context: Optional[RepoContext] = None
    existed: bool = True
    services: List[str] = field(default_factory=list)

    def apply_response(self, response: Dict[str, Any]) -> None:
        """Fill in terminated services from the delete response"""
        deleted = response.get('Deleted')
        if isinstance(deleted, dict):
            self.services = service_names(deleted.get('Service'))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "app_name": self.app_name,
            "repo_context": self.repo_context.to_dict() if self.repo_context else None,
            "existed": self.existed,
            "services": self.services,
            "warnings": self.warnings,
            "duration": self.duration,
        }


@dataclass
class PackResult(Result):
    """Result of a local pack operation"""

    source_path: Optional[str] = None
    output_path: Optional[str] = None
    size: int = 0
    file_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "source_path": self.source_path,
            "output_path": self.output_path,
            "size": self.size,
            "file_count": self.file_count,
            "duration": self.duration,
        }
