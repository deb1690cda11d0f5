# ptl_client/models/manifest.py
"""Manifest models"""

import copy
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Any, Tuple

import yaml


@dataclass(frozen=True)
class RepoContext:
    """Branch or tag that triggered the run"""
    type: str  # "branch" or "tag"
    name: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            'type': self.type,
            'name': self.name,
        }

    def __str__(self) -> str:
        return f"{self.type}/{self.name}"


@dataclass(frozen=True)
class ServiceZippack:
    """Archived build context of one service"""
    context: str  # build path as written in the manifest
    zippack: str  # base64 encoded zip archive

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            'context': self.context,
            'zippack': self.zippack,
        }


class AppManifest:
    """Application manifest (ptl.yml)

    Wraps the parsed document. The ``with_*`` methods return a new manifest
    and leave this one untouched.
    """

    def __init__(self, data: Dict[str, Any], source: Optional[str] = None):
        """Initialize manifest

        Args:
            data: Parsed manifest document
            source: Path the manifest was read from
        """
        self._data = data
        self.source = source

    @property
    def name(self) -> str:
        """Application name"""
        return self._data['name']

    @property
    def services(self) -> Dict[str, Any]:
        """Service name to service config mapping"""
        return self._data.get('services') or {}

    @property
    def context(self) -> Optional[Dict[str, str]]:
        """Injected repository context, if any"""
        return self._data.get('context')

    def build_paths(self) -> Iterator[Tuple[str, str]]:
        """Iterate (service name, build path) for services with a build path

        Services whose ``build`` was already turned into a zippack are skipped.
        """
        for service_name, configuration in self.services.items():
            if not isinstance(configuration, dict):
                continue
            build = configuration.get('build')
            if isinstance(build, str) and build:
                yield service_name, build

    def with_context(self, repo_context: RepoContext) -> 'AppManifest':
        """Return a copy carrying the repository context"""
        data = dict(self._data)
        data['context'] = repo_context.to_dict()
        return AppManifest(data, self.source)

    def with_zippack(self, service_name: str, zippack: ServiceZippack) -> 'AppManifest':
        """Return a copy whose service ``build`` is replaced by the zippack"""
        services = dict(self.services)
        service = dict(services[service_name])
        service['build'] = zippack.to_dict()
        services[service_name] = service

        data = dict(self._data)
        data['services'] = services
        return AppManifest(data, self.source)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (deep copy)"""
        return copy.deepcopy(self._data)

    def dump(self) -> str:
        """Serialize to YAML for the deploy request"""
        return yaml.safe_dump(self._data, default_flow_style=False, sort_keys=False)

    def __repr__(self) -> str:
        return f"AppManifest(name={self._data.get('name')!r}, services={list(self.services)!r})"
