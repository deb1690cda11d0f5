"""Caller identity model"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Identity:
    """Who the credentials belong to"""
    username: str
    email: str
    org_name: str

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'Identity':
        """Create from a whoami response body"""
        return cls(
            username=data.get('Username', ''),
            email=data.get('Email', ''),
            org_name=data.get('OrgName', ''),
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            'username': self.username,
            'email': self.email,
            'org_name': self.org_name,
        }
