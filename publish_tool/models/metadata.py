"""Descriptive publication metadata"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class License:
    name: str
    url: str


@dataclass(frozen=True)
class Developer:
    name: str
    email: str


@dataclass(frozen=True)
class Scm:
    """Source control coordinates"""
    url: str
    connection: str
    developer_connection: str


@dataclass(frozen=True)
class Metadata:
    """Repository metadata for a publication (the POM-equivalent)

    Built from static project configuration only, never from artifact contents.
    """

    display_name: str
    description: Optional[str]
    project_url: str
    license: Optional[License]
    developers: Tuple[Developer, ...] = field(default_factory=tuple)
    scm: Optional[Scm] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.display_name,
            "description": self.description,
            "url": self.project_url,
            "license": {
                "name": self.license.name,
                "url": self.license.url,
            } if self.license else None,
            "developers": [
                {"name": d.name, "email": d.email}
                for d in self.developers
            ],
            "scm": {
                "url": self.scm.url,
                "connection": self.scm.connection,
                "developer_connection": self.scm.developer_connection,
            } if self.scm else None,
        }
