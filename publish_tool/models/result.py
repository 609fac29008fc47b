"""Operation result models"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .artifact import Coordinates


@dataclass(frozen=True)
class PublishResult:
    """Result of a successful publish operation"""

    coordinates: Coordinates
    repository_name: str
    artifact_count: int
    uploaded_files: Tuple[str, ...] = field(default_factory=tuple)
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "coordinates": str(self.coordinates),
            "repository": self.repository_name,
            "artifact_count": self.artifact_count,
            "uploaded_files": list(self.uploaded_files),
            "duration": self.duration,
        }
