"""Artifact and publication data models"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Tuple

from ..api.exceptions import DuplicateArtifactError, MissingArtifactError
from ..constants import DEFAULT_EXTENSION, DEFAULT_MEDIA_TYPE, PRIMARY_CLASSIFIER
from .metadata import Metadata


@dataclass(frozen=True)
class Artifact:
    """A named file belonging to one publication"""

    classifier: str
    content: bytes
    extension: str = DEFAULT_EXTENSION
    media_type: str = DEFAULT_MEDIA_TYPE

    @property
    def is_primary(self) -> bool:
        return self.classifier == PRIMARY_CLASSIFIER

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return (f"Artifact(classifier={self.classifier!r}, extension={self.extension!r}, "
                f"size={self.size})")


@dataclass(frozen=True)
class Coordinates:
    """Repository coordinates of a publication"""

    group: str
    artifact_id: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class Publication:
    """Complete set of artifacts plus metadata for one version

    Exactly one artifact has the empty classifier; all classifiers are unique.
    """

    coordinates: Coordinates
    artifacts: Tuple[Artifact, ...]
    metadata: Metadata

    def __post_init__(self):
        object.__setattr__(self, "artifacts", tuple(self.artifacts))

        seen = set()
        for artifact in self.artifacts:
            if artifact.classifier in seen:
                raise DuplicateArtifactError(artifact.classifier)
            seen.add(artifact.classifier)

        if PRIMARY_CLASSIFIER not in seen:
            raise MissingArtifactError(PRIMARY_CLASSIFIER)

    @property
    def primary(self) -> Artifact:
        return next(a for a in self.artifacts if a.is_primary)

    @property
    def classifiers(self) -> Tuple[str, ...]:
        return tuple(a.classifier for a in self.artifacts)

    def get(self, classifier: str) -> Artifact:
        for artifact in self.artifacts:
            if artifact.classifier == classifier:
                return artifact
        raise KeyError(classifier)


class SignatureSet(Mapping):
    """Read-only mapping of artifact classifier to detached signature bytes"""

    def __init__(self, signatures: Dict[str, bytes]):
        self._signatures = MappingProxyType(dict(signatures))

    def __getitem__(self, classifier: str) -> bytes:
        return self._signatures[classifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._signatures)

    def __len__(self) -> int:
        return len(self._signatures)

    def covers(self, publication: Publication) -> bool:
        """Check the signature domain equals the publication's classifiers"""
        return set(self._signatures) == set(publication.classifiers)

    def __repr__(self) -> str:
        return f"SignatureSet({sorted(self._signatures)!r})"


@dataclass(frozen=True)
class BinaryInputs:
    """Byte-bearing handles produced by the build: paths, bytes or artifacts"""

    primary: Any = None
    sources: Any = None
    javadoc: Any = None
    extras: Tuple[Artifact, ...] = ()
