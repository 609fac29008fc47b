"""Artifact assembly for a single publication"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..api.exceptions import DuplicateArtifactError, MissingArtifactError
from ..constants import (
    DEFAULT_EXTENSION,
    DEFAULT_MEDIA_TYPE,
    JAVADOC_CLASSIFIER,
    MEDIA_TYPES,
    PRIMARY_CLASSIFIER,
    SOURCES_CLASSIFIER,
)
from ..models import Artifact

logger = logging.getLogger(__name__)

ArtifactInput = Union[Artifact, bytes, bytearray, Path, str]


class ArtifactAssembler:
    """Collects the primary binary, sources and documentation into one artifact set"""

    def __init__(self, default_extension: str = DEFAULT_EXTENSION):
        self.default_extension = default_extension

    def assemble(self,
                 primary: Optional[ArtifactInput],
                 sources: Optional[ArtifactInput],
                 javadoc: Optional[ArtifactInput],
                 extras: Iterable[Artifact] = ()) -> Tuple[Artifact, ...]:
        """
        Assemble the artifacts of one publication

        Args:
            primary: Compiled binary archive
            sources: Source archive
            javadoc: Rendered documentation archive
            extras: Additional artifacts with their own classifiers

        Returns:
            Artifacts ordered primary, sources, javadoc, extras

        Raises:
            MissingArtifactError: If any required input is absent or empty
            DuplicateArtifactError: If two artifacts share a classifier
        """
        artifacts = [
            self._to_artifact(PRIMARY_CLASSIFIER, primary),
            self._to_artifact(SOURCES_CLASSIFIER, sources),
            self._to_artifact(JAVADOC_CLASSIFIER, javadoc),
        ]
        for extra in extras:
            if not extra.content:
                raise MissingArtifactError(extra.classifier, "empty content")
            artifacts.append(extra)

        seen = set()
        for artifact in artifacts:
            if artifact.classifier in seen:
                raise DuplicateArtifactError(artifact.classifier)
            seen.add(artifact.classifier)

        logger.debug("Assembled %d artifacts: %s", len(artifacts),
                     ", ".join(a.classifier or "<primary>" for a in artifacts))
        return tuple(artifacts)

    def _to_artifact(self, classifier: str, handle: Optional[ArtifactInput]) -> Artifact:
        """Turn an input handle into an artifact for a classifier slot"""
        if handle is None:
            raise MissingArtifactError(classifier)

        if isinstance(handle, Artifact):
            if handle.classifier != classifier:
                raise MissingArtifactError(
                    classifier, f"got artifact with classifier '{handle.classifier}'"
                )
            if not handle.content:
                raise MissingArtifactError(classifier, "empty content")
            return handle

        if isinstance(handle, (bytes, bytearray)):
            content = bytes(handle)
            extension = self.default_extension
        else:
            path = Path(handle)
            if not path.is_file():
                raise MissingArtifactError(classifier, f"file not found: {path}")
            try:
                content = path.read_bytes()
            except OSError as e:
                raise MissingArtifactError(classifier, f"cannot read {path}: {e}") from e
            extension = path.suffix.lstrip(".") or self.default_extension

        if not content:
            raise MissingArtifactError(classifier, "empty content")

        return Artifact(
            classifier=classifier,
            content=content,
            extension=extension,
            media_type=MEDIA_TYPES.get(extension, DEFAULT_MEDIA_TYPE),
        )


def assemble(primary: Optional[ArtifactInput],
             sources: Optional[ArtifactInput],
             javadoc: Optional[ArtifactInput],
             extras: Iterable[Artifact] = ()) -> Tuple[Artifact, ...]:
    """Convenience function for ArtifactAssembler.assemble"""
    return ArtifactAssembler().assemble(primary, sources, javadoc, extras)
