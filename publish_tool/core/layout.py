"""Maven repository layout for a signed publication"""

from typing import Dict, Optional, Sequence

from ..api.exceptions import ConfigError, SigningFailedError
from ..constants import SIGNATURE_EXTENSION, SUPPORTED_CHECKSUM_ALGORITHMS
from ..models import Artifact, Coordinates, Publication, SignatureSet
from ..utils.hash_utils import generate_checksums


class RepositoryLayout:
    """Maps a publication onto repository-relative file paths"""

    def __init__(self,
                 checksums: Sequence[str] = (),
                 signature_extension: str = SIGNATURE_EXTENSION):
        """
        Initialize layout

        Args:
            checksums: Checksum algorithms written next to artifacts and the POM
            signature_extension: Extension appended to signed file names
        """
        unsupported = [a for a in checksums if a not in SUPPORTED_CHECKSUM_ALGORITHMS]
        if unsupported:
            raise ConfigError(f"Unsupported checksum algorithm(s): {', '.join(unsupported)}")

        self.checksums = list(checksums)
        self.signature_extension = signature_extension

    @staticmethod
    def directory(coordinates: Coordinates) -> str:
        """Directory of a version, e.g. me/nullicorn/nbt/2.2.0"""
        group_path = coordinates.group.replace(".", "/")
        return f"{group_path}/{coordinates.artifact_id}/{coordinates.version}"

    def file_name(self,
                  coordinates: Coordinates,
                  extension: str,
                  classifier: Optional[str] = None) -> str:
        base = f"{coordinates.artifact_id}-{coordinates.version}"
        if classifier:
            base = f"{base}-{classifier}"
        return f"{base}.{extension}"

    def artifact_path(self, coordinates: Coordinates, artifact: Artifact) -> str:
        return (f"{self.directory(coordinates)}/"
                f"{self.file_name(coordinates, artifact.extension, artifact.classifier)}")

    def pom_path(self, coordinates: Coordinates) -> str:
        return f"{self.directory(coordinates)}/{self.file_name(coordinates, 'pom')}"

    def build_files(self,
                    publication: Publication,
                    signatures: SignatureSet,
                    pom: bytes) -> Dict[str, bytes]:
        """
        Build the complete file map for one upload

        Args:
            publication: Publication being uploaded
            signatures: Signatures covering every artifact
            pom: Rendered POM document

        Returns:
            Mapping of repository-relative path -> content

        Raises:
            SigningFailedError: If signatures do not cover the publication
        """
        if not signatures.covers(publication):
            raise SigningFailedError(reason="signature set does not cover every artifact")

        files: Dict[str, bytes] = {}
        coordinates = publication.coordinates

        for artifact in publication.artifacts:
            path = self.artifact_path(coordinates, artifact)
            self._add(files, path, artifact.content)
            files[f"{path}.{self.signature_extension}"] = signatures[artifact.classifier]

        self._add(files, self.pom_path(coordinates), pom)
        return files

    def _add(self, files: Dict[str, bytes], path: str, content: bytes) -> None:
        files[path] = content
        for algorithm, digest in generate_checksums(content, self.checksums).items():
            files[f"{path}.{algorithm}"] = digest.encode("ascii")

