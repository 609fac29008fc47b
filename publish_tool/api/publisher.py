"""Publisher API for publishing operations"""

import logging
import time
from typing import Callable, Optional

from ..constants import Classification
from ..core import (
    ArtifactAssembler,
    RepositoryLayout,
    build_metadata,
    classify,
    render_pom,
    select_repository,
    sign,
)
from ..models import (
    BinaryInputs,
    Coordinates,
    PublishConfig,
    Publication,
    PublishResult,
)
from ..signing import GpgSigner, Signer
from ..transport import Transport, TransportFactory
from ..utils.async_utils import run_async
from ..utils.version_utils import describe_version
from .exceptions import IncompleteConfigError, ValidationError

logger = logging.getLogger(__name__)


class Publisher:
    """Publisher class for publishing operations

    Runs one linear sequence per call: classify, assemble, build metadata,
    construct the publication, sign, select the repository, upload. Any
    failure aborts the sequence; nothing is uploaded before every artifact
    is signed.
    """

    def __init__(self,
                 config: PublishConfig,
                 signer: Optional[Signer] = None,
                 transport: Optional[Transport] = None,
                 progress_callback: Optional[Callable[[str, int, int], None]] = None):
        """
        Initialize publisher

        Args:
            config: Publish configuration, loaded once by the caller
            signer: Signing capability (GPG from config if omitted)
            transport: Upload transport (chosen from the repository URL if omitted)
            progress_callback: Upload progress callback (path, files_done, total_files)
        """
        self.config = config
        self.signer = signer or GpgSigner.from_config(config.signing)
        self.transport = transport
        self.progress_callback = progress_callback
        self.assembler = ArtifactAssembler()
        self.layout = RepositoryLayout(
            checksums=config.upload.checksums,
            signature_extension=self.signer.signature_extension
        )

    def coordinates(self, version: str) -> Coordinates:
        """Repository coordinates for a version of the configured project"""
        project = self.config.project
        if not project.group:
            raise IncompleteConfigError("group")
        if not project.name:
            raise IncompleteConfigError("name")
        if not version:
            raise ValidationError("Version is required")
        return Coordinates(group=project.group, artifact_id=project.name, version=version)

    def render_pom(self, version: str) -> bytes:
        """Render the POM that a publish of this version would upload"""
        metadata = build_metadata(self.config.project)
        return render_pom(self.coordinates(version), metadata, self.config.project.packaging)

    def publish(self, version: str, inputs: BinaryInputs) -> PublishResult:
        """
        Publish a version

        Args:
            version: Version string, read once
            inputs: Build outputs for the primary, sources and javadoc slots

        Returns:
            PublishResult: Publishing result

        Raises:
            PublishToolError: Subclass identifying the failing step
        """
        start_time = time.time()

        # 1. Classify version
        classification = classify(version)
        self._warn_on_prerelease(version, classification)
        logger.info("Version %s classified as %s", version, classification.value)

        # 2. Assemble artifacts
        artifacts = self.assembler.assemble(
            inputs.primary,
            inputs.sources,
            inputs.javadoc,
            inputs.extras
        )

        # 3. Build metadata
        metadata = build_metadata(self.config.project)

        # 4. Construct publication
        publication = Publication(
            coordinates=self.coordinates(version),
            artifacts=artifacts,
            metadata=metadata
        )
        pom = render_pom(publication.coordinates, metadata, self.config.project.packaging)

        # 5. Sign every artifact
        signatures = sign(publication, self.signer)
        logger.info("Signed %d artifacts", len(signatures))

        # 6. Select repository
        target = select_repository(classification, self.config.repositories)
        logger.info("Selected repository %s (%s)", target.name, target.endpoint_url)

        # 7. Upload
        files = self.layout.build_files(publication, signatures, pom)
        transport = self.transport or TransportFactory.create_for_url(
            target.endpoint_url,
            {"timeout": self.config.upload.timeout}
        )
        run_async(transport.upload(
            target.endpoint_url,
            target.credentials,
            files,
            callback=self.progress_callback
        ))
        logger.info("Uploaded %d files for %s", len(files), publication.coordinates)

        return PublishResult(
            coordinates=publication.coordinates,
            repository_name=target.name,
            artifact_count=len(publication.artifacts),
            uploaded_files=tuple(files),
            duration=time.time() - start_time
        )

    @staticmethod
    def _warn_on_prerelease(version: str, classification: Classification) -> None:
        info = describe_version(version)
        if classification is Classification.RELEASE and info.is_prerelease:
            logger.warning(
                "Version %s looks like a pre-release but will be published "
                "to the release repository", version
            )


def publish(version: str,
            inputs: BinaryInputs,
            config: PublishConfig,
            signer: Optional[Signer] = None,
            transport: Optional[Transport] = None) -> PublishResult:
    """
    Convenience function for publishing

    Args:
        version: Version string
        inputs: Build outputs
        config: Publish configuration
        signer: Signing capability
        transport: Upload transport

    Returns:
        PublishResult: Publishing result
    """
    publisher = Publisher(config, signer=signer, transport=transport)
    return publisher.publish(version, inputs)
