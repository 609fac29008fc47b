"""Publish Tool - Signed release publishing for library artifacts.

This tool assembles a library's binary, sources and documentation archives
into a signed publication and uploads it to the snapshot or release
repository selected from the version string.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.publisher import Publisher, publish

# Exceptions
from .api.exceptions import (
    PublishToolError,
    ConfigError,
    ValidationError,
    MissingArtifactError,
    DuplicateArtifactError,
    IncompleteConfigError,
    SigningFailedError,
    UnknownRepositoryError,
    MissingCredentialsError,
    UploadError,
)

# Data models
from .constants import Classification
from .models import (
    Artifact,
    BinaryInputs,
    Coordinates,
    Metadata,
    Publication,
    PublishConfig,
    PublishResult,
    RepositoryTarget,
    SignatureSet,
)

# Decision functions
from .core import classify

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Publisher",

    # Core API functions
    "publish",
    "classify",

    # Data models
    "Classification",
    "Artifact",
    "BinaryInputs",
    "Coordinates",
    "Metadata",
    "Publication",
    "PublishConfig",
    "PublishResult",
    "RepositoryTarget",
    "SignatureSet",

    # Exceptions
    "PublishToolError",
    "ConfigError",
    "ValidationError",
    "MissingArtifactError",
    "DuplicateArtifactError",
    "IncompleteConfigError",
    "SigningFailedError",
    "UnknownRepositoryError",
    "MissingCredentialsError",
    "UploadError",
]
