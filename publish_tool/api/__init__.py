# publish_tool/api/__init__.py
"""API layer for publish-tool"""

# Exceptions first: models and core import them while this package initializes
from .exceptions import (
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
from .publisher import Publisher, publish

__all__ = [
    # Main classes
    "Publisher",

    # Convenience functions
    "publish",

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
