# publish_tool/models/__init__.py
"""Data models for publish-tool"""

from .metadata import Metadata, License, Developer, Scm
from .artifact import Artifact, BinaryInputs, Coordinates, Publication, SignatureSet
from .config import (
    Credentials,
    RepositoryConfig,
    RepositoryTarget,
    ProjectConfig,
    LicenseConfig,
    DeveloperConfig,
    SigningConfig,
    UploadConfig,
    PublishConfig,
)
from .result import PublishResult

__all__ = [
    # Metadata models
    "Metadata",
    "License",
    "Developer",
    "Scm",

    # Artifact models
    "Artifact",
    "BinaryInputs",
    "Coordinates",
    "Publication",
    "SignatureSet",

    # Config models
    "Credentials",
    "RepositoryConfig",
    "RepositoryTarget",
    "ProjectConfig",
    "LicenseConfig",
    "DeveloperConfig",
    "SigningConfig",
    "UploadConfig",
    "PublishConfig",

    # Result models
    "PublishResult",
]
