"""Global constants for publish-tool"""

from enum import Enum

APP_NAME = "publish-tool"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".publish-tool.yaml"

# Version classification
SNAPSHOT_SUFFIX = "-SNAPSHOT"

# Artifact classifiers
PRIMARY_CLASSIFIER = ""
SOURCES_CLASSIFIER = "sources"
JAVADOC_CLASSIFIER = "javadoc"

DEFAULT_EXTENSION = "jar"
DEFAULT_MEDIA_TYPE = "application/java-archive"
DEFAULT_PACKAGING = "jar"

MEDIA_TYPES = {
    "jar": "application/java-archive",
    "zip": "application/zip",
    "pom": "application/xml",
    "asc": "text/plain",
}

# Repository metadata
POM_MODEL_VERSION = "4.0.0"
POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
POM_SCHEMA_LOCATION = "http://maven.apache.org/xsd/maven-4.0.0.xsd"
SCM_TREE_SUFFIX = "/tree/main"

# Signing
SIGNATURE_EXTENSION = "asc"
DEFAULT_GPG_BINARY = "gpg"

# Upload
DEFAULT_UPLOAD_TIMEOUT = 60  # seconds
DEFAULT_CHECKSUM_ALGORITHMS = ["md5", "sha1"]
SUPPORTED_CHECKSUM_ALGORITHMS = ["md5", "sha1", "sha256", "sha512"]


class Classification(Enum):
    """Repository classification derived from a version string"""
    SNAPSHOT = "snapshot"
    RELEASE = "release"

    @property
    def repository_ids(self):
        """Configuration keys tried, in order, when selecting a repository"""
        if self is Classification.SNAPSHOT:
            return ("snapshot",)
        return ("release", "staging")


class TransportType(Enum):
    HTTP = "http"
    FILESYSTEM = "filesystem"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "PT001"
    MISSING_ARTIFACT = "PT002"
    DUPLICATE_ARTIFACT = "PT003"
    INCOMPLETE_CONFIG = "PT004"
    SIGNING_FAILED = "PT005"
    UNKNOWN_REPOSITORY = "PT006"
    MISSING_CREDENTIALS = "PT007"
    UPLOAD_FAILED = "PT008"
    VALIDATION_FAILED = "PT009"


# Environment variables
ENV_CONFIG_PATH = "PUBLISH_TOOL_CONFIG"
ENV_GPG_BINARY = "GPG"
ENV_GPG_PASSPHRASE = "GPG_PASSPHRASE"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
