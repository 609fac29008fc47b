"""Exception definitions for publish-tool API"""

from ..constants import ErrorCode


class PublishToolError(Exception):
    """Base exception for publish-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code

    @property
    def kind(self) -> str:
        """Error kind reported to the caller"""
        return self.__class__.__name__


class ConfigError(PublishToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(PublishToolError):
    """Validation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class MissingArtifactError(PublishToolError):
    """A required artifact is absent or empty"""

    def __init__(self, classifier: str, reason: str = None):
        label = classifier or "primary"
        message = f"Missing artifact: {label}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, ErrorCode.MISSING_ARTIFACT)
        self.classifier = classifier


class DuplicateArtifactError(PublishToolError):
    """Two artifacts share a classifier within one publication"""

    def __init__(self, classifier: str):
        label = classifier or "primary"
        super().__init__(f"Duplicate artifact classifier: {label}", ErrorCode.DUPLICATE_ARTIFACT)
        self.classifier = classifier


class IncompleteConfigError(PublishToolError):
    """A required project configuration field is empty"""

    def __init__(self, field_name: str):
        super().__init__(f"Required configuration field is empty: {field_name}",
                         ErrorCode.INCOMPLETE_CONFIG)
        self.field_name = field_name


class SigningFailedError(PublishToolError):
    """Signing of an artifact failed"""

    def __init__(self, classifier: str = None, reason: str = None):
        if classifier is None:
            message = "Signing failed"
        else:
            message = f"Signing failed for artifact: {classifier or 'primary'}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, ErrorCode.SIGNING_FAILED)
        self.classifier = classifier
        self.reason = reason


class UnknownRepositoryError(PublishToolError):
    """No repository is configured for a classification"""

    def __init__(self, repository_id: str):
        super().__init__(f"No repository configured for: {repository_id}",
                         ErrorCode.UNKNOWN_REPOSITORY)
        self.repository_id = repository_id


class MissingCredentialsError(PublishToolError):
    """Repository credentials are unset or empty"""

    def __init__(self, repository_name: str, field_name: str):
        super().__init__(f"Missing {field_name} for repository: {repository_name}",
                         ErrorCode.MISSING_CREDENTIALS)
        self.repository_name = repository_name
        self.field_name = field_name


class UploadError(PublishToolError):
    """Upload rejected or failed in the transport"""

    def __init__(self, message: str, path: str = None, status_code: int = None):
        super().__init__(message, ErrorCode.UPLOAD_FAILED)
        self.path = path
        self.status_code = status_code
