"""Configuration data models"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import (
    DEFAULT_CHECKSUM_ALGORITHMS,
    DEFAULT_GPG_BINARY,
    DEFAULT_PACKAGING,
    DEFAULT_UPLOAD_TIMEOUT,
)

# A whole value naming an environment variable, e.g. "${OSSRH_PASSWORD}"
_PLACEHOLDER = re.compile(r"^\$\{(\w+)\}$")


def _value(data: Dict[str, Any], key: str, strip: bool = True) -> Optional[str]:
    """Read an optional string, treating blanks and unset variables as unset

    Only the braced form is a placeholder; a bare "$word" is literal text.
    """
    value = data.get(key)
    if value is None:
        return None
    value = str(value)

    placeholder = _PLACEHOLDER.match(value.strip())
    if placeholder:
        return os.environ.get(placeholder.group(1)) or None

    if not value.strip():
        return None
    return value.strip() if strip else value


@dataclass(frozen=True)
class Credentials:
    """Repository credential pair"""

    username: Optional[str] = None
    password: Optional[str] = None

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password=***)"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Credentials':
        """Create from dictionary"""
        data = data or {}
        return cls(
            username=_value(data, "username", strip=False),
            password=_value(data, "password", strip=False),
        )

    def merged_over(self, fallback: 'Credentials') -> 'Credentials':
        """Fill unset fields from a fallback pair"""
        return Credentials(
            username=self.username if self.username is not None else fallback.username,
            password=self.password if self.password is not None else fallback.password,
        )


@dataclass(frozen=True)
class RepositoryConfig:
    """Configured repository endpoint for one classification key"""

    key: str
    url: Optional[str]
    name: Optional[str] = None
    credentials: Credentials = field(default_factory=Credentials)

    @property
    def display_name(self) -> str:
        return self.name or self.key

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any],
                  shared_credentials: Optional[Credentials] = None) -> 'RepositoryConfig':
        """Create from dictionary, falling back to shared credentials"""
        if isinstance(data, str):
            data = {"url": data}
        credentials = Credentials.from_dict(data.get("credentials") or {
            "username": data.get("username"),
            "password": data.get("password"),
        })
        if shared_credentials is not None:
            credentials = credentials.merged_over(shared_credentials)
        return cls(
            key=key,
            url=_value(data, "url"),
            name=_value(data, "name"),
            credentials=credentials,
        )


@dataclass(frozen=True)
class RepositoryTarget:
    """Concrete repository selected for one publish run"""

    name: str
    endpoint_url: str
    credentials: Credentials


@dataclass(frozen=True)
class LicenseConfig:
    name: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class DeveloperConfig:
    name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class ProjectConfig:
    """Static project facts used for coordinates and metadata"""

    name: Optional[str]
    author_url: Optional[str]
    group: Optional[str] = None
    description: Optional[str] = None
    packaging: str = DEFAULT_PACKAGING
    license: Optional[LicenseConfig] = None
    developers: List[DeveloperConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectConfig':
        """Create from dictionary"""
        license_data = data.get("license")
        license_config = None
        if isinstance(license_data, str):
            license_config = LicenseConfig(name=license_data)
        elif license_data:
            license_config = LicenseConfig(
                name=_value(license_data, "name"),
                url=_value(license_data, "url"),
            )

        developers = []
        for entry in data.get("developers") or []:
            if isinstance(entry, str):
                developers.append(DeveloperConfig(name=entry))
            else:
                developers.append(DeveloperConfig(
                    name=_value(entry, "name") or "",
                    email=_value(entry, "email"),
                ))

        return cls(
            name=_value(data, "name"),
            author_url=_value(data, "author_url"),
            group=_value(data, "group"),
            description=_value(data, "description"),
            packaging=_value(data, "packaging") or DEFAULT_PACKAGING,
            license=license_config,
            developers=developers,
        )


@dataclass(frozen=True)
class SigningConfig:
    """GPG signing options"""

    key_id: Optional[str] = None
    passphrase: Optional[str] = None
    gpg: str = DEFAULT_GPG_BINARY

    def __repr__(self) -> str:
        return f"SigningConfig(key_id={self.key_id!r}, gpg={self.gpg!r})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SigningConfig':
        """Create from dictionary"""
        return cls(
            key_id=_value(data, "key_id"),
            passphrase=_value(data, "passphrase", strip=False),
            gpg=_value(data, "gpg") or DEFAULT_GPG_BINARY,
        )


@dataclass(frozen=True)
class UploadConfig:
    """Transport options"""

    timeout: float = DEFAULT_UPLOAD_TIMEOUT
    checksums: List[str] = field(default_factory=lambda: list(DEFAULT_CHECKSUM_ALGORITHMS))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadConfig':
        """Create from dictionary"""
        checksums = data.get("checksums")
        return cls(
            timeout=float(data.get("timeout", DEFAULT_UPLOAD_TIMEOUT)),
            checksums=list(DEFAULT_CHECKSUM_ALGORITHMS) if checksums is None
            else [str(c).lower() for c in checksums],
        )


@dataclass(frozen=True)
class PublishConfig:
    """Complete configuration record passed into the publisher"""

    project: ProjectConfig
    repositories: Dict[str, RepositoryConfig] = field(default_factory=dict)
    signing: SigningConfig = field(default_factory=SigningConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PublishConfig':
        """Create from dictionary"""
        shared_credentials = Credentials.from_dict(data.get("credentials"))

        repositories = {}
        for key, repo_data in (data.get("repositories") or {}).items():
            repositories[str(key)] = RepositoryConfig.from_dict(
                str(key), repo_data or {}, shared_credentials
            )

        return cls(
            project=ProjectConfig.from_dict(data.get("project") or {}),
            repositories=repositories,
            signing=SigningConfig.from_dict(data.get("signing") or {}),
            upload=UploadConfig.from_dict(data.get("upload") or {}),
        )
