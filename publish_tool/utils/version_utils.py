"""Version description utilities"""

from dataclasses import dataclass
from typing import Optional

from packaging.version import InvalidVersion, Version, parse

from ..constants import SNAPSHOT_SUFFIX, Classification
from ..core.version_classifier import classify


@dataclass(frozen=True)
class VersionInfo:
    """Descriptive view of a version string"""

    version: str
    classification: Classification
    base_version: str
    parsed: Optional[Version] = None

    @property
    def is_prerelease(self) -> bool:
        """True when the base version looks like an alpha, beta, rc or dev version"""
        return self.parsed is not None and self.parsed.is_prerelease

    @property
    def is_standard(self) -> bool:
        """True when the base version parses as a standard version number"""
        return self.parsed is not None


def base_version(version: str) -> str:
    """Strip the snapshot suffix, if any"""
    if version.endswith(SNAPSHOT_SUFFIX):
        return version[:-len(SNAPSHOT_SUFFIX)]
    return version


def parse_version(version_str: str) -> Optional[Version]:
    """
    Parse version string

    Args:
        version_str: Version string

    Returns:
        Version object or None if invalid
    """
    try:
        return parse(version_str)
    except InvalidVersion:
        return None


def describe_version(version: str) -> VersionInfo:
    """Describe a version; classification always comes from the suffix rule"""
    base = base_version(version)
    return VersionInfo(
        version=version,
        classification=classify(version),
        base_version=base,
        parsed=parse_version(base) if base else None,
    )
