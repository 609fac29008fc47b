"""Snapshot/release classification of version strings"""

from ..constants import Classification, SNAPSHOT_SUFFIX


def classify(version: str) -> Classification:
    """
    Classify a version string

    A version is a snapshot exactly when it ends with the case-sensitive
    suffix "-SNAPSHOT". Every other string, including "", is a release.

    Args:
        version: Version string

    Returns:
        Classification of the version
    """
    if version.endswith(SNAPSHOT_SUFFIX):
        return Classification.SNAPSHOT
    return Classification.RELEASE


def is_snapshot(version: str) -> bool:
    return classify(version) is Classification.SNAPSHOT
