"""Repository target selection by version classification"""

from typing import Mapping

from ..api.exceptions import MissingCredentialsError, UnknownRepositoryError
from ..constants import Classification
from ..models import RepositoryConfig, RepositoryTarget


def select(classification: Classification,
           repositories: Mapping[str, RepositoryConfig]) -> RepositoryTarget:
    """
    Select the repository for a classification

    Snapshots go to the "snapshot" entry; releases go to "release",
    or to "staging" when no "release" entry exists.

    Args:
        classification: Result of version classification
        repositories: Configured repositories keyed by id

    Returns:
        Repository target with endpoint and credentials

    Raises:
        UnknownRepositoryError: If no entry with a URL exists for the classification
        MissingCredentialsError: If username or password is unset or empty
    """
    repository = None
    for repository_id in classification.repository_ids:
        candidate = repositories.get(repository_id)
        if candidate is not None and candidate.url:
            repository = candidate
            break

    if repository is None:
        raise UnknownRepositoryError(classification.repository_ids[0])

    credentials = repository.credentials
    if not credentials.username:
        raise MissingCredentialsError(repository.display_name, "username")
    if not credentials.password:
        raise MissingCredentialsError(repository.display_name, "password")

    return RepositoryTarget(
        name=repository.display_name,
        endpoint_url=repository.url,
        credentials=credentials,
    )
