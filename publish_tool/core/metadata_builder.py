"""Metadata derivation from static project configuration"""

from ..api.exceptions import IncompleteConfigError
from ..constants import SCM_TREE_SUFFIX
from ..models import Developer, License, Metadata, ProjectConfig, Scm


def project_path(config: ProjectConfig) -> str:
    """Join author URL and project name without touching either"""
    return f"{config.author_url}/{config.name}"


def build(config: ProjectConfig) -> Metadata:
    """
    Build publication metadata

    The SCM coordinates are plain string concatenations around
    "author_url/name"; no URL normalization is applied.

    Args:
        config: Project configuration

    Returns:
        Immutable metadata

    Raises:
        IncompleteConfigError: If name or author_url is empty
    """
    if not config.name:
        raise IncompleteConfigError("name")
    if not config.author_url:
        raise IncompleteConfigError("author_url")

    path = project_path(config)

    license_ = None
    if config.license and config.license.name:
        license_ = License(name=config.license.name, url=config.license.url or "")

    return Metadata(
        display_name=config.name,
        description=config.description,
        project_url=f"https://{path}",
        license=license_,
        developers=tuple(
            Developer(name=d.name, email=d.email or "")
            for d in config.developers
        ),
        scm=Scm(
            url=f"https://{path}{SCM_TREE_SUFFIX}",
            connection=f"scm:git:git://{path}.git",
            developer_connection=f"scm:git:ssh://{path}.git",
        ),
    )
