"""Version classification command"""

import click

from ..utils.output import format_version_info
from ...utils.version_utils import describe_version


@click.command()
@click.argument('version')
def classify(version):
    """Show whether VERSION is a snapshot or a release

    Versions ending in "-SNAPSHOT" go to the snapshot repository; every
    other version goes to the release (staging) repository.

    Examples:
        publish-tool classify 2.2.0
        publish-tool classify 2.2.0-SNAPSHOT
    """
    info = describe_version(version)
    format_version_info(info, info.classification.repository_ids)
