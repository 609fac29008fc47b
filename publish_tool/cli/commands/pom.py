"""POM preview command"""

import sys

import click

from ..utils.output import format_error, format_xml
from ...api import Publisher
from ...api.exceptions import PublishToolError


@click.command()
@click.argument('version')
@click.option('--raw', is_flag=True, help='Print the document without highlighting')
@click.pass_context
def pom(ctx, version, raw):
    """Print the POM that would be published for VERSION

    The document is built from the project section of the configuration
    only, so no build outputs are needed.
    """
    try:
        document = Publisher(ctx.obj.config).render_pom(version)
    except PublishToolError as e:
        format_error(e, title="POM Error")
        sys.exit(1)

    if raw:
        click.echo(document.decode("utf-8"), nl=False)
    else:
        format_xml(document, title=f"pom.xml ({version})")
