"""Publish command implementation"""

import dataclasses
import sys

import click

from ..utils.output import console, format_error, format_publish_result
from ...api import Publisher
from ...api.exceptions import PublishToolError
from ...models import BinaryInputs


@click.command()
@click.argument('version')
@click.option('--binary', '-b', default=None, type=click.Path(dir_okay=False),
              help='Primary binary archive (e.g. build/libs/nbt-2.2.0.jar)')
@click.option('--sources', '-s', default=None, type=click.Path(dir_okay=False),
              help='Sources archive')
@click.option('--javadoc', '-j', default=None, type=click.Path(dir_okay=False),
              help='Documentation archive')
@click.option('--key-id', '-k', default=None,
              help='GPG key used for signing (overrides configuration)')
@click.option('--show-files', is_flag=True,
              help='List every uploaded file')
@click.pass_context
def publish(ctx, version, binary, sources, javadoc, key_id, show_files):
    """Sign and publish VERSION to its repository

    VERSION ending in "-SNAPSHOT" is uploaded to the snapshot repository,
    any other version to the release (staging) repository. All artifacts
    are signed before anything is uploaded.

    Examples:
        # Publish a snapshot
        publish-tool publish 2.2.0-SNAPSHOT -b nbt.jar -s nbt-sources.jar -j nbt-javadoc.jar

        # Publish a release with a specific key
        publish-tool -c publish.yaml publish 2.2.0 -b nbt.jar -s src.jar -j doc.jar -k ABCD1234
    """
    try:
        config = ctx.obj.config
        if key_id:
            config = dataclasses.replace(
                config,
                signing=dataclasses.replace(config.signing, key_id=key_id)
            )

        inputs = BinaryInputs(primary=binary, sources=sources, javadoc=javadoc)

        with console.status("[bold green]Publishing...[/bold green]") as status:
            def progress(path: str, done: int, total: int) -> None:
                status.update(f"[bold green]Uploading[/bold green] {done}/{total}: {path}")

            publisher = Publisher(config, progress_callback=progress)
            result = publisher.publish(version, inputs)

        format_publish_result(result, show_files=show_files)

    except PublishToolError as e:
        format_error(e)
        sys.exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Publishing cancelled by user[/yellow]")
        sys.exit(130)
