# publish_tool/cli/main.py
"""Command line entry point for publish-tool"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT
from ..models import PublishConfig
from ..services import ConfigService
from .commands import classify, pom, publish

console = Console()

# Libraries that log every request at INFO
NOISY_LOGGERS = ("asyncio", "httpx", "httpcore")


def log_level(verbose: bool = False, debug: bool = False, quiet: bool = False) -> int:
    """Map the global verbosity flags to a logging level"""
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO if verbose else logging.WARNING


def setup_logging(level: int, debug: bool = False) -> None:
    """Route log records through rich

    Args:
        level: Root logging level
        debug: Show timestamps and source locations
    """
    handler = RichHandler(
        console=console,
        show_time=debug,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_suppress=[click]
    )
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


class Context:
    """Per-invocation CLI state

    The configuration file is read on first access, so commands such as
    'classify' work outside a configured project.
    """

    def __init__(self, config_path: Optional[str] = None,
                 verbose: bool = False, debug: bool = False):
        self.config_path = config_path
        self.verbose = verbose
        self.debug = debug
        self._config_service: Optional[ConfigService] = None

    @property
    def config_service(self) -> ConfigService:
        if self._config_service is None:
            self._config_service = ConfigService(self.config_path)
        return self._config_service

    @property
    def config(self) -> PublishConfig:
        """Publish configuration, loaded once

        Raises:
            ConfigError: If the configuration file is missing or invalid
        """
        return self.config_service.config


@click.group(name=APP_NAME)
@click.option('-c', '--config', 'config_path', default=None,
              type=click.Path(dir_okay=False),
              help='Configuration file (default: .publish-tool.yaml)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Only log errors')
@click.version_option(package_name="publish-tool", prog_name=APP_NAME)
@click.pass_context
def cli(ctx, config_path, verbose, debug, quiet):
    """Publish Tool - Sign and publish library artifacts

    Assembles the binary, sources and documentation archives of a build
    into one signed publication and uploads it to the snapshot or release
    repository, depending on the version string.
    """
    setup_logging(log_level(verbose, debug, quiet), debug=debug)
    ctx.obj = Context(config_path, verbose=verbose, debug=debug)


cli.add_command(publish.publish)
cli.add_command(classify.classify)
cli.add_command(pom.pom)


def main():
    """Console script entry point

    Commands report their own PublishToolError failures; anything that
    escapes them is printed here and exits with status 1.
    """
    try:
        cli(prog_name=APP_NAME)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
