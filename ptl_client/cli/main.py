# ptl_client/cli/main.py
"""Main CLI entry point for ptl-client"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
import yaml
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import (
    APP_NAME,
    ENV_CONFIG_DIR,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    LOG_FORMAT,
    MSG_RUNNING,
)
from ..api.exceptions import DeployError, PtlError
from ..models import Settings
from ..services import ConfigService, DeployService
from .utils.output import console

# Import all commands
from .commands import (
    run,
    deploy,
    whoami,
    pack,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Show timestamps (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    level = logging.DEBUG if debug else logging.INFO

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=verbose or debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object

    Settings are only resolved when a command that talks to the API asks
    for them, so ``ptl pack`` works without credentials.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize CLI context"""
        self.config_dir = config_dir
        self.verbose: bool = False
        self.debug: bool = False

    def load_settings(self, event: Optional[str] = None, manifest: Optional[str] = None) -> Settings:
        """Resolve settings from config files and environment"""
        return ConfigService(config_dir=self.config_dir).load_settings(event=event, manifest=manifest)

    def connect(self, event: Optional[str] = None, manifest: Optional[str] = None) -> DeployService:
        """Resolve settings and validate credentials

        Returns:
            DeployService with a validated identity
        """
        settings = self.load_settings(event=event, manifest=manifest)
        logger.info(MSG_RUNNING)
        logger.debug(f"Settings: {settings.to_dict()}")

        service = DeployService(settings)
        service.validate_credentials()
        return service


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Show timestamps in log output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except critical errors')
@click.option('--config-dir', type=click.Path(file_okay=False, path_type=Path),
              envvar=ENV_CONFIG_DIR,
              help='Directory with config and credentials files (default: /config)')
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_dir):
    """PushToLive client - deploy applications from CI

    Reads ptl.yml, zip-packs every service build path and submits the
    result to PushToLive. On branch or tag deletion it terminates the
    matching deployment instead.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.ERROR)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_dir=config_dir)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(run.run)
cli.add_command(deploy.deploy)
cli.add_command(deploy.undeploy)
cli.add_command(whoami.whoami)
cli.add_command(pack.pack)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application

    The only place errors turn into exit codes:
    - PtlError and manifest parse errors are logged as critical, exit 1
    - Keyboard interrupts exit 130
    """
    args = sys.argv[1:] if argv is None else argv
    debug = '--debug' in args or '-d' in args

    try:
        cli.main(args=args, prog_name=APP_NAME, standalone_mode=False)

    except click.exceptions.Exit as e:
        return e.exit_code

    except click.exceptions.Abort:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_INTERRUPTED

    except click.ClickException as e:
        e.show()
        return e.exit_code

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_INTERRUPTED

    except DeployError as e:
        logger.critical(str(e))
        if e.reason:
            logger.critical(e.reason)
        return EXIT_FAILURE

    except PtlError as e:
        logger.critical(str(e))
        if debug:
            console.print_exception()
        return EXIT_FAILURE

    except yaml.YAMLError as e:
        logger.critical(f"Cannot parse manifest: {e}")
        return EXIT_FAILURE

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if debug:
            console.print_exception()
        return EXIT_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
