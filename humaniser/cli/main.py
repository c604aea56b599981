# humaniser/cli/main.py
"""Main CLI entry point for humaniser"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT
from ..models.config import HumaniserConfig
from ..services.config_service import ConfigService
from .utils.output import console

# Import all commands
from .commands import (
    number,
    size,
    ago,
    span,
    percent,
    perms,
    config,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context"""
        self.config_service = ConfigService(config_path)
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def config(self) -> HumaniserConfig:
        """Get user configuration (lazy loading)"""
        return self.config_service.config


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file (default: $HUMANISER_CONFIG or ~/.humaniser.yaml)'
)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Humaniser - Render numbers, sizes, times and permissions for people

    Each command prints the concise form by default; use --full for the
    word based form or --both for a table of the two.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(number.number)
cli.add_command(size.size)
cli.add_command(ago.ago)
cli.add_command(span.span)
cli.add_command(percent.percent)
cli.add_command(perms.perms)
cli.add_command(config.config)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
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
