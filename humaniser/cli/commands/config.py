"""Configuration management commands"""

import click

from ..decorators import reports_errors
from ..utils.output import console, print_success, settings_table
from ...models.config import HumaniserConfig


@click.group()
def config():
    """Manage humaniser defaults"""
    pass


@config.command()
@click.pass_context
@reports_errors
def show(ctx):
    """Show the effective configuration"""
    service = ctx.obj.config_service
    settings = service.config.to_dict()
    source = service.config_path if service.config_path.exists() else "defaults"

    console.print(settings_table(settings, title=f"Configuration ({source})"))


@config.command()
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing file')
@click.pass_context
@reports_errors
def init(ctx, force):
    """Write a configuration file with the default values"""
    service = ctx.obj.config_service
    if service.config_path.exists() and not force:
        raise click.ClickException(
            f"{service.config_path} already exists. Use --force to overwrite."
        )

    path = service.save_config(HumaniserConfig())
    print_success(f"Configuration written to {path}")
