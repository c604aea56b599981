"""Permissions command implementation"""

import os
from pathlib import Path

import click

from ..decorators import reports_errors
from ..utils.output import console
from ...constants import PermissionStyle
from ...formatters.permissions import HumanPermissions


def parse_mode(text: str) -> int:
    """Parse an octal mode such as ``40755``, ``0o644`` or ``755``"""
    return int(text, 8)


@click.command()
@click.argument('mode', type=parse_mode, required=False)
@click.option('--path', type=click.Path(exists=True, path_type=Path),
              help='Read the mode of an existing file instead')
@click.option('--unix', 'style', flag_value=PermissionStyle.UNIX.value,
              help='Render as drwxr-xr-x')
@click.option('--descriptive', 'style', flag_value=PermissionStyle.DESCRIPTIVE.value,
              help='Render as "User: Read, Write; ..."')
@click.pass_context
@reports_errors
def perms(ctx, mode, path, style):
    """Render an octal file mode

    Examples:
        humaniser perms 40755                 # drwxr-xr-x
        humaniser perms 100644 --descriptive  # User: Read, Write; Group: Read; Other: Read
        humaniser perms --path ./setup.py
    """
    if path is not None:
        mode = os.lstat(path).st_mode
    elif mode is None:
        raise click.UsageError("Give a MODE or --path")

    style = PermissionStyle(style) if style else ctx.obj.config.effective_permission_style
    console.print(HumanPermissions(mode).render_style(style), markup=False, highlight=False)
