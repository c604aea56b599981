"""Output style options shared by the value commands"""

from functools import wraps
from typing import Callable

import click

from ...constants import OutputFormat


def style_options(func: Callable) -> Callable:
    """Add ``--concise/--full/--both`` and resolve them into ``style``

    The decorated command receives ``style``: an OutputFormat, or None when
    both renderings were requested. Without a flag the configured default
    style applies.
    """
    @click.option('--concise', 'chosen', flag_value=OutputFormat.CONCISE.value,
                  help='Short, symbol based output')
    @click.option('--full', 'chosen', flag_value=OutputFormat.FULL.value,
                  help='Word based output')
    @click.option('--both', 'chosen', flag_value='both',
                  help='Show both renderings in a table')
    @click.pass_context
    @wraps(func)
    def wrapper(ctx, *args, chosen=None, **kwargs):
        if chosen == 'both':
            style = None
        elif chosen:
            style = OutputFormat(chosen)
        else:
            style = ctx.obj.config.style
        return func(*args, style=style, **kwargs)

    return wrapper
