"""Error reporting decorator for CLI commands"""

import logging
from functools import wraps
from typing import Callable

import click

from ..utils.output import print_error
from ...api.exceptions import HumaniserError

logger = logging.getLogger(__name__)


def reports_errors(func: Callable) -> Callable:
    """Turn HumaniserError into a red message and exit status 1

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HumaniserError as e:
            logger.debug(f"{type(e).__name__} [{e.error_code}]: {e}")
            print_error(type(e).__name__, e)
            click.get_current_context().exit(1)

    return wrapper
