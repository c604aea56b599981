"""Elapsed time command implementation"""

import click

from ..decorators import reports_errors, style_options
from ..utils.output import print_value
from ...formatters.time import HumanTime


@click.command(name='time')
@click.argument('seconds', type=float)
@reports_errors
@style_options
def span(seconds, style):
    """Split a number of seconds into hours, minutes and seconds

    Examples:
        humaniser time 3661          # 1h 1m 1s
        humaniser time 3661 --full   # 1 hour 1 minute 1 second
    """
    print_value(HumanTime(seconds), style)
