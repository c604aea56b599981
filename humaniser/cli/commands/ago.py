"""Relative time command implementation"""

from datetime import datetime

import click

from ..decorators import reports_errors, style_options
from ..utils.output import print_value
from ...formatters.duration import HumanDuration


class InstantType(click.ParamType):
    """POSIX timestamp or ISO 8601 date/time"""

    name = "instant"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float, datetime)):
            return value
        try:
            return float(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            self.fail(f"{value!r} is neither a timestamp nor an ISO 8601 date", param, ctx)


INSTANT = InstantType()


@click.command()
@click.argument('reference', type=INSTANT, required=False)
@click.option('--now', type=INSTANT, help='Reference point instead of the current time')
@reports_errors
@style_options
def ago(reference, now, style):
    """Describe how long ago (or how far ahead) an instant is

    Without REFERENCE the "never" placeholder is printed.

    Examples:
        humaniser ago 2024-01-02T13:45:00
        humaniser ago 1700000000 --full
    """
    print_value(HumanDuration(reference, now=now), style)
