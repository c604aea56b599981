"""Percent command implementation"""

import click

from ..decorators import reports_errors, style_options
from ..utils.output import print_value
from ...formatters.percent import HumanPercent


@click.command()
@click.argument('value', type=float)
@click.option('--precision', '-p', type=int, help='Decimal places (default from configuration)')
@click.option('--ratio', is_flag=True, help='VALUE is a 0-1 ratio rather than a percentage')
@click.pass_context
@reports_errors
@style_options
def percent(ctx, value, precision, ratio, style):
    """Round a percentage

    Examples:
        humaniser percent 12.3456 -p 1   # 12.3%
        humaniser percent 0.25 --ratio   # 25%
    """
    if precision is None:
        precision = ctx.obj.config.percent_precision
    human = HumanPercent.from_ratio(value, precision) if ratio else HumanPercent(value, precision)
    print_value(human, style)
