"""Number command implementation"""

import click

from ..decorators import reports_errors, style_options
from ..utils.output import console, print_value
from ...formatters.number import HumanNumber


def parse_number(text: str):
    """Parse an integer or a float, keeping integers exact"""
    try:
        return int(text.replace("_", ""))
    except ValueError:
        return float(text)


@click.command()
@click.argument('value', type=parse_number)
@click.option('--grouped', '-g', is_flag=True, help='Print with thousands separators instead')
@reports_errors
@style_options
def number(value, grouped, style):
    """Scale a number into K, M, B, T

    Examples:
        humaniser number 1200            # 1.2K
        humaniser number 2500000000 --full   # 2.5 billion
        humaniser number 1234567 --grouped   # 1,234,567
    """
    human = HumanNumber(value)
    if grouped:
        console.print(human.grouped(), markup=False, highlight=False)
    else:
        print_value(human, style)
