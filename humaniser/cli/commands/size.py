"""Size command implementation"""

import click

from ..decorators import reports_errors, style_options
from ..utils.output import print_value
from ...constants import UnitSystem
from ...formatters.size import HumanSize
from .number import parse_number


@click.command()
@click.argument('size_bytes', metavar='BYTES', type=parse_number)
@click.option('--decimal', 'system', flag_value=UnitSystem.DECIMAL.value,
              help='Use 1000-based units (KB, MB)')
@click.option('--binary', 'system', flag_value=UnitSystem.BINARY.value,
              help='Use 1024-based units (KiB, MiB)')
@click.pass_context
@reports_errors
@style_options
def size(ctx, size_bytes, system, style):
    """Render a byte count

    Examples:
        humaniser size 5242880             # 5 MiB
        humaniser size 5000000 --decimal   # 5 MB
    """
    system = UnitSystem(system) if system else ctx.obj.config.size_system
    print_value(HumanSize(size_bytes, system), style)
