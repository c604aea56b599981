# humaniser/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...constants import OutputFormat
from ...formatters.base import HumanFormatter

console = Console()


def print_value(formatter: HumanFormatter, style: Optional[OutputFormat]) -> None:
    """Print one rendering, or a table of both when ``style`` is None"""
    if style is None:
        console.print(forms_table(formatter))
    else:
        console.print(formatter.render(style), markup=False, highlight=False)


def forms_table(formatter: HumanFormatter, title: Optional[str] = None) -> Table:
    """Create a table with the concise and full renderings

    Args:
        formatter: Value to render
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Style", style="cyan")
    table.add_column("Output", style="green")

    table.add_row(OutputFormat.CONCISE.value, formatter.concise())
    table.add_row(OutputFormat.FULL.value, formatter.full())

    return table


def settings_table(settings: Dict[str, Any], title: Optional[str] = None) -> Table:
    """Create a key/value table"""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")

    for key, value in settings.items():
        table.add_row(key, str(value))

    return table


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]Success:[/green] {escape(message)}")
