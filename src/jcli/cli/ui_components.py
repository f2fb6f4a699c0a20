"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the menu and the doctor command share rendering helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from jcli.core.domain.errors import JCliError
from jcli.core.domain.models import MenuSelection


def print_menu(console: Console) -> None:
    """Print the numbered list of actions, numbers in cyan."""

    console.print("Select an option to print out messages.")
    for selection in MenuSelection:
        line = Text.assemble((str(selection.value), "cyan"), " : ", selection.label())
        console.print(line)


def print_error(console: Console, error: JCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")


def build_doctor_table() -> Table:
    table = Table(title="jcli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
