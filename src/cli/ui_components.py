"""CLI UI components (Rich).

Keeps command logic apart from visual details: the command builds an
`AggregatedResult`, these helpers print it.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import AggregatedResult

TITLE = "DevStats Contributions"
NO_CONTRIBUTIONS = "No contributions found for the user in the given period."


def print_header(console: Console, result: AggregatedResult) -> None:
    """Title plus the user and the project/period/metric echoed by the server."""

    console.print(Text(TITLE, style="bold green"))
    console.print(Text.assemble("User: ", (result.username, "yellow")))
    console.print(Text.assemble("Project: ", (result.project, "blue")))
    console.print(Text.assemble("Period: ", (result.range, "blue")))
    console.print(Text.assemble("Metric: ", (result.metric, "blue")))
    console.print()


def build_contributions_table(result: AggregatedResult) -> Table:
    table = Table(show_lines=False, header_style="bold")
    table.add_column("Rank", style="cyan", no_wrap=True)
    table.add_column("Login", style="yellow")
    table.add_column("Company")
    table.add_column("Contributions", style="magenta", justify="right")
    for row in result.rows:
        table.add_row(str(row.rank), row.login, row.company, str(row.number))
    return table


def render_contributions(console: Console, result: AggregatedResult) -> None:
    """Print the ranking rows of one user followed by their total."""

    print_header(console, result)
    console.print(build_contributions_table(result))

    if result.total == 0:
        console.print(NO_CONTRIBUTIONS)

    console.print()
    console.print(Text.assemble("Total contributions: ", (str(result.total), "bold magenta")))
