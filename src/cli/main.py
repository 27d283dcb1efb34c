"""`devstats` command.

Queries DevStats once for a user's contribution ranking and prints the rows
that belong to that user plus their total.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import typer

from adapters.devstats_client import DevStatsClient
from cli.console import console, setup_logging
from cli.ui_components import render_contributions
from core.config import APP_VERSION, AppSettings
from core.domain.errors import DevStatsError
from core.services.contributions import lookup_contributions

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Show a developer's contributions ranking from CNCF DevStats.",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"devstats-cli {APP_VERSION}")
        raise typer.Exit()


@app.command()
def contributions(
    username: Annotated[str, typer.Option("--username", "-u", help="GitHub login to query and filter by.")],
    project: Annotated[
        str | None,
        typer.Option("--project", "-p", help="Project scope, passed verbatim.", show_default="All CNCF"),
    ] = None,
    range_: Annotated[
        str | None,
        typer.Option("--range", "-r", help="Time window, passed verbatim.", show_default="Last quarter"),
    ] = None,
    metric: Annotated[
        str | None,
        typer.Option("--metric", "-m", help="Metric name, passed verbatim.", show_default="Contributions"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log request/response details.")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Print the ranked contributions of USERNAME and their total."""

    setup_logging(verbose)
    settings = AppSettings()

    if not username.strip():
        raise typer.BadParameter("username must not be empty", param_hint="--username")

    client = DevStatsClient(settings)
    try:
        result = asyncio.run(
            lookup_contributions(
                client,
                username=username,
                project=project if project is not None else settings.default_project,
                range=range_ if range_ is not None else settings.default_range,
                metric=metric if metric is not None else settings.default_metric,
            )
        )
    except DevStatsError as exc:
        # Reported, but the exit status stays 0.
        logger.error("Error: %s", exc)
        return

    render_contributions(console, result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
