"""Shared console and logging setup."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# NO_COLOR standard
no_color = os.environ.get("NO_COLOR", "").lower() in ("1", "true", "yes")

console = Console(highlight=False, no_color=no_color)


def setup_logging(verbose: bool = False, *, target: Console | None = None) -> None:
    """Configure logging for the CLI.

    Without `verbose` only warnings and errors are shown; with it the
    request/response diagnostics of the DevStats client are printed too.
    """

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    handler = RichHandler(
        console=target or console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        keywords=[],
    )

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
