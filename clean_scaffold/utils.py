"""Shared console and logging helpers for clean-scaffold.

All user-facing output goes through the Rich ``console`` defined here so the
CLI and tests can redirect it in one place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``clean_scaffold`` logger.

    Diagnostic lines (one per created or skipped path) are only shown with
    *verbose*; otherwise only warnings and errors reach stderr.
    """
    logger = logging.getLogger("clean_scaffold")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Path display
# ---------------------------------------------------------------------------


def display_path(path: str | Path, root: str | Path | None) -> str:
    """Show *path* relative to *root* when it lies inside it."""
    p = Path(path)
    if root is None:
        return str(p)
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return str(p)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Path", style="dim", no_wrap=True)
    table.add_column("Status")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
