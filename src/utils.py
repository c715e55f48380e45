"""Shared console helpers for resgen.

Every user-facing line goes through the module-level Rich ``console`` so that
colour handling, redirection and test capture behave the same everywhere.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.scaffolder.models import GenerationReport, ReportEntry

console = Console()


# ---------------------------------------------------------------------------
# Report output
# ---------------------------------------------------------------------------


def format_created(entry: ReportEntry) -> str:
    """Rich markup for one report line: green ``CREATE``, blue byte count.

    The plain text is exactly ``CREATE <relative-path> (<N> bytes)``.
    """
    return (
        f"[green]CREATE[/green] {escape(entry.relative_path)} "
        f"[blue]({entry.byte_size} bytes)[/blue]"
    )


def print_report(report: GenerationReport) -> None:
    """Print one ``CREATE`` line per written file, in report order."""
    for entry in report.entries:
        console.print(format_created(entry), highlight=False, soft_wrap=True)


def print_plan(paths: list[tuple[str, int]]) -> None:
    """Print the files a dry run would write."""
    table = Table(title="Dry run", show_header=True, header_style="bold cyan")
    table.add_column("File", no_wrap=True)
    table.add_column("Bytes", justify="right")
    for path, size in paths:
        table.add_row(escape(path), str(size))
    console.print(table)


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)

