"""
CLI Output Formatting

Rich text formatting utilities for CLI output including tables, progress bars
and status panels.
"""

from typing import Dict, List, Any, Optional
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich.panel import Panel

console = Console()


def format_table(data: List[Dict[str, Any]], title: str = "Results", headers: Optional[List[str]] = None) -> Table:
    """
    Format data as a Rich table.

    Args:
        data: List of dictionaries with row data
        title: Table title
        headers: Optional list of column headers (uses keys from first row if not provided)

    Returns:
        Rich Table object
    """
    if not data:
        table = Table(title=title)
        table.add_column("Message", style="dim")
        table.add_row("No data available")
        return table

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold blue")

    for header in headers:
        table.add_column(header, style="white", justify="left")

    for row in data:
        row_values = [str(row.get(header, "N/A")) for header in headers]
        table.add_row(*row_values)

    return table


def format_progress(description: str = "Processing...", total: Optional[int] = None,
                    output: Optional[Console] = None) -> Progress:
    """
    Create a progress bar with spinner.

    Args:
        description: Progress description text
        total: Total number of items (None for indeterminate progress)
        output: Console to draw on (defaults to the shared console)

    Returns:
        Rich Progress object
    """
    output = output or console
    if total is None:
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=output
        )

    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        TimeElapsedColumn(),
        console=output
    )


def display_banner(title: str = "numcheck-bench", subtitle: str = "") -> None:
    """Display a formatted banner."""
    banner_text = f"[bold blue]{title}[/bold blue]"
    if subtitle:
        banner_text += f"\n[dim]{subtitle}[/dim]"

    console.print(Panel.fit(banner_text, title="Number Verification", border_style="blue"))


def display_error(message: str, error_type: str = "Error") -> None:
    """Display a formatted error message."""
    console.print(Panel(f"[red]{message}[/red]", title=error_type, border_style="red"))

