"""
Classify Command

Shows the verdict of every classification strategy for a single string.
"""

import click
from rich.console import Console
from rich.table import Table

from numcheck.benchmark.strategies import STRATEGIES

console = Console()


@click.command()
@click.argument('text')
def classify(text):
    """Classify TEXT with every strategy.

    \b
    EXAMPLES:

    numcheck classify 42
    numcheck classify X42
    """
    table = Table(title=f"Classification of {text!r}")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Verdict", justify="center")

    verdicts = set()
    for name, strategy in STRATEGIES.items():
        numeric = strategy.classify(text)
        verdicts.add(numeric)
        table.add_row(name, "[green]numeric[/green]" if numeric else "[red]not numeric[/red]")

    console.print(table)
    if len(verdicts) > 1:
        console.print("[yellow]Strategies disagree on this input[/yellow]")
