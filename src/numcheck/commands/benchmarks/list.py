"""
Benchmark List Commands

This module contains the command listing the measured operations.
"""

import click
from rich.console import Console

from numcheck.benchmark.strategies import STRATEGIES
from numcheck.cli.formatting import format_table

console = Console()


@click.command('list')
def list_operations():
    """List the measured operations and their strategies.

    \b
    EXAMPLES:

    numcheck benchmark list
    """
    rows = [
        {"Operation": name, "Strategy": strategy.kind.value, "Technique": strategy.description}
        for name, strategy in STRATEGIES.items()
    ]
    console.print(format_table(rows, title="Measured Operations"))
