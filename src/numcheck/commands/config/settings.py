"""
Configuration Settings Commands

This module contains the configuration management command implementation.
"""

import json
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from numcheck.core.config_validator import ConfigValidator
from numcheck.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.option('--format', type=click.Choice(['table', 'json', 'yaml']), default='table', help='Output format')
@click.pass_context
def show(ctx, format):
    """Show current configuration.

    \b
    EXAMPLES:

    numcheck config show
    numcheck config show --format json
    numcheck config show --format yaml
    """
    config = ctx.obj['config']
    config_dict = _config_to_dict(config)

    if format == 'table':
        table = Table(title="Configuration")
        table.add_column("Section", style="cyan")
        table.add_column("Setting", style="magenta")
        table.add_column("Value", style="green")

        for key, value in config_dict.items():
            if isinstance(value, dict):
                for nested_key, nested_value in value.items():
                    table.add_row(key, nested_key, repr(nested_value) if nested_value == "" else str(nested_value))
            else:
                table.add_row("app", key, str(value))

        console.print(table)

    elif format == 'json':
        click.echo(json.dumps(config_dict, indent=2))

    else:
        click.echo(yaml.safe_dump(config_dict, default_flow_style=False, indent=2, sort_keys=False))


@click.command()
@click.pass_context
def validate(ctx):
    """Validate current configuration.

    \b
    EXAMPLES:

    numcheck config validate
    numcheck --config config/default.yaml config validate
    """
    config = ctx.obj['config']

    validator = ConfigValidator()
    validation_results = validator.validate(config)

    results_table = Table(title="Configuration Validation")
    results_table.add_column("Check", style="cyan")
    results_table.add_column("Status", justify="center")
    results_table.add_column("Message", style="dim")

    all_passed = True

    for check_name, result in validation_results.items():
        status = "PASS" if result['valid'] else "FAIL"
        status_color = "green" if result['valid'] else "red"

        if not result['valid']:
            all_passed = False
            logger.warning(f"Configuration check {check_name} failed: {result['message']}")

        results_table.add_row(
            check_name.replace('_', ' ').title(),
            f"[{status_color}]{status}[/{status_color}]",
            result.get('message', '')
        )

    console.print(results_table)

    if all_passed:
        console.print(Panel(
            "[green]Configuration validation passed![/green]\n"
            "All required settings are present and valid.",
            title="Validation Results",
            border_style="green"
        ))
    else:
        console.print(Panel(
            "[red]Configuration validation failed![/red]\n"
            "Please review and fix the issues above.",
            title="Validation Results",
            border_style="red"
        ))
        sys.exit(1)


@click.command()
@click.option('--format', type=click.Choice(['json', 'yaml']), default='yaml', help='Export format')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output file path')
@click.pass_context
def export(ctx, format, output):
    """Export current configuration to file.

    \b
    EXAMPLES:

    numcheck config export
    numcheck config export --format json --output config.json
    """
    config_dict = _config_to_dict(ctx.obj['config'])

    if output:
        output_path = Path(output)
    else:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        output_path = Path(f"config_export_{timestamp}.{format}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        if format == 'json':
            json.dump(config_dict, f, indent=2)
        else:
            yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2, sort_keys=False)

    logger.info(f"Configuration exported to {output_path}")
    console.print(f"[green]Configuration exported to {output_path}[/green]", highlight=False)


def _config_to_dict(config):
    """Convert configuration dataclass to a plain dictionary."""
    return asdict(config)
