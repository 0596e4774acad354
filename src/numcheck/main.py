"""
CLI Entry Point

Main command-line interface for numcheck-bench using the Click framework
with rich output formatting.
"""

import sys
import traceback
from pathlib import Path

import click
from rich.console import Console

from numcheck.core.config import get_config, reload_config
from numcheck.core.exceptions import NumCheckBenchException
from numcheck.utils.logging import setup_logging, get_logger
from numcheck.utils.help_text import show_help_with_markdown
from numcheck.cli.formatting import display_banner, display_error

from numcheck.commands.benchmarks import run, list_operations
from numcheck.commands.classify import classify
from numcheck.commands.config import show as config_show, validate as config_validate, export as config_export

console = Console()
logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--help', '-h', is_flag=True, expose_value=False, is_eager=True,
              callback=show_help_with_markdown, help='Show this message and exit')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """numcheck-bench - Number Verification Benchmark"""
    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()
    except NumCheckBenchException as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)
    except (OSError, TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {str(e)}[/red]")
        sys.exit(1)

    if debug:
        app_config.debug = True

    if app_config.debug:
        app_config.logging.level = 'DEBUG'
        app_config.logging.console_level = 'DEBUG'
    elif verbose:
        app_config.logging.level = 'DEBUG'
        app_config.logging.console_level = 'INFO'
    setup_logging(app_config)

    ctx.obj['config'] = app_config

    if ctx.invoked_subcommand is None:
        display_banner(app_config.name, "Use --help for available commands")


# ===== BENCHMARK COMMANDS =====

@cli.group()
def benchmark():
    """Benchmark commands."""
    pass


benchmark.add_command(run)
benchmark.add_command(list_operations, name='list')


# ===== CONFIG COMMANDS =====

@cli.group()
def config():
    """Configuration management commands."""
    pass


config.add_command(config_show)
config.add_command(config_validate)
config.add_command(config_export)


# ===== TOP-LEVEL COMMANDS =====

cli.add_command(classify)


def main():
    """Main entry point with comprehensive error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except NumCheckBenchException as e:
        logger.error(f"Application error: {str(e)}")
        display_error(str(e), type(e).__name__)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error: {str(e)}[/red]")
        if '--debug' in sys.argv:
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()
