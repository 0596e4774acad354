"""
Benchmark Run Commands

This module contains the benchmark run command implementation.
"""

import sys
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console

from numcheck.benchmark.runner import BenchmarkRunner, RunConfig
from numcheck.benchmark.reporting import ReportGenerator, ReportFormat, ReportConfig
from numcheck.benchmark.strategies import list_operations
from numcheck.cli.formatting import format_progress
from numcheck.core.config import RECOGNIZED_PREFIXES
from numcheck.core.config_validator import ConfigValidator
from numcheck.core.exceptions import NumCheckBenchException
from numcheck.utils.logging import get_logger

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

REPORT_EXTENSIONS = {
    ReportFormat.TERMINAL: "txt",
    ReportFormat.MARKDOWN: "md",
    ReportFormat.JSON: "json",
    ReportFormat.CSV: "csv",
}


@click.command()
@click.option('--operation', '-o', 'operations', multiple=True, type=click.Choice(list_operations()),
              help='Operation to measure (repeatable). Measures all operations if not specified')
@click.option('--prefix', '-p', 'prefixes', multiple=True, type=click.Choice(list(RECOGNIZED_PREFIXES)),
              help='Trial prefix (repeatable). Use "" for no prefix. Uses configured prefixes if not specified')
@click.option('--value-count', type=click.IntRange(min=1), help='Values swept per invocation')
@click.option('--workers', '-w', type=click.IntRange(min=1), help='Worker threads per sweep')
@click.option('--chunk-size', type=click.IntRange(min=1), help='Values per worker chunk')
@click.option('--warmup', type=click.IntRange(min=0), help='Warmup iterations per operation')
@click.option('--iterations', '-i', type=click.IntRange(min=1), help='Measurement iterations per operation')
@click.option('--verify/--no-verify', default=None, help='Check the partition invariant after every invocation')
@click.option('--report-format', type=click.Choice([f.value for f in ReportFormat]),
              default=None, help='Report output format')
@click.option('--output', type=click.Path(dir_okay=False), help='Also save the report to this file')
@click.option('--save', is_flag=True, help='Save the report under the configured export path')
@click.pass_context
def run(ctx, operations, prefixes, value_count, workers, chunk_size, warmup, iterations,
        verify, report_format, output, save):
    """Measure the number verification strategies.

    \b
    EXAMPLES:

    numcheck benchmark run

    numcheck benchmark run --operation is_number_with_regex --prefix X

    numcheck benchmark run --value-count 100000 --workers 1 --report-format json

    numcheck benchmark run --iterations 5 --warmup 2 --output reports/run.md --report-format markdown
    """
    try:
        app_config = ConfigValidator().validate_or_raise(ctx.obj['config'])

        run_config = RunConfig.from_harness(app_config.harness).with_overrides(
            value_count=value_count,
            workers=workers,
            chunk_size=chunk_size,
            warmup_iterations=warmup,
            measurement_iterations=iterations,
            verify_totals=verify,
        )
        selected_prefixes = list(prefixes) if prefixes else list(run_config.prefixes)
        selected_operations = list(operations) if operations else list_operations()
        report_format = ReportFormat(report_format or app_config.reporting.default_format)

        if save and not output:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            extension = REPORT_EXTENSIONS[report_format]
            output = str(Path(app_config.reporting.export_path) / f"numcheck_{timestamp}.{extension}")

        runner = BenchmarkRunner(run_config)
        total = len(selected_operations) * len(selected_prefixes)

        # Progress goes to stderr so machine-readable reports stay clean
        with format_progress("Measuring...", total=total, output=err_console) as progress:
            task_id = progress.add_task("Measuring...", total=total)
            result = runner.run_all(selected_operations, selected_prefixes, progress, task_id)

        generator = ReportGenerator(ReportConfig(time_unit=app_config.reporting.time_unit), console=console)

        if report_format == ReportFormat.TERMINAL:
            generator.display_terminal_report(result)
            if output:
                generator.generate_report(result, report_format, Path(output))
        else:
            content = generator.generate_report(result, report_format, Path(output) if output else None)
            click.echo(content)

        if output:
            err_console.print(f"[green]Report saved to {output}[/green]", highlight=False)

    except NumCheckBenchException as e:
        err_console.print(f"[red]Benchmark failed: {str(e)}[/red]")
        if ctx.obj['config'].debug:
            err_console.print_exception()
        logger.error(f"Benchmark execution failed: {e}")
        sys.exit(1)
