"""
Benchmark Report Generator

Renders benchmark results as a terminal table, Markdown, JSON or CSV in the
average-time layout: one row per (operation, prefix) with its score.
"""

import csv
import io
import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from numcheck.benchmark.runner.types import BenchmarkSuiteResult, Measurement
from numcheck.utils.logging import get_logger

logger = get_logger(__name__)

MODE = "avgt"
COLUMNS = ["Benchmark", "prefix", "Mode", "Cnt", "Score", "Units"]


class ReportFormat(str, Enum):
    """Available report formats."""
    TERMINAL = "terminal"
    MARKDOWN = "markdown"
    JSON = "json"
    CSV = "csv"


@dataclass
class ReportConfig:
    """Configuration for report generation."""
    time_unit: str = "ms"
    include_totals: bool = True
    output_path: Optional[Path] = None


class ReportGenerator:
    """Generates benchmark reports in multiple formats."""

    def __init__(self, config: Optional[ReportConfig] = None, console: Optional[Console] = None):
        self.config = config or ReportConfig()
        self.console = console or Console()

    @property
    def units(self) -> str:
        return f"{self.config.time_unit}/op"

    def generate_report(self, result: BenchmarkSuiteResult, format_type: ReportFormat,
                        output_path: Optional[Path] = None) -> str:
        """Generate a report in the specified format, saving it when a path is given."""
        format_type = ReportFormat(format_type)

        if format_type == ReportFormat.TERMINAL:
            content = self._generate_terminal_report(result)
        elif format_type == ReportFormat.MARKDOWN:
            content = self._generate_markdown_report(result)
        elif format_type == ReportFormat.JSON:
            content = self._generate_json_report(result)
        else:
            content = self._generate_csv_report(result)

        output_path = output_path or self.config.output_path
        if output_path is not None:
            self.save_report(content, output_path)

        return content

    def save_report(self, content: str, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info(f"Report saved to {output_path}")
        return output_path

    def _row(self, measurement: Measurement) -> List[str]:
        return [
            measurement.operation,
            measurement.prefix_label,
            MODE,
            str(measurement.count),
            f"{measurement.score(self.config.time_unit):.3f}",
            self.units,
        ]

    def build_table(self, result: BenchmarkSuiteResult) -> Table:
        """Build the Rich results table."""
        table = Table(title="Number Verification Benchmark", box=box.ROUNDED)
        table.add_column("Benchmark", style="cyan")
        table.add_column("prefix", style="magenta", justify="center")
        table.add_column("Mode", style="dim")
        table.add_column("Cnt", justify="right")
        table.add_column("Score", style="green", justify="right")
        table.add_column("Units", style="dim")
        if self.config.include_totals:
            table.add_column("Positive", justify="right")
            table.add_column("Negative", justify="right")

        for measurement in result.measurements:
            row = self._row(measurement)
            if self.config.include_totals:
                row += [f"{measurement.positive:,}", f"{measurement.negative:,}"]
            table.add_row(*row)

        return table

    def _generate_terminal_report(self, result: BenchmarkSuiteResult) -> str:
        """Render the Rich table to text."""
        with self.console.capture() as capture:
            self.console.print(self.build_table(result))
            self.console.print(
                f"[dim]value_count={result.config.value_count:,} "
                f"workers={result.config.workers} "
                f"total time {result.execution_time_seconds:.2f}s[/dim]"
            )
        return capture.get()

    def display_terminal_report(self, result: BenchmarkSuiteResult) -> None:
        """Display report directly to terminal."""
        self.console.print(self.build_table(result))

    def _generate_markdown_report(self, result: BenchmarkSuiteResult) -> str:
        lines = []
        lines.append("# Number Verification Benchmark")
        lines.append("")
        lines.append(f"**Completed:** {(result.finished_at or datetime.now()).strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append(f"**Values per invocation:** {result.config.value_count:,}")
        lines.append(f"**Workers:** {result.config.workers}")
        lines.append("")
        lines.append("| " + " | ".join(COLUMNS) + " |")
        lines.append("|" + "|".join("---" for _ in COLUMNS) + "|")
        for measurement in result.measurements:
            lines.append("| " + " | ".join(self._row(measurement)) + " |")
        lines.append("")

        for prefix in result.by_prefix():
            fastest = result.fastest(prefix)
            lines.append(f"- Fastest for prefix {fastest.prefix_label}: **{fastest.operation}**")

        return "\n".join(lines)

    def _generate_json_report(self, result: BenchmarkSuiteResult) -> str:
        report_data = {
            "started_at": result.started_at.isoformat(),
            "finished_at": result.finished_at.isoformat() if result.finished_at else None,
            "execution_time_seconds": result.execution_time_seconds,
            "config": {
                "value_count": result.config.value_count,
                "workers": result.config.workers,
                "chunk_size": result.config.chunk_size,
                "warmup_iterations": result.config.warmup_iterations,
                "measurement_iterations": result.config.measurement_iterations,
            },
            "mode": MODE,
            "units": self.units,
            "measurements": [
                {
                    "operation": m.operation,
                    "prefix": m.prefix,
                    "count": m.count,
                    "score": m.score(self.config.time_unit),
                    "iteration_seconds": m.iteration_seconds,
                    "warmup_seconds": m.warmup_seconds,
                    "positive": m.positive,
                    "negative": m.negative,
                    "verified": m.verified,
                }
                for m in result.measurements
            ],
        }
        return json.dumps(report_data, indent=2)

    def _generate_csv_report(self, result: BenchmarkSuiteResult) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(COLUMNS + ["Positive", "Negative"])
        for m in result.measurements:
            writer.writerow([
                m.operation, m.prefix, MODE, m.count,
                f"{m.score(self.config.time_unit):.6f}", self.units,
                m.positive, m.negative,
            ])
        return buffer.getvalue()
