"""
Unit tests for ReportGenerator.
"""

import csv
import io
import json
from datetime import datetime, timedelta

import pytest
from rich.console import Console

from numcheck.benchmark.reporting import ReportConfig, ReportFormat, ReportGenerator
from numcheck.benchmark.runner import BenchmarkSuiteResult, Measurement, RunConfig


@pytest.fixture
def suite_result():
    started = datetime(2024, 1, 1, 12, 0, 0)
    return BenchmarkSuiteResult(
        config=RunConfig(value_count=100, workers=2),
        measurements=[
            Measurement("parse_int_with_try_catch", "X", 100, iteration_seconds=[0.004],
                        positive=0, negative=4950, verified=True),
            Measurement("is_number_with_regex", "X", 100, iteration_seconds=[0.002],
                        positive=0, negative=4950, verified=True),
            Measurement("is_number_with_regex", "", 100, iteration_seconds=[0.001, 0.003],
                        positive=4950, negative=0, verified=True),
        ],
        started_at=started,
        finished_at=started + timedelta(seconds=3),
    )


@pytest.fixture
def generator():
    return ReportGenerator(ReportConfig(time_unit="ms"), console=Console(width=200))


class TestReportGenerator:
    """Test cases for ReportGenerator."""

    def test_json_report(self, generator, suite_result):
        data = json.loads(generator.generate_report(suite_result, ReportFormat.JSON))

        assert data["mode"] == "avgt"
        assert data["units"] == "ms/op"
        assert data["execution_time_seconds"] == 3.0
        assert len(data["measurements"]) == 3
        regex_empty = data["measurements"][2]
        assert regex_empty["prefix"] == ""
        assert regex_empty["count"] == 2
        assert regex_empty["score"] == pytest.approx(2.0)
        assert regex_empty["positive"] == 4950

    def test_csv_report(self, generator, suite_result):
        rows = list(csv.reader(io.StringIO(generator.generate_report(suite_result, "csv"))))

        assert rows[0] == ["Benchmark", "prefix", "Mode", "Cnt", "Score", "Units", "Positive", "Negative"]
        assert rows[1][0] == "parse_int_with_try_catch"
        assert rows[1][1] == "X"
        assert float(rows[1][4]) == pytest.approx(4.0)
        assert rows[3][1] == ""

    def test_markdown_report(self, generator, suite_result):
        content = generator.generate_report(suite_result, ReportFormat.MARKDOWN)

        assert content.startswith("# Number Verification Benchmark")
        assert "| Benchmark | prefix | Mode | Cnt | Score | Units |" in content
        assert "| is_number_with_regex | '' | avgt | 2 | 2.000 | ms/op |" in content
        assert "Fastest for prefix X: **is_number_with_regex**" in content

    def test_terminal_report(self, generator, suite_result):
        content = generator.generate_report(suite_result, ReportFormat.TERMINAL)

        assert "Number Verification Benchmark" in content
        assert "parse_int_with_try_catch" in content
        assert "value_count=100" in content

    def test_time_unit(self, suite_result):
        generator = ReportGenerator(ReportConfig(time_unit="us"), console=Console(width=200))
        data = json.loads(generator.generate_report(suite_result, ReportFormat.JSON))
        assert data["units"] == "us/op"
        assert data["measurements"][0]["score"] == pytest.approx(4_000.0)

    def test_save_report(self, generator, suite_result, temp_dir):
        output_path = temp_dir / "reports" / "run.json"
        content = generator.generate_report(suite_result, ReportFormat.JSON, output_path)

        assert output_path.read_text(encoding="utf-8") == content

    def test_unknown_format(self, generator, suite_result):
        with pytest.raises(ValueError):
            generator.generate_report(suite_result, "html")
