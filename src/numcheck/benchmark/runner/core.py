"""
Benchmark Runner Core

Sweeps the value range through a classification strategy, times repeated
invocations and checks that every value landed in exactly one bucket.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from rich.progress import Progress

from numcheck.core.config import RECOGNIZED_PREFIXES, get_config
from numcheck.core.exceptions import (
    BenchmarkExecutionError,
    BenchmarkVerificationError,
    InvalidPrefixError,
    NumCheckBenchException,
)
from numcheck.benchmark.state import Blackhole, IterationState
from numcheck.benchmark.strategies import ClassificationStrategy, get_strategy, list_operations
from numcheck.utils.logging import PerformanceTimer, get_benchmark_logger, get_logger

from .config import RunConfig
from .types import BenchmarkSuiteResult, Measurement

logger = get_logger(__name__)


def expected_total(value_count: int) -> int:
    """Sum of every value in ``[0, value_count)``."""
    return value_count * (value_count - 1) // 2


def verify_totals(state: IterationState, value_count: int, prefix: str) -> None:
    """
    Check that a finished sweep partitioned the whole range.

    Raises:
        BenchmarkVerificationError: If the sums disagree with the prefix
    """
    positive, negative = state.totals
    expected = expected_total(value_count)

    if positive + negative != expected:
        raise BenchmarkVerificationError(
            f"Totals do not cover the range: {positive} + {negative} != {expected}",
            expected=expected, positive=positive, negative=negative, prefix=prefix,
        )

    if prefix == "" and negative != 0:
        raise BenchmarkVerificationError(
            f"Unprefixed values classified as not numeric (negative={negative})",
            expected=expected, positive=positive, negative=negative, prefix=prefix,
        )

    if prefix != "" and positive != 0:
        raise BenchmarkVerificationError(
            f"Prefixed values classified as numeric (positive={positive})",
            expected=expected, positive=positive, negative=negative, prefix=prefix,
        )


def _check_prefix(prefix: str) -> None:
    if prefix not in RECOGNIZED_PREFIXES:
        raise InvalidPrefixError(
            f"Unrecognized prefix {prefix!r}; expected one of {list(RECOGNIZED_PREFIXES)!r}",
            prefix=prefix,
        )


class BenchmarkRunner:
    """Runs the measured operations over the configured prefixes."""

    def __init__(self, config: Optional[RunConfig] = None):
        """
        Initialize the benchmark runner.

        Args:
            config: Run configuration (defaults to the application harness settings)
        """
        self.config = config or RunConfig.from_harness(get_config().harness)

    def chunks(self) -> List[Tuple[int, int]]:
        """Split ``[0, value_count)`` into half-open ranges of at most ``chunk_size``."""
        step = max(1, self.config.chunk_size)
        return [
            (start, min(start + step, self.config.value_count))
            for start in range(0, self.config.value_count, step)
        ]

    def sweep(self, strategy: ClassificationStrategy, prefix: str, state: IterationState) -> None:
        """Classify every value in the range, accumulating into ``state``."""
        def run_chunk(bounds: Tuple[int, int]) -> None:
            accumulate = strategy.accumulate
            for value in range(*bounds):
                accumulate(state, prefix, value)

        chunks = self.chunks()
        if self.config.workers <= 1 or len(chunks) <= 1:
            for bounds in chunks:
                run_chunk(bounds)
            return

        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            # list() re-raises the first worker exception
            list(executor.map(run_chunk, chunks))

    def run_operation(self, operation: str, prefix: str,
                      state: IterationState, sink: Blackhole) -> None:
        """
        One measured invocation: sweep the range then hand both totals to the sink.

        Args:
            operation: Measured operation name
            prefix: Trial prefix
            state: Fresh accumulators for this invocation
            sink: Reporting sink receiving every total
        """
        _check_prefix(prefix)
        strategy = get_strategy(operation)

        self.sweep(strategy, prefix, state)

        sink.consume(state.positive.get())
        sink.consume(state.negative.get())

    def _timed_invocation(self, operation: str, prefix: str,
                          sink: Blackhole) -> Tuple[float, IterationState]:
        state = IterationState()
        start = time.perf_counter()
        self.run_operation(operation, prefix, state, sink)
        elapsed = time.perf_counter() - start

        if self.config.verify_totals:
            verify_totals(state, self.config.value_count, prefix)

        return elapsed, state

    def measure(self, operation: str, prefix: str,
                sink: Optional[Blackhole] = None) -> Measurement:
        """
        Run warmup invocations, then timed measurement invocations.

        Every invocation gets its own ``IterationState``.

        Returns:
            Measurement with per-iteration timings and the last totals
        """
        _check_prefix(prefix)
        get_strategy(operation)
        if sink is None:
            sink = Blackhole()
        bench_logger = get_benchmark_logger(operation, prefix)

        measurement = Measurement(
            operation=operation,
            prefix=prefix,
            value_count=self.config.value_count,
        )

        try:
            for i in range(self.config.warmup_iterations):
                elapsed, _ = self._timed_invocation(operation, prefix, sink)
                measurement.warmup_seconds.append(elapsed)
                bench_logger.debug(f"Warmup {i + 1}/{self.config.warmup_iterations}: {elapsed:.6f}s")

            for i in range(self.config.measurement_iterations):
                elapsed, state = self._timed_invocation(operation, prefix, sink)
                measurement.iteration_seconds.append(elapsed)
                measurement.positive, measurement.negative = state.totals
                bench_logger.debug(f"Iteration {i + 1}/{self.config.measurement_iterations}: {elapsed:.6f}s")
        except NumCheckBenchException:
            bench_logger.error(f"Benchmark {operation} failed for prefix {prefix!r}")
            raise
        except Exception as e:
            bench_logger.exception(f"Unexpected failure in {operation}")
            raise BenchmarkExecutionError(
                f"Operation {operation} failed: {e}", operation=operation, prefix=prefix
            ) from e

        measurement.verified = self.config.verify_totals
        bench_logger.info(
            f"{operation} prefix={prefix!r}: avg {measurement.average_seconds:.6f}s "
            f"over {measurement.count} iteration(s)"
        )
        return measurement

    def run_all(self, operations: Optional[Iterable[str]] = None,
                prefixes: Optional[Iterable[str]] = None,
                progress: Optional[Progress] = None,
                task_id: Optional[int] = None,
                sink: Optional[Blackhole] = None) -> BenchmarkSuiteResult:
        """
        Measure every (operation, prefix) pair.

        Args:
            operations: Operation names (defaults to all registered operations)
            prefixes: Trial prefixes (defaults to the configured prefixes)
            progress: Optional Rich progress display advanced once per pair
            task_id: Progress task to advance
            sink: Reporting sink shared by every invocation (a new one if omitted)

        Returns:
            BenchmarkSuiteResult with one measurement per pair
        """
        operations = list(operations) if operations else list_operations()
        prefixes = list(prefixes) if prefixes is not None else list(self.config.prefixes)

        # Fail fast before any timing starts
        for operation in operations:
            get_strategy(operation)
        for prefix in prefixes:
            _check_prefix(prefix)

        logger.info(
            f"Running {len(operations)} operation(s) x {len(prefixes)} prefix(es), "
            f"value_count={self.config.value_count}, workers={self.config.workers}"
        )

        result = BenchmarkSuiteResult(config=self.config, measurements=[], started_at=datetime.now())
        if sink is None:
            sink = Blackhole()

        with PerformanceTimer("benchmark run", logger):
            for operation in operations:
                for prefix in prefixes:
                    if progress is not None and task_id is not None:
                        progress.update(task_id, description=f"{operation} (prefix={prefix!r})")
                    result.measurements.append(self.measure(operation, prefix, sink))
                    if progress is not None and task_id is not None:
                        progress.advance(task_id)

        result.finished_at = datetime.now()
        return result
