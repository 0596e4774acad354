"""
Benchmark Types

Result types for measured invocations and whole benchmark runs.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime

from .config import RunConfig

TIME_UNIT_FACTORS = {
    "s": 1.0,
    "ms": 1_000.0,
    "us": 1_000_000.0,
}


@dataclass
class Measurement:
    """Timing and totals for one (operation, prefix) pair."""
    operation: str
    prefix: str
    value_count: int
    iteration_seconds: List[float] = field(default_factory=list)
    warmup_seconds: List[float] = field(default_factory=list)
    positive: int = 0
    negative: int = 0
    verified: bool = False

    @property
    def count(self) -> int:
        return len(self.iteration_seconds)

    @property
    def average_seconds(self) -> float:
        if not self.iteration_seconds:
            return 0.0
        return sum(self.iteration_seconds) / len(self.iteration_seconds)

    def score(self, unit: str = "ms") -> float:
        """Average time per invocation in the given unit."""
        return self.average_seconds * TIME_UNIT_FACTORS[unit]

    @property
    def prefix_label(self) -> str:
        return repr(self.prefix) if self.prefix == "" else self.prefix


@dataclass
class BenchmarkSuiteResult:
    """Complete result of a benchmark run."""
    config: RunConfig
    measurements: List[Measurement]
    started_at: datetime
    finished_at: Optional[datetime] = None

    @property
    def execution_time_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    @property
    def all_verified(self) -> bool:
        return all(m.verified for m in self.measurements)

    def by_prefix(self) -> Dict[str, List[Measurement]]:
        grouped: Dict[str, List[Measurement]] = {}
        for measurement in self.measurements:
            grouped.setdefault(measurement.prefix, []).append(measurement)
        return grouped

    def fastest(self, prefix: str) -> Optional[Measurement]:
        """The quickest operation for a prefix, if any were measured."""
        candidates = self.by_prefix().get(prefix, [])
        if not candidates:
            return None
        return min(candidates, key=lambda m: m.average_seconds)
