"""
Run Configuration

Per-run settings resolved from the application configuration and CLI flags.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from numcheck.core.config import HarnessConfig, RECOGNIZED_PREFIXES, DEFAULT_VALUE_COUNT


@dataclass
class RunConfig:
    """Configuration for a benchmark run."""
    value_count: int = DEFAULT_VALUE_COUNT
    prefixes: List[str] = field(default_factory=lambda: list(RECOGNIZED_PREFIXES))
    workers: int = 4
    chunk_size: int = 250_000
    warmup_iterations: int = 1
    measurement_iterations: int = 1
    verify_totals: bool = True

    @classmethod
    def from_harness(cls, harness: HarnessConfig) -> "RunConfig":
        return cls(
            value_count=harness.value_count,
            prefixes=list(harness.prefixes),
            workers=harness.workers,
            chunk_size=harness.chunk_size,
            warmup_iterations=harness.warmup_iterations,
            measurement_iterations=harness.measurement_iterations,
            verify_totals=harness.verify_totals,
        )

    def with_overrides(self, **overrides: Optional[object]) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
