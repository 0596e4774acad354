"""
Iteration State

Shared accumulators for one measured invocation and the reporting sink
that receives their totals.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, List


class AtomicCounter:
    """Integer counter with a thread-safe fetch-and-add."""

    def __init__(self, initial: int = 0):
        self._value = initial
        self._lock = threading.Lock()

    def add(self, delta: int) -> int:
        """Add ``delta`` and return the previous value."""
        with self._lock:
            previous = self._value
            self._value += delta
            return previous

    def get(self) -> int:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicCounter({self.get()})"


@dataclass
class IterationState:
    """Positive and negative sums for one sweep. Allocate a new one per invocation."""
    positive: AtomicCounter = field(default_factory=AtomicCounter)
    negative: AtomicCounter = field(default_factory=AtomicCounter)

    @property
    def totals(self) -> tuple:
        return self.positive.get(), self.negative.get()


class Blackhole:
    """
    Reporting sink for benchmark results.

    Every produced total must be handed to ``consume`` so the sweep has an
    observable result. The sink keeps the consumed values for inspection.
    """

    def __init__(self):
        self._consumed: List[Any] = []
        self._lock = threading.Lock()

    def consume(self, value: Any) -> None:
        with self._lock:
            self._consumed.append(value)

    @property
    def consumed(self) -> List[Any]:
        with self._lock:
            return list(self._consumed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._consumed)
