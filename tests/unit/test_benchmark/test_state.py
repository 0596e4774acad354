"""
Unit tests for iteration state and the reporting sink.
"""

from concurrent.futures import ThreadPoolExecutor

from numcheck.benchmark.state import AtomicCounter, Blackhole, IterationState


class TestAtomicCounter:
    """Test cases for AtomicCounter."""

    def test_add_returns_previous_value(self):
        counter = AtomicCounter()
        assert counter.add(5) == 0
        assert counter.add(3) == 5
        assert counter.get() == 8

    def test_concurrent_adds(self):
        counter = AtomicCounter()

        def work(_):
            for _ in range(1_000):
                counter.add(1)

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(work, range(8)))

        assert counter.get() == 8_000


class TestIterationState:
    """Test cases for IterationState."""

    def test_starts_at_zero(self):
        assert IterationState().totals == (0, 0)

    def test_instances_do_not_share_counters(self):
        first = IterationState()
        first.positive.add(10)
        second = IterationState()
        assert second.totals == (0, 0)


class TestBlackhole:
    """Test cases for Blackhole."""

    def test_consume_records_values(self):
        sink = Blackhole()
        sink.consume(1)
        sink.consume(2)
        assert sink.consumed == [1, 2]
        assert len(sink) == 2

    def test_consumed_is_a_copy(self):
        sink = Blackhole()
        sink.consume(1)
        sink.consumed.append(99)
        assert sink.consumed == [1]
