"""
Unit tests for the classification strategies.
"""

import pytest

from numcheck.benchmark.state import IterationState
from numcheck.benchmark.strategies import (
    STRATEGIES,
    LibraryStrategy,
    ParseAndCatchStrategy,
    ParseResult,
    RegexStrategy,
    StrategyKind,
    get_strategy,
    is_number_library,
    is_number_parse,
    is_number_regex,
    list_operations,
    try_parse_int,
)
from numcheck.core.exceptions import UnknownOperationError


CLASSIFIERS = [is_number_parse, is_number_regex, is_number_library]


class TestTryParseInt:
    """Test cases for the fallible parse."""

    def test_success_returns_value(self):
        assert try_parse_int("42") == ParseResult(True, 42)

    def test_failure_returns_not_ok(self):
        result = try_parse_int("X42")
        assert result.ok is False
        assert result.value == 0

    def test_empty_string_fails(self):
        assert not try_parse_int("").ok

    def test_leading_zero_digits_parse(self):
        assert try_parse_int("007") == ParseResult(True, 7)

    @pytest.mark.parametrize("text", ["1_000", " 42", "42\n", "\t7"])
    def test_int_literal_leniency_rejected(self, text):
        assert try_parse_int(text) == ParseResult(False)
        assert not is_number_parse(text)
        assert not is_number_regex(text)


class TestClassifiers:
    """All three classifiers must agree on every harness input."""

    @pytest.mark.parametrize("classifier", CLASSIFIERS)
    def test_unprefixed_value_is_numeric(self, classifier):
        assert classifier("42") is True

    @pytest.mark.parametrize("classifier", CLASSIFIERS)
    def test_prefixed_value_is_not_numeric(self, classifier):
        assert classifier("X42") is False

    @pytest.mark.parametrize("classifier", [is_number_regex, is_number_library])
    def test_empty_string_is_not_numeric(self, classifier):
        assert classifier("") is False

    def test_regex_rejects_non_ascii_digits(self):
        assert is_number_regex("٤٢") is False

    def test_regex_requires_full_match(self):
        assert is_number_regex("42X") is False
        assert is_number_regex("4 2") is False

    def test_agreement_over_range(self):
        for prefix in ("", "X"):
            for value in list(range(0, 2_000)) + [9_999_999]:
                s = prefix + str(value)
                verdicts = {classifier(s) for classifier in CLASSIFIERS}
                assert verdicts == {prefix == ""}, s


class TestAccumulate:
    """Test cases for bucket accumulation."""

    @pytest.mark.parametrize("operation", list(STRATEGIES))
    def test_numeric_value_goes_to_positive(self, operation):
        state = IterationState()
        get_strategy(operation).accumulate(state, "", 42)
        assert state.totals == (42, 0)

    @pytest.mark.parametrize("operation", list(STRATEGIES))
    def test_prefixed_value_goes_to_negative(self, operation):
        state = IterationState()
        get_strategy(operation).accumulate(state, "X", 42)
        assert state.totals == (0, 42)

    def test_parse_and_catch_adds_parsed_value(self, mocker):
        mocker.patch(
            "numcheck.benchmark.strategies.try_parse_int",
            return_value=ParseResult(True, 7),
        )
        state = IterationState()
        ParseAndCatchStrategy().accumulate(state, "", 42)
        assert state.totals == (7, 0)


class TestRegistry:
    """Test cases for the operation registry."""

    def test_operations_in_order(self):
        assert list_operations() == [
            "parse_int_with_try_catch",
            "is_number_with_regex",
            "is_numeric_with_library",
        ]

    def test_kinds(self):
        assert isinstance(get_strategy("parse_int_with_try_catch"), ParseAndCatchStrategy)
        assert isinstance(get_strategy("is_number_with_regex"), RegexStrategy)
        assert isinstance(get_strategy("is_numeric_with_library"), LibraryStrategy)
        assert {s.kind for s in STRATEGIES.values()} == set(StrategyKind)

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperationError, match="Unknown operation 'nope'") as exc_info:
            get_strategy("nope")
        assert exc_info.value.operation == "nope"
