"""
Classification Strategies

The three interchangeable ways of deciding whether a string holds a
non-negative integer, and the measured operations built on top of them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from numcheck.core.exceptions import UnknownOperationError

from .state import IterationState

_DIGITS = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a fallible integer parse."""
    ok: bool
    value: int = 0


def try_parse_int(s: str) -> ParseResult:
    """
    Parse ``s`` as an integer, reporting failure instead of raising.

    Digit-group underscores and surrounding whitespace, which ``int()``
    tolerates, are rejected.
    """
    try:
        value = int(s)
    except ValueError:
        return ParseResult(False)
    if "_" in s or s != s.strip():
        return ParseResult(False)
    return ParseResult(True, value)


def is_number_parse(s: str) -> bool:
    return try_parse_int(s).ok


def is_number_regex(s: str) -> bool:
    return _DIGITS.fullmatch(s) is not None


def is_number_library(s: str) -> bool:
    # str.isdecimal() is False for the empty string
    return s.isdecimal()


class StrategyKind(str, Enum):
    """Classification techniques under comparison."""
    PARSE_AND_CATCH = "parse_and_catch"
    REGEX = "regex"
    LIBRARY = "library"


class ClassificationStrategy:
    """Base class for a measured classification operation."""

    operation: str = ""
    kind: StrategyKind
    description: str = ""

    def classify(self, s: str) -> bool:
        raise NotImplementedError

    def accumulate(self, state: IterationState, prefix: str, value: int) -> None:
        """Classify ``prefix + value`` and add ``value`` to the matching bucket."""
        s = prefix + str(value)
        if self.classify(s):
            state.positive.add(value)
        else:
            state.negative.add(value)


class ParseAndCatchStrategy(ClassificationStrategy):
    operation = "parse_int_with_try_catch"
    kind = StrategyKind.PARSE_AND_CATCH
    description = "int() + ValueError"

    def classify(self, s: str) -> bool:
        return is_number_parse(s)

    def accumulate(self, state: IterationState, prefix: str, value: int) -> None:
        # Positive bucket takes the parsed integer, negative the loop value.
        result = try_parse_int(prefix + str(value))
        if result.ok:
            state.positive.add(result.value)
        else:
            state.negative.add(value)


class RegexStrategy(ClassificationStrategy):
    operation = "is_number_with_regex"
    kind = StrategyKind.REGEX
    description = r"re.fullmatch \d+"

    def classify(self, s: str) -> bool:
        return is_number_regex(s)


class LibraryStrategy(ClassificationStrategy):
    operation = "is_numeric_with_library"
    kind = StrategyKind.LIBRARY
    description = "str.isdecimal()"

    def classify(self, s: str) -> bool:
        return is_number_library(s)


STRATEGIES: Dict[str, ClassificationStrategy] = {
    strategy.operation: strategy
    for strategy in (ParseAndCatchStrategy(), RegexStrategy(), LibraryStrategy())
}


def list_operations() -> List[str]:
    """Names of all measured operations, in registration order."""
    return list(STRATEGIES)


def get_strategy(operation: str) -> ClassificationStrategy:
    """
    Look up the strategy behind a measured operation.

    Raises:
        UnknownOperationError: If no operation has that name
    """
    try:
        return STRATEGIES[operation]
    except KeyError:
        raise UnknownOperationError(
            f"Unknown operation '{operation}'. Available: {', '.join(STRATEGIES)}",
            operation=operation,
        ) from None
