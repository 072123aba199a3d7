"""The four comparison kinds and the primitive assertions behind them."""

from __future__ import annotations

import unittest
from enum import Enum
from typing import Any, Callable

from multiassert.errors import ComparisonFailure


class _Primitives(unittest.TestCase):
    """unittest assertion methods, failing with :class:`ComparisonFailure`."""

    failureException = ComparisonFailure

    def runTest(self) -> None:  # pragma: no cover - never run as a test
        pass


_primitives = _Primitives()


def assert_equal(actual: Any, expected: Any) -> None:
    _primitives.assertEqual(actual, expected)


def assert_not_equal(actual: Any, expected: Any) -> None:
    _primitives.assertNotEqual(actual, expected)


def assert_null(actual: Any) -> None:
    _primitives.assertIsNone(actual)


def assert_not_null(actual: Any) -> None:
    _primitives.assertIsNotNone(actual)


def format_value(value: Any) -> str:
    """Readable form of a field value: enum members by name, others via str()."""
    if isinstance(value, Enum):
        return value.name
    return str(value)


class AssertionKind(Enum):
    EQUALS = (
        "equal",
        "OK : '%s' fields are equal. Actual : '%s' / Expected : '%s'",
        "KO : the fields named '%s' are not equal but they should be.\n\tActual : '%s' / Expected : '%s'",
    )
    NOT_EQUALS = (
        "not_equal",
        "OK : '%s' fields are not equal. Actual : '%s' / Expected : '%s'",
        "KO : the fields named '%s' are equal but they should not be.\n\tActual : '%s' / Expected : '%s'",
    )
    NULL = (
        "null",
        "OK : '%s' field is null. Actual : '%s' / Expected : '%s'",
        "KO : the field named '%s' is not null but it should be.\n\tActual : '%s' / Expected : '%s'",
    )
    NOT_NULL = (
        "not_null",
        "OK : '%s' field is not null. Actual : '%s' / Expected : '%s'",
        "KO : the field named '%s' is null but it should not be.\n\tActual : '%s' / Expected : '%s'",
    )

    def __init__(self, key: str, success_template: str, failure_template: str):
        self.key = key
        self.success_template = success_template
        self.failure_template = failure_template

    @classmethod
    def from_key(cls, key: str) -> AssertionKind:
        for kind in cls:
            if kind.key == key:
                return kind
        raise ValueError(f"Unknown assertion kind: '{key}'")

    def holds(self, actual: Any, expected: Any) -> bool:
        """Run the primitive assertion; only a ComparisonFailure means False."""
        try:
            _COMPARATORS[self](actual, expected)
        except ComparisonFailure:
            return False
        return True

    def success_message(self, path: str, actual: Any, expected: Any) -> str:
        return self.success_template % (path, format_value(actual), format_value(expected))

    def failure_message(self, path: str, actual: Any, expected: Any) -> str:
        return self.failure_template % (path, format_value(actual), format_value(expected))


_COMPARATORS: dict[AssertionKind, Callable[[Any, Any], None]] = {
    AssertionKind.EQUALS: assert_equal,
    AssertionKind.NOT_EQUALS: assert_not_equal,
    AssertionKind.NULL: lambda actual, _expected: assert_null(actual),
    AssertionKind.NOT_NULL: lambda actual, _expected: assert_not_null(actual),
}

# Kind order for sub-field checks and for plain-field checks within a run.
SUB_FIELD_ORDER = (
    AssertionKind.EQUALS,
    AssertionKind.NOT_EQUALS,
    AssertionKind.NULL,
    AssertionKind.NOT_NULL,
)
FIELD_ORDER = (
    AssertionKind.NULL,
    AssertionKind.NOT_NULL,
    AssertionKind.NOT_EQUALS,
    AssertionKind.EQUALS,
)
