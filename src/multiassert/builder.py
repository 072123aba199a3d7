"""Declarative builder for field-by-field assertions between two objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from multiassert.assertions.base import AssertionResult
from multiassert.assertions.kinds import AssertionKind
from multiassert.catalog import FieldCatalog, type_name
from multiassert.errors import (
    EmptyPathError,
    MissingActualError,
    MissingExpectedError,
    TypeMismatchError,
)
from multiassert.executor import Executor
from multiassert.paths import FieldPath, parse_path
from multiassert.verbose import get_logger


def _by_kind(factory):
    return lambda: {kind: factory() for kind in AssertionKind}


@dataclass
class AssertionSpec:
    """Every check declared on a builder, grouped by category.

    Sets are dicts with None values so declaration order is kept.
    """

    fields: dict[AssertionKind, dict[str, None]] = field(default_factory=_by_kind(dict))
    sub_fields: dict[AssertionKind, dict[str, dict[str, None]]] = field(
        default_factory=_by_kind(dict)
    )
    equal_values: dict[str, Any] = field(default_factory=dict)
    not_equal_values: dict[str, Any] = field(default_factory=dict)

    def add(self, kind: AssertionKind, path: str | FieldPath) -> None:
        parsed = parse_path(path)
        if parsed.sub is None:
            self.fields[kind].setdefault(parsed.top, None)
        else:
            self.sub_fields[kind].setdefault(parsed.top, {}).setdefault(parsed.sub, None)

    def add_value(self, path: str, value: Any, equals: bool) -> None:
        parse_path(path)
        target = self.equal_values if equals else self.not_equal_values
        target[path] = value

    def top_level_names(self) -> list[str]:
        """Top-level component of every declared path, in category order."""
        names: list[str] = []
        for kind in AssertionKind:
            names.extend(self.fields[kind])
        for kind in AssertionKind:
            names.extend(self.sub_fields[kind])
        for path in (*self.equal_values, *self.not_equal_values):
            names.append(parse_path(path).top)
        return names

    def count(self) -> int:
        plain = sum(len(names) for names in self.fields.values())
        nested = sum(
            len(subs) for by_top in self.sub_fields.values() for subs in by_top.values()
        )
        return plain + nested + len(self.equal_values) + len(self.not_equal_values)


class MultiAssertBuilder:
    """Assert many fields of two objects at once and report every outcome.

    Usage::

        MultiAssertBuilder(actual, expected) \\
            .assert_not_equal_fields("id", "owner.id") \\
            .assert_equal_fields("name", "owner.name") \\
            .assert_not_null_fields("created_at") \\
            .assert_null_fields("deleted_at") \\
            .assert_value("status", Status.ACTIVE) \\
            .assert_value("owner.age", 0, equals=False) \\
            .run_assertions()

    With ``verbose`` off only failed checks are logged. Private ``Final``
    constants (``_NAME: Final = ...``) are never part of the checked fields.
    """

    def __init__(
        self,
        actual: Any,
        expected: Any = None,
        verbose: bool = False,
        *,
        logger: logging.Logger | None = None,
        catalog: FieldCatalog | None = None,
    ):
        if actual is None:
            raise MissingActualError()
        if expected is not None and type(expected) is not type(actual):
            raise TypeMismatchError(type_name(type(actual)), type_name(type(expected)))
        self.actual = actual
        self.expected = expected
        self.verbose = verbose
        self.logger = logger if logger is not None else get_logger()
        self.catalog = catalog if catalog is not None else FieldCatalog()
        self.spec = AssertionSpec()
        self.results: list[AssertionResult] = []
        self.elapsed_ms = 0.0

    @property
    def examined_type(self) -> type:
        return type(self.actual)

    @property
    def successes(self) -> list[str]:
        return [result.message for result in self.results if result.passed]

    @property
    def failures(self) -> list[str]:
        return [result.message for result in self.results if not result.passed]

    def declare(self, kind: AssertionKind, *names: str) -> MultiAssertBuilder:
        """Add fields or ``field.subfield`` paths to check with *kind*.

        Can be called several times; names are merged with earlier calls.
        Requires an expected object since values are compared field by field.
        """
        if self.expected is None:
            raise MissingExpectedError()
        # A malformed name rejects the whole call.
        paths = [parse_path(name) for name in names]
        for path in paths:
            self.spec.add(kind, path)
        return self

    def assert_equal_fields(self, *names: str) -> MultiAssertBuilder:
        return self.declare(AssertionKind.EQUALS, *names)

    def assert_not_equal_fields(self, *names: str) -> MultiAssertBuilder:
        return self.declare(AssertionKind.NOT_EQUALS, *names)

    def assert_null_fields(self, *names: str) -> MultiAssertBuilder:
        return self.declare(AssertionKind.NULL, *names)

    def assert_not_null_fields(self, *names: str) -> MultiAssertBuilder:
        return self.declare(AssertionKind.NOT_NULL, *names)

    def assert_value(self, path: str, value: Any, equals: bool = True) -> MultiAssertBuilder:
        """Check the field at *path* against a literal value.

        ``equals=False`` asserts the field differs from *value*. Declaring the
        same path twice for the same comparison keeps the last value.
        """
        if not path:
            raise EmptyPathError()
        self.spec.add_value(path, value, equals)
        return self

    def run_assertions(self) -> list[AssertionResult]:
        """Run every declared check.

        Returns the results when all checks pass; raises AggregateFailure
        after logging every failure otherwise.
        """
        executor = Executor(
            self.actual,
            self.expected,
            self.spec,
            catalog=self.catalog,
            logger=self.logger,
            verbose=self.verbose,
            results=self.results,
        )
        try:
            return executor.run()
        finally:
            self.elapsed_ms = executor.elapsed_ms
