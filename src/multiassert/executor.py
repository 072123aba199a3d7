"""Executes declared field checks and reports their outcomes."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from multiassert.assertions.base import AssertionResult
from multiassert.assertions.kinds import FIELD_ORDER, SUB_FIELD_ORDER, AssertionKind
from multiassert.catalog import FieldCatalog, FieldDescriptor, type_name
from multiassert.errors import AggregateFailure, UnknownFieldError
from multiassert.paths import PathResolver

if TYPE_CHECKING:
    from multiassert.builder import AssertionSpec

_START = "=> multiassert is testing two objects of the type '%s'."
_END_SUCCESS = (
    "=> multiassert checks for two '%s' ended successfully with no errors "
    "and lasted %.3f milliseconds."
)
_END_FAILURE = "=> multiassert checks for '%s' ended with %d error(s) and lasted %.3f milliseconds."


class Executor:
    """Runs every check of an :class:`AssertionSpec` against two objects.

    Comparison mismatches become failed results and never stop the run.
    Configuration and resolution errors propagate immediately.
    """

    def __init__(
        self,
        actual: Any,
        expected: Any,
        spec: AssertionSpec,
        *,
        catalog: FieldCatalog | None = None,
        logger: logging.Logger | None = None,
        verbose: bool = False,
        results: list[AssertionResult] | None = None,
    ):
        self.actual = actual
        self.expected = expected
        self.spec = spec
        self.resolver = PathResolver(catalog)
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.verbose = verbose
        self.results = results if results is not None else []
        self.type_name = type_name(type(actual))
        self.start_time = 0.0
        self.end_time = 0.0

    @property
    def catalog(self) -> FieldCatalog:
        return self.resolver.catalog

    @property
    def elapsed_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000.0

    @property
    def failure_count(self) -> int:
        return sum(1 for result in self.results if not result.passed)

    def run(self) -> list[AssertionResult]:
        self.start_time = time.perf_counter()
        if self.verbose:
            self.logger.info(_START % self.type_name)
        self.results.clear()

        try:
            fields = self.catalog.fields_of(type(self.actual), self.actual)
            self.validate(fields)
            for descriptor in fields:
                self._check_field(descriptor)
            for path, value in self.spec.equal_values.items():
                self._check_value(path, value, AssertionKind.EQUALS)
            for path, value in self.spec.not_equal_values.items():
                self._check_value(path, value, AssertionKind.NOT_EQUALS)
        finally:
            self.end_time = time.perf_counter()
        self.report()
        return self.results

    def validate(self, fields: tuple[FieldDescriptor, ...]) -> None:
        """Fail on the first declared top-level name the examined type lacks."""
        known = {descriptor.name for descriptor in fields}
        names = self.spec.top_level_names()
        self.logger.debug(f"Validating {len(names)} declared name(s) against {self.type_name}")
        for name in names:
            if name not in known:
                raise UnknownFieldError(name, self.type_name)

    def report(self) -> None:
        failures = [result for result in self.results if not result.passed]
        if failures:
            for result in failures:
                self.logger.error(result.message)
            if self.verbose:
                self.logger.info(_END_FAILURE % (self.type_name, len(failures), self.elapsed_ms))
            raise AggregateFailure(len(failures))
        if self.verbose:
            self.logger.info(_END_SUCCESS % (self.type_name, self.elapsed_ms))

    def _check_field(self, descriptor: FieldDescriptor) -> None:
        name = descriptor.name
        for kind in SUB_FIELD_ORDER:
            for sub in self.spec.sub_fields[kind].get(name, ()):
                actual_value = self.resolver.read_sub_field(name, sub, self.actual)
                expected_value = self.resolver.read_sub_field(name, sub, self.expected)
                self._record(f"{name}.{sub}", kind, actual_value, expected_value)
        for kind in FIELD_ORDER:
            if name in self.spec.fields[kind]:
                self._record(
                    name, kind, descriptor.read(self.actual), descriptor.read(self.expected)
                )

    def _check_value(self, path: str, value: Any, kind: AssertionKind) -> None:
        actual_value = self.resolver.resolve(path, self.actual)
        self._record(path, kind, actual_value, value)

    def _record(self, path: str, kind: AssertionKind, actual_value: Any, expected_value: Any) -> None:
        if kind.holds(actual_value, expected_value):
            message = kind.success_message(path, actual_value, expected_value)
            if self.verbose:
                self.logger.info(message)
            self.results.append(AssertionResult(name=path, kind=kind, passed=True, message=message))
        else:
            message = kind.failure_message(path, actual_value, expected_value)
            self.logger.debug(f"Check failed: {kind.key} {path}")
            self.results.append(AssertionResult(name=path, kind=kind, passed=False, message=message))
