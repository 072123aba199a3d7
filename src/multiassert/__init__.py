"""Declarative field-by-field assertions between two objects."""

from multiassert.assertions import AssertionKind, AssertionResult
from multiassert.builder import AssertionSpec, MultiAssertBuilder
from multiassert.catalog import FieldCatalog, FieldDescriptor
from multiassert.errors import (
    AggregateFailure,
    ComparisonFailure,
    ConfigurationError,
    EmptyPathError,
    MalformedPathError,
    MissingActualError,
    MissingExpectedError,
    MultiAssertError,
    NullIntermediateError,
    ResolutionError,
    TypeMismatchError,
    UnknownFieldError,
    UnknownSubFieldError,
)
from multiassert.executor import Executor
from multiassert.paths import FieldPath, PathResolver, parse_path

__all__ = [
    "AggregateFailure",
    "AssertionKind",
    "AssertionResult",
    "AssertionSpec",
    "ComparisonFailure",
    "ConfigurationError",
    "EmptyPathError",
    "Executor",
    "FieldCatalog",
    "FieldDescriptor",
    "FieldPath",
    "MalformedPathError",
    "MissingActualError",
    "MissingExpectedError",
    "MultiAssertBuilder",
    "MultiAssertError",
    "NullIntermediateError",
    "PathResolver",
    "ResolutionError",
    "TypeMismatchError",
    "UnknownFieldError",
    "UnknownSubFieldError",
    "parse_path",
]
