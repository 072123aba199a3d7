"""Error taxonomy for declaring and running field assertions."""

from __future__ import annotations


class MultiAssertError(Exception):
    """Base class for every error raised by multiassert."""


# --- configuration errors (raised at construction, declaration or validation) ---


class ConfigurationError(MultiAssertError, ValueError):
    """The declared checks cannot be executed as written."""


class MissingActualError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("'actual' parameter is None in constructor.")


class TypeMismatchError(ConfigurationError):
    def __init__(self, actual_type: str, expected_type: str) -> None:
        self.actual_type = actual_type
        self.expected_type = expected_type
        super().__init__(
            f"Both parameters must be of the same type "
            f"(actual: '{actual_type}', expected: '{expected_type}')."
        )


class MissingExpectedError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "'expected' parameter is None in constructor; "
            "only value checks can be declared."
        )


class EmptyPathError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("assert_value() - path parameter is None or empty.")


class MalformedPathError(ConfigurationError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"The sub-field '{path}' is incorrectly named. 1 dot '.' is required."
        )


class UnknownFieldError(ConfigurationError):
    def __init__(self, field: str, type_name: str) -> None:
        self.field = field
        self.type_name = type_name
        super().__init__(
            f"The field '{field}' does not exist in the type '{type_name}'. "
            "Check your string parameters."
        )


# --- resolution errors (raised mid-run, abandon the run) ---


class ResolutionError(MultiAssertError, LookupError):
    """A declared path could not be resolved against the data."""


class UnknownSubFieldError(ResolutionError):
    def __init__(self, sub_field: str, field: str) -> None:
        self.sub_field = sub_field
        self.field = field
        super().__init__(
            f"The sub-field '{sub_field}' does not exist in the field '{field}'."
        )


class NullIntermediateError(ResolutionError):
    def __init__(self, field: str, sub_field: str) -> None:
        self.field = field
        self.sub_field = sub_field
        super().__init__(
            f"The field value '{field}' cannot be None to fetch sub-field '{sub_field}'."
        )


# --- comparison outcomes ---


class ComparisonFailure(AssertionError):
    """Raised by the primitive assertions when a comparison does not hold."""


class AggregateFailure(MultiAssertError, AssertionError):
    """Raised at the end of a run when at least one check failed."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"See the logs for the details on the {count} error(s).")
