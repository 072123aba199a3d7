"""Assertion kinds and results for field checks."""

from multiassert.assertions.base import AssertionResult
from multiassert.assertions.kinds import AssertionKind, format_value

__all__ = ["AssertionKind", "AssertionResult", "format_value"]
