"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from multiassert.assertions.kinds import AssertionKind


@dataclass
class AssertionResult:
    """Outcome of evaluating a single declared check.

    Attributes:
        name: Displayed path of the checked field (e.g. "dog.name").
        kind: The comparison that was run.
        passed: Whether the comparison held.
        message: The rendered success or failure message.
    """

    name: str
    kind: AssertionKind
    passed: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.key
        return data
