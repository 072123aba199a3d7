"""Parsing and resolution of ``field`` / ``field.subfield`` paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from multiassert.catalog import FieldCatalog, type_name
from multiassert.errors import (
    EmptyPathError,
    MalformedPathError,
    NullIntermediateError,
    UnknownFieldError,
    UnknownSubFieldError,
)

SEPARATOR = "."


@dataclass(frozen=True)
class FieldPath:
    top: str
    sub: str | None = None

    @property
    def is_nested(self) -> bool:
        return self.sub is not None

    def __str__(self) -> str:
        if self.sub is None:
            return self.top
        return f"{self.top}{SEPARATOR}{self.sub}"


def parse_path(path: str | FieldPath) -> FieldPath:
    """Split a dotted path into at most two segments."""
    if isinstance(path, FieldPath):
        return path
    if not path:
        raise EmptyPathError()
    segments = path.split(SEPARATOR)
    if len(segments) > 2 or any(not segment for segment in segments):
        raise MalformedPathError(path)
    if len(segments) == 2:
        return FieldPath(segments[0], segments[1])
    return FieldPath(segments[0])


class PathResolver:
    """Reads field values off objects using a shared :class:`FieldCatalog`."""

    def __init__(self, catalog: FieldCatalog | None = None):
        self.catalog = catalog if catalog is not None else FieldCatalog()

    def read_field(self, name: str, source: Any) -> Any:
        field = self.catalog.find(type(source), name, source)
        if field is None:
            raise UnknownFieldError(name, type_name(type(source)))
        return field.read(source)

    def read_sub_field(self, top: str, sub: str, source: Any) -> Any:
        intermediate = self.read_field(top, source)
        if intermediate is None:
            raise NullIntermediateError(top, sub)
        field = self.catalog.find(type(intermediate), sub, intermediate)
        if field is None:
            raise UnknownSubFieldError(sub, top)
        return field.read(intermediate)

    def resolve(self, path: str | FieldPath, source: Any) -> Any:
        parsed = parse_path(path)
        if parsed.sub is None:
            return self.read_field(parsed.top, source)
        return self.read_sub_field(parsed.top, parsed.sub, source)
