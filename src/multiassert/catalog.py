"""Per-type field discovery and caching."""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class FieldDescriptor:
    """A readable field declared by ``owner``."""

    name: str
    owner: type

    @property
    def attribute(self) -> str:
        # Double-underscore names are stored under their mangled form.
        if self.name.startswith("__") and not self.name.endswith("__"):
            return f"_{self.owner.__name__.lstrip('_')}{self.name}"
        return self.name

    def read(self, instance: Any) -> Any:
        """Return the field value on *instance*, or None if it was never assigned."""
        return getattr(instance, self.attribute, None)


def type_name(cls: type) -> str:
    """Fully-qualified name used as the catalog key."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_final(annotation: Any) -> bool:
    """True for ``Final``, ``Final[...]`` and ``ClassVar[Final[...]]``, as objects or strings."""
    if isinstance(annotation, str):
        head, _, inner = annotation.strip().partition("[")
        head = head.strip().rsplit(".", 1)[-1]
        if head == "ClassVar" and inner:
            return _is_final(inner.rstrip().removesuffix("]"))
        return head == "Final"
    if annotation is typing.Final:
        return True
    origin = typing.get_origin(annotation)
    if origin is typing.ClassVar:
        args = typing.get_args(annotation)
        return bool(args) and _is_final(args[0])
    return origin is typing.Final


def _is_constant(name: str, annotation: Any) -> bool:
    """Private, class-level and immutable: ``_LIMIT: Final = 3``.

    A private ``ClassVar`` that is not ``Final`` can be reassigned, so it stays a field.
    """
    return name.startswith("_") and _is_final(annotation)


def _declared_names(cls: type) -> list[tuple[str, Any]]:
    declared: list[tuple[str, Any]] = list(inspect.get_annotations(cls).items())
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    declared.extend((slot, None) for slot in slots if slot not in ("__dict__", "__weakref__"))
    return declared


def _instance_names(instance: Any) -> list[str]:
    # Objects built purely on __slots__ have no __dict__.
    return list(getattr(instance, "__dict__", {}))


class FieldCatalog:
    """Ordered field lists per type, built once and cached by type name.

    Own fields come first in declaration order, followed by the fields of each
    base class in MRO order. Fields redeclared in a subclass are listed once.

    Declared fields are annotations and ``__slots__``. When an instance is
    passed, attributes it holds that no class declares (the usual case for a
    plain class assigning ``self.x`` in ``__init__``) are appended in
    assignment order. Only the declared part is cached.
    """

    def __init__(self) -> None:
        self._cache: dict[str, tuple[FieldDescriptor, ...]] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, cls: type) -> bool:
        return type_name(cls) in self._cache

    def fields_of(self, cls: type, instance: Any = None) -> tuple[FieldDescriptor, ...]:
        key = type_name(cls)
        fields = self._cache.get(key)
        if fields is None:
            fields = self._collect(cls)
            self._cache[key] = fields
        if instance is None:
            return fields
        known = {field.attribute for field in fields}
        extra = tuple(
            FieldDescriptor(name=name, owner=cls)
            for name in _instance_names(instance)
            if name not in known
        )
        return fields + extra

    def names_of(self, cls: type, instance: Any = None) -> list[str]:
        return [field.name for field in self.fields_of(cls, instance)]

    def find(self, cls: type, name: str, instance: Any = None) -> FieldDescriptor | None:
        for field in self.fields_of(cls, instance):
            if field.name == name:
                return field
        return None

    def clear(self) -> None:
        self._cache.clear()

    @staticmethod
    def _collect(cls: type) -> tuple[FieldDescriptor, ...]:
        seen: set[str] = set()
        fields: list[FieldDescriptor] = []
        for klass in cls.__mro__:
            if klass is object:
                break
            for name, annotation in _declared_names(klass):
                if name in seen or _is_constant(name, annotation):
                    continue
                seen.add(name)
                fields.append(FieldDescriptor(name=name, owner=klass))
        return tuple(fields)
