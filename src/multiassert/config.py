from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from multiassert.assertions.kinds import AssertionKind
from multiassert.builder import MultiAssertBuilder
from multiassert.paths import parse_path


class FieldChecks(BaseModel):
    model_config = ConfigDict(extra="forbid")
    equal: list[str] = []
    not_equal: list[str] = []
    null: list[str] = []
    not_null: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def unquoted_null_key(cls, data: Any) -> Any:
        # YAML reads a bare `null:` key as None
        if isinstance(data, dict) and None in data:
            data = dict(data)
            data["null"] = data.pop(None)
        return data

    @field_validator("equal", "not_equal", "null", "not_null")
    @classmethod
    def paths_must_be_well_formed(cls, v: list[str]) -> list[str]:
        for path in v:
            parse_path(path)
        return v

    def by_kind(self) -> dict[AssertionKind, list[str]]:
        return {kind: getattr(self, kind.key) for kind in AssertionKind}

    def is_empty(self) -> bool:
        return not any(self.by_kind().values())


class ValueCheck(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    value: Any = None
    equals: bool = True

    @field_validator("path")
    @classmethod
    def path_must_be_well_formed(cls, v: str) -> str:
        parse_path(v)
        return v

    @model_validator(mode="after")
    def expand_env_variables(self) -> "ValueCheck":
        """Expand ${VAR} references in string literals.

        Raises ValueError naming the variable when it is unset and has no default.
        """
        if isinstance(self.value, str):
            try:
                self.value = expandvars(self.value, nounset=True)
            except Exception as e:
                raise ValueError(
                    f"Value for '{self.path}' references a missing environment variable: {e}"
                ) from e
        return self


class CheckFile(BaseModel):
    model_config = ConfigDict(extra="forbid")
    actual: str
    expected: str | None = None
    verbose: bool = False
    pythonpath: list[str] = []
    checks: FieldChecks = FieldChecks()
    values: list[ValueCheck] = []

    @field_validator("actual", "expected")
    @classmethod
    def references_must_name_an_attribute(cls, v: str | None) -> str | None:
        if v is not None:
            _split_reference(v)
        return v

    @model_validator(mode="after")
    def checks_must_not_be_empty(self) -> CheckFile:
        if self.checks.is_empty() and not self.values:
            raise ValueError("at least one check or value must be declared")
        if self.expected is None and not self.checks.is_empty():
            raise ValueError("field checks require an 'expected' object")
        return self

    def build(self, logger: logging.Logger | None = None) -> MultiAssertBuilder:
        """Import the objects and declare every check on a new builder."""
        for entry in self.pythonpath:
            if entry not in sys.path:
                sys.path.insert(0, entry)

        actual = resolve_reference(self.actual)
        expected = resolve_reference(self.expected) if self.expected else None
        builder = MultiAssertBuilder(actual, expected, self.verbose, logger=logger)
        for kind, paths in self.checks.by_kind().items():
            if paths:
                builder.declare(kind, *paths)
        for check in self.values:
            builder.assert_value(check.path, check.value, check.equals)
        return builder


def _split_reference(reference: str) -> tuple[str, str]:
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Object reference '{reference}' must look like 'module:attribute'")
    return module_name, attribute


def resolve_reference(reference: str) -> Any:
    """Import ``module:attribute``; callables are called without arguments."""
    module_name, attribute = _split_reference(reference)
    target: Any = importlib.import_module(module_name)
    for part in attribute.split("."):
        target = getattr(target, part)
    if callable(target):
        target = target()
    return target


def load_config(path: Path) -> CheckFile:
    """Load and validate a check file from YAML."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = CheckFile(**(raw or {}))

    # Resolve relative pythonpath entries relative to the check file location
    config.pythonpath = [
        str(entry_path if entry_path.is_absolute() else (config_dir / entry_path).resolve())
        for entry_path in map(Path, config.pythonpath)
    ]

    return config
