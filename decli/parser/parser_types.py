# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shared types for the Decli parser.

Contents:
- `MISSING`: Sentinel marking an option declared without a default.
- `NO_DESCRIPTION`: Description used when a declaration provides none.
- `SpecKind`: The two declaration namespaces, options and arguments.
- `ParseResult`: Transient output of tokenizing one command line.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NO_DESCRIPTION = "No Description."


class _Missing:
    """Sentinel type for an unset default."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class SpecKind(Enum):
    """
    Namespace a declaration lives in.

    Options and arguments are registered and resolved independently; a name
    may exist in both.

    Aliases:
        - "opt" → "option"
        - "arg" → "argument"
    """

    OPTION = "option"
    ARGUMENT = "argument"

    @classmethod
    def _missing_(cls, value: object) -> SpecKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        aliases = {"opt": "option", "arg": "argument"}
        normalized = value.strip().lower()
        normalized = aliases.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseResult:
    """
    Positional tokens and option values collected from one command line.

    Attributes:
        positional (list[str]): Non-option tokens in encounter order, unresolved.
        options (dict[str, Any]): Canonical option name to value. LIST options
            map to a list, BOOLEAN options to a bool (or the attached text of
            `-name=value`), SCALAR options to the raw string until transformed.
    """

    positional: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)

    def __iter__(self):
        yield self.positional
        yield self.options
