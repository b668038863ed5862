# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, the enum describing how an option consumes its value.

Exactly one kind applies to every declared option:

- SCALAR: takes one value, either attached (`--name=value`) or the next token.
- BOOLEAN: takes no value; a bare flag negates the option's default.
- LIST: takes one comma separated value per occurrence and accumulates.

The kind is selected by the `list` and `bool` declaration properties, see
`OptionKind.from_flags`.
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """Value shape of a declared option."""

    SCALAR = "scalar"
    BOOLEAN = "boolean"
    LIST = "list"

    @classmethod
    def from_flags(cls, is_list: bool = False, is_bool: bool = False) -> OptionKind:
        """Return the kind selected by the `list`/`bool` declaration properties."""
        if is_list:
            return cls.LIST
        if is_bool:
            return cls.BOOLEAN
        return cls.SCALAR

    def __str__(self) -> str:
        return self.value
