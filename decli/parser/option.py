# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionSpec` dataclass, the registered description of one
command-line option (flag).

Key Attributes:
- `name`: Canonical name, the key used in the parsed option map
- `kind`: `OptionKind` (scalar, boolean or list)
- `aliases`: Alternate names resolving to this same spec
- `default`: Fallback value, or a zero-argument callable producing it
- `check`: Validation rule (predicate, compiled pattern, or a builtin tag)
- `transform`: Per-value mapping applied before validation
- `trigger`: Callback fired with the option's final value
- `description`: Help text for usage rendering

Specs are created by `Registry.add_opt()` and never mutated by parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from decli.parser.option_kind import OptionKind
from decli.parser.parser_types import MISSING, NO_DESCRIPTION


@dataclass(eq=False)
class OptionSpec:
    """
    Represents a declared option.

    Equality is identity: every alias key in a registry refers to the same
    `OptionSpec` object.

    Attributes:
        name (str): Canonical option name.
        kind (OptionKind): How values are consumed.
        aliases (tuple[str, ...]): Additional names for the option.
        default (Any): Default value or producer, `MISSING` if none.
        check (Any): Predicate, compiled pattern, or one of "file", "dir", "number".
        transform (Callable | None): Applied to each value before validation.
        trigger (Callable | None): Called as `trigger(owner, name, value, options)`.
        description (str): Help text.
    """

    name: str
    kind: OptionKind = OptionKind.SCALAR
    aliases: tuple[str, ...] = ()
    default: Any = MISSING
    check: Any = None
    transform: Callable[[Any], Any] | None = None
    trigger: Callable[..., Any] | None = None
    description: str = NO_DESCRIPTION

    @property
    def names(self) -> tuple[str, ...]:
        """The canonical name followed by every alias."""
        return (self.name, *self.aliases)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def is_list(self) -> bool:
        return self.kind is OptionKind.LIST

    @property
    def is_bool(self) -> bool:
        return self.kind is OptionKind.BOOLEAN

    def resolve_default(self) -> Any:
        """Materialize the default, invoking it if it is a producer."""
        if callable(self.default):
            return self.default()
        return self.default

    def flag_value(self) -> bool:
        """Value of a bare boolean flag: the negation of the default."""
        default = self.resolve_default() if self.has_default else False
        return not default

    def get_value_text(self) -> str:
        """Placeholder shown after the option name in usage output."""
        if self.kind is OptionKind.BOOLEAN:
            return ""
        if self.kind is OptionKind.LIST:
            return "XXX,..."
        return "XXX"

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return f"OptionSpec(name={self.name!r}, kind={self.kind}, aliases={self.aliases!r})"
