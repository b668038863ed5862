# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass, the registered description of one
positional command.

The first positional token of a command line is resolved to an `ArgumentSpec`
and its `handler` is invoked as `handler(owner, name, options, *operands)`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from decli.parser.parser_types import NO_DESCRIPTION


@dataclass(eq=False)
class ArgumentSpec:
    """
    Represents a declared positional command.

    Attributes:
        name (str): Canonical command name.
        handler (Callable): Callback run when the command is selected.
        aliases (tuple[str, ...]): Additional names for the command.
        description (str): Help text.
    """

    name: str
    handler: Callable[..., Any]
    aliases: tuple[str, ...] = ()
    description: str = NO_DESCRIPTION

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def __call__(self, owner: Any, options: dict[str, Any], *operands: str) -> Any:
        return self.handler(owner, self.name, options, *operands)

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return f"ArgumentSpec(name={self.name!r}, aliases={self.aliases!r})"
