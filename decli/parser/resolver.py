# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name resolution for options and arguments.

A user may type any prefix of a declared name or alias as long as it is not
shared with another declaration. An exact name or alias always wins over a
prefix match, so declaring `foo` and `foobar` still lets `foo` select `foo`.

Functions:
- find_candidates: Canonical names whose name or alias starts with a prefix.
- resolve: Map a user supplied key to a single canonical name.
"""
from __future__ import annotations

from typing import Mapping, Protocol

from decli.exceptions import AmbiguityError, UnknownNameError
from decli.logger import logger
from decli.parser.parser_types import SpecKind


class NamedSpec(Protocol):
    name: str


def find_candidates(specs: Mapping[str, NamedSpec], prefix: str) -> list[str]:
    """
    Return the sorted canonical names with a name or alias starting with `prefix`.

    Args:
        specs (Mapping[str, NamedSpec]): Name-or-alias to spec mapping.
        prefix (str): Literal, case-sensitive prefix.

    Returns:
        list[str]: Distinct canonical names.
    """
    return sorted({spec.name for key, spec in specs.items() if key.startswith(prefix)})


def resolve(
    kind: SpecKind | str, specs: Mapping[str, NamedSpec], key: str
) -> str:
    """
    Resolve `key` to the canonical name of a declared option or argument.

    Args:
        kind (SpecKind | str): Namespace being searched, used in error messages.
        specs (Mapping[str, NamedSpec]): Name-or-alias to spec mapping.
        key (str): The name as typed, without leading dashes.

    Returns:
        str: The canonical name.

    Raises:
        AmbiguityError: If `key` prefixes more than one canonical name.
        UnknownNameError: If `key` matches nothing.
    """
    kind = SpecKind(kind)
    if key in specs:
        return specs[key].name

    matches = find_candidates(specs, key)
    if len(matches) > 1:
        raise AmbiguityError(kind.value, key, matches)
    if not matches:
        raise UnknownNameError(kind.value, key)

    logger.debug("Resolved %s '%s' to '%s'", kind, key, matches[0])
    return matches[0]
