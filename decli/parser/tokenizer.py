# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw command line into option assignments and positional tokens.

Token grammar:
- `--` on its own turns option recognition off for every remaining token.
- `-name`, `--name`, `-name=value` (any number of leading dashes) is an option
  token when the name contains no dash or `=`. The name may be any unambiguous
  prefix of a declared option name or alias.
- Anything else is positional and is kept verbatim.

Value consumption:
- BOOLEAN options never consume the next token. A bare flag negates the
  option's default; an attached `=value` is kept verbatim.
- SCALAR options use the attached value or unconditionally consume the next
  token, even if it looks like an option.
- LIST options read a value the same way, split it on commas and append to any
  values already collected for that option.

Positional tokens are not resolved here; dispatch resolves the first one
against the argument registry.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable

from decli.exceptions import MissingValueError
from decli.logger import logger
from decli.parser.option import OptionSpec
from decli.parser.parser_types import ParseResult, SpecKind
from decli.parser.resolver import resolve
from decli.parser.utils import split_list_value

if TYPE_CHECKING:
    from decli.parser.registry import Registry

OPTION_TOKEN = re.compile(r"^-+([^-=]+)(?:=(.+))?$")
SEPARATOR = "--"


def _option_value(
    spec: OptionSpec, attached: str | None, tokens: list[str], index: int
) -> tuple[Any, int]:
    """Return the option's value and the index of the next unread token."""
    if spec.is_bool:
        if attached is not None:
            return attached, index
        return spec.flag_value(), index

    if attached is not None:
        raw = attached
    elif index < len(tokens):
        raw = tokens[index]
        index += 1
    else:
        raise MissingValueError(spec.name)

    if spec.is_list:
        return split_list_value(raw), index
    return raw, index


def parse_cli(registry: Registry, tokens: Iterable[str]) -> ParseResult:
    """
    Tokenize `tokens` against the options declared in `registry`.

    No defaults, transforms, checks, triggers or handlers are applied.

    Args:
        registry (Registry): Declarations to resolve option names against.
        tokens (Iterable[str]): Raw command line, without the program name.

    Returns:
        ParseResult: Positional tokens and option values.

    Raises:
        AmbiguityError: If an option prefix matches several options.
        UnknownNameError: If an option name matches nothing.
        MissingValueError: If a value-taking option ends the command line.
    """
    tokens = list(tokens)
    result = ParseResult()
    options_enabled = True

    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token == SEPARATOR:
            options_enabled = False
            continue

        match = OPTION_TOKEN.match(token) if options_enabled else None
        if not match:
            result.positional.append(token)
            continue

        key, attached = match.group(1), match.group(2)
        name = resolve(SpecKind.OPTION, registry.options, key)
        spec = registry.options[name]
        value, i = _option_value(spec, attached, tokens, i)

        if spec.is_list:
            result.options.setdefault(name, []).extend(value)
        else:
            result.options[name] = value
        logger.debug("Option '%s' (from '%s') set to %r", name, token, value)

    return result
