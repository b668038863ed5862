# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Dispatch engine: turns a command line into final option values and runs the
selected command's handler.

Steps of `process()`:
1. Tokenize the command line (`parse_cli`).
2. Resolve the first positional token, if any, to a declared argument.
3. Fill in defaults for options not given on the command line.
4. Transform, then validate, the values of every option.
5. Fire option triggers with the completed option map.
6. Hand the option map to the owner's `set_opts`, when it has one.
7. Return the option map, or the handler's result when a command was given.

Everything that can fail (name resolution, missing values, checks) fails
before the first trigger or handler runs.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from decli.logger import logger
from decli.parser.checks import validate
from decli.parser.option import OptionSpec
from decli.parser.parser_types import ParseResult, SpecKind
from decli.parser.resolver import resolve
from decli.parser.tokenizer import parse_cli

if TYPE_CHECKING:
    from decli.parser.registry import Registry


def apply_defaults(registry: Registry, options: dict[str, Any]) -> None:
    """Insert the materialized default of every option missing from `options`."""
    for name, spec in registry.option_specs.items():
        if name in options or not spec.has_default:
            continue
        options[name] = spec.resolve_default()
        logger.debug("Option '%s' defaulted to %r", name, options[name])


def finalize_value(spec: OptionSpec, value: Any) -> Any:
    """
    Transform and validate one option value.

    The value is viewed as a list (LIST options already are one), each item is
    transformed, the transformed items are validated, and the result is folded
    back to a single value for non-list options.
    """
    if spec.is_list:
        values = list(value) if isinstance(value, (list, tuple)) else [value]
    else:
        values = [value]

    if spec.transform:
        values = [spec.transform(item) for item in values]

    validate(spec, values)
    return values if spec.is_list else values[0]


def resolve_options(registry: Registry, options: dict[str, Any]) -> dict[str, Any]:
    """
    Return the final option map: defaults applied, values transformed and
    validated. `options` is left untouched.
    """
    resolved = dict(options)
    apply_defaults(registry, resolved)
    for name, value in resolved.items():
        resolved[name] = finalize_value(registry.options[name], value)
    return resolved


def run_triggers(registry: Registry, owner: Any, options: dict[str, Any]) -> None:
    """Call `trigger(owner, name, value, options)` for every option that has one."""
    for name in list(options):
        trigger = registry.options[name].trigger
        if trigger:
            logger.debug("Running trigger for option '%s'", name)
            trigger(owner, name, options[name], options)


def store_options(owner: Any, options: dict[str, Any]) -> None:
    """Pass the final option map to `owner.set_opts` if the owner defines it."""
    set_opts = getattr(owner, "set_opts", None)
    if callable(set_opts):
        set_opts(options)


def parse(registry: Registry, tokens: Iterable[str]) -> ParseResult:
    """
    Parse without dispatch: tokenize, apply defaults, transform and validate.

    Triggers are not fired and positional tokens are returned unresolved.
    """
    parsed = parse_cli(registry, tokens)
    return ParseResult(
        positional=parsed.positional,
        options=resolve_options(registry, parsed.options),
    )


def process(registry: Registry, owner: Any, tokens: Iterable[str]) -> Any:
    """
    Process a command line for `owner`.

    Args:
        registry (Registry): The owner's declarations.
        owner (Any): Passed as the first argument to triggers and handlers.
        tokens (Iterable[str]): Raw command line, without the program name.

    Returns:
        Any: The option map when no positional token was given, otherwise the
            return value of the selected argument's handler.

    Raises:
        ParseError: On any resolution, value or validation failure. No trigger
            or handler has run when this is raised.
    """
    parsed = parse_cli(registry, tokens)

    command: str | None = None
    operands: list[str] = []
    if parsed.positional:
        command = resolve(SpecKind.ARGUMENT, registry.arguments, parsed.positional[0])
        operands = parsed.positional[1:]

    options = resolve_options(registry, parsed.options)
    run_triggers(registry, owner, options)
    store_options(owner, options)

    if command is None:
        return options

    logger.debug("Dispatching command '%s' with operands %r", command, operands)
    return registry.arguments[command](owner, options, *operands)
