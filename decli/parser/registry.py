# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Registry`, the container of option and argument
declarations for one program.

A registry is filled once, while the program is being set up, through
`add_opt()` and `add_arg()`. Every malformed declaration is rejected on the
spot with `ConfigError`. After that the registry is only read: parsing never
mutates it, so one registry can serve any number of `process()` calls.

Key Features:
- Options of three kinds: scalar (`--name value`), boolean (`--name`) and list
  (`--name a,b`), with aliases, defaults, checks, transforms and triggers
- Positional commands (arguments) with aliases and a handler
- Unambiguous-prefix name resolution for both namespaces
- Usage text rendering and prefix suggestions for completion

Public Interface:
- `add_opt(name, **config)`: Declare an option.
- `add_arg(name, handler, **config)`: Declare a positional command.
- `describe(kind, name, text)`: Read or replace a declaration's description.
- `parse(tokens)`: Parse a command line into positional tokens and options.
- `process(owner, tokens)`: Parse and dispatch to the selected command.

Example Usage:
    registry = Registry()
    registry.add_opt("verbose", bool=True)
    registry.add_opt("types", list=True, default=lambda: ["txt"])
    registry.add_arg("show", lambda owner, name, opts, *files: files)

    registry.process(None, ["-v", "--ty", "txt,rtf", "show", "a.txt"])
    # ("a.txt",)
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from rich.console import Console

from decli.exceptions import ConfigError, SpecNotFoundError
from decli.logger import logger
from decli.parser import dispatch, usage
from decli.parser.argument import ArgumentSpec
from decli.parser.checks import get_check_type
from decli.parser.option import OptionSpec
from decli.parser.option_kind import OptionKind
from decli.parser.parser_types import MISSING, NO_DESCRIPTION, ParseResult, SpecKind
from decli.parser.resolver import resolve
from decli.parser.tokenizer import parse_cli
from decli.parser.utils import is_composite

VALID_OPT_PARAMS = frozenset(
    {"alias", "list", "bool", "default", "check", "transform", "trigger", "description"}
)
VALID_ARG_PARAMS = frozenset({"alias", "description"})


class Registry:
    """
    Option and argument declarations for one program.

    Every name and alias is a key of `options` (or `arguments`) and all keys of
    one declaration refer to the same spec object.

    Args:
        options (Mapping[str, Mapping[str, Any]] | None): Options to declare,
            name to `add_opt` properties.
        arguments (Mapping[str, Mapping[str, Any] | Callable] | None): Arguments
            to declare, name to `add_arg` properties or a bare handler.
    """

    def __init__(
        self,
        options: Mapping[str, Mapping[str, Any]] | None = None,
        arguments: Mapping[str, Mapping[str, Any] | Callable[..., Any]] | None = None,
    ) -> None:
        self.options: dict[str, OptionSpec] = {}
        self.arguments: dict[str, ArgumentSpec] = {}
        self.option_specs: dict[str, OptionSpec] = {}
        self.argument_specs: dict[str, ArgumentSpec] = {}

        for name, config in (options or {}).items():
            self.add_opt(name, **config)
        for name, config in (arguments or {}).items():
            if callable(config):
                self.add_arg(name, config)
            else:
                self.add_arg(name, **config)

    def _get_specs(self, kind: SpecKind | str) -> dict[str, Any]:
        if SpecKind(kind) is SpecKind.OPTION:
            return self.options
        return self.arguments

    def _validate_name(self, name: Any, kind: SpecKind) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigError(f"{kind} name must be a non-empty string, got {name!r}")

    def _validate_properties(
        self, config: Mapping[str, Any], valid: frozenset[str], label: str
    ) -> None:
        for prop in sorted(config):
            if prop not in valid:
                raise ConfigError(f"invalid {label} property: '{prop}'")

    def _normalize_aliases(
        self,
        name: str,
        alias: str | Iterable[str] | None,
        specs: Mapping[str, Any],
        label: str,
    ) -> tuple[str, ...]:
        if alias is None:
            return ()
        raw_aliases = [alias] if isinstance(alias, str) else list(alias)
        aliases: list[str] = []
        for item in raw_aliases:
            if not isinstance(item, str) or not item:
                raise ConfigError(f"alias must be a non-empty string, got {item!r}")
            if item == name or item in aliases:
                continue
            if item in specs:
                raise ConfigError(
                    f"Cannot use alias '{item}', name is already taken by another {label}."
                )
            aliases.append(item)
        return tuple(aliases)

    def _validate_default(self, default: Any) -> Any:
        if default is not MISSING and is_composite(default):
            raise ConfigError(
                "Composite values cannot be used in default, wrap them in a callable."
            )
        return default

    def _validate_callable(self, value: Any, prop: str) -> Any:
        if value is not None and not callable(value):
            raise ConfigError(f"'{prop}' must be callable, got {type(value).__name__}")
        return value

    def add_opt(self, name: str, **config: Any) -> OptionSpec:
        """
        Declare an option.

        Args:
            name (str): Canonical option name.
            **config: Option properties:
                alias (str | Iterable[str]): Alternate names.
                list (bool): Take comma separated values and accumulate them.
                bool (bool): Take no value; a bare flag negates the default.
                default (Any): Fallback value or zero-argument producer.
                check (Callable | re.Pattern | str): Predicate, compiled
                    pattern, or one of "file", "dir", "number".
                transform (Callable): Applied to every value before validation.
                trigger (Callable): Called as `trigger(owner, name, value, options)`.
                description (str): Help text.

        Returns:
            OptionSpec: The registered spec.

        Raises:
            ConfigError: If the name is taken, a property is unknown, or the
                properties are an invalid combination.
        """
        self._validate_name(name, SpecKind.OPTION)
        if name in self.options:
            raise ConfigError(f"opt '{name}' already defined")
        self._validate_properties(config, VALID_OPT_PARAMS, "opt")

        is_bool = bool(config.get("bool"))
        is_list = bool(config.get("list"))
        check = config.get("check")
        transform = config.get("transform")

        if is_bool and check is not None:
            raise ConfigError("'check' cannot be used with 'bool'")
        if is_bool and transform is not None:
            raise ConfigError("'transform' cannot be used with 'bool'")
        if is_list and is_bool:
            raise ConfigError("opt properties 'list' and 'bool' are mutually exclusive")

        default = self._validate_default(config.get("default", MISSING))
        if check is not None:
            get_check_type(check)

        spec = OptionSpec(
            name=name,
            kind=OptionKind.from_flags(is_list=is_list, is_bool=is_bool),
            aliases=self._normalize_aliases(
                name, config.get("alias"), self.options, "opt"
            ),
            default=default,
            check=check,
            transform=self._validate_callable(transform, "transform"),
            trigger=self._validate_callable(config.get("trigger"), "trigger"),
            description=config.get("description") or NO_DESCRIPTION,
        )

        for key in spec.names:
            self.options[key] = spec
        self.option_specs[name] = spec
        logger.debug("Registered %s", spec)
        return spec

    def add_arg(
        self, name: str, handler: Callable[..., Any] | None = None, **config: Any
    ) -> ArgumentSpec:
        """
        Declare a positional command.

        Args:
            name (str): Canonical command name.
            handler (Callable | None): Called as
                `handler(owner, name, options, *operands)`. May be passed by
                keyword.
            **config: Argument properties: `alias`, `description`.

        Returns:
            ArgumentSpec: The registered spec.

        Raises:
            ConfigError: If the name is taken, a property is unknown, or no
                callable handler is supplied.
        """
        self._validate_name(name, SpecKind.ARGUMENT)
        if name in self.arguments:
            raise ConfigError(f"arg '{name}' already defined")
        self._validate_properties(config, VALID_ARG_PARAMS, "arg")

        if not handler:
            raise ConfigError("You must provide a handler")
        self._validate_callable(handler, "handler")

        spec = ArgumentSpec(
            name=name,
            handler=handler,
            aliases=self._normalize_aliases(
                name, config.get("alias"), self.arguments, "arg"
            ),
            description=config.get("description") or NO_DESCRIPTION,
        )

        for key in spec.names:
            self.arguments[key] = spec
        self.argument_specs[name] = spec
        logger.debug("Registered %s", spec)
        return spec

    def describe(self, kind: SpecKind | str, name: str, text: str | None = None) -> str:
        """
        Return the description of a declaration, replacing it first if `text`
        is given.

        Raises:
            SpecNotFoundError: If `name` is not a declared name or alias of `kind`.
        """
        kind = SpecKind(kind)
        specs = self._get_specs(kind)
        if name not in specs:
            raise SpecNotFoundError(f"No such {kind} '{name}'")
        if text:
            specs[name].description = text
        return specs[name].description

    def resolve(self, kind: SpecKind | str, key: str) -> str:
        """Resolve a possibly abbreviated name to its canonical name."""
        return resolve(kind, self._get_specs(kind), key)

    def suggest(self, kind: SpecKind | str, prefix: str = "") -> list[str]:
        """
        Return every name and alias of `kind` starting with `prefix`, sorted.

        Used for interactive completion.
        """
        specs = self._get_specs(kind)
        return sorted(key for key in specs if key.startswith(prefix))

    def parse_cli(self, tokens: Iterable[str]) -> ParseResult:
        """Tokenize `tokens` without applying defaults, transforms or checks."""
        return parse_cli(self, tokens)

    def parse(self, tokens: Iterable[str]) -> ParseResult:
        """Parse `tokens` into unresolved positional tokens and final options."""
        return dispatch.parse(self, tokens)

    def process(self, owner: Any, tokens: Iterable[str]) -> Any:
        """Parse `tokens` and dispatch to the selected command for `owner`."""
        return dispatch.process(self, owner, tokens)

    def get_usage(self) -> str:
        """Return the plain text usage listing of options and commands."""
        return usage.get_usage(self)

    def render_usage(self, console: Console | None = None) -> None:
        """Print the usage listing with Rich."""
        usage.render_usage(self, console)

    def __str__(self) -> str:
        """Return a human-readable summary of the registry state."""
        return (
            f"Registry(options={len(self.option_specs)}, "
            f"option_keys={len(self.options)}, "
            f"arguments={len(self.argument_specs)}, "
            f"argument_keys={len(self.arguments)})"
        )

    def __repr__(self) -> str:
        return str(self)
