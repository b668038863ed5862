# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative base class for programs built on a `Registry`.

Each subclass of `Program` owns a fresh `Registry`, created when the class is
created and stored on the class as `registry`. Declarations are made through
class methods and the command line is processed on an instance, which is passed
as the owner to triggers and handlers. Subclasses of a `Program` subclass start
with an empty registry of their own unless they assign `registry` explicitly.

Example:
    class Files(Program):
        def sort_files(self, name, opts, *files):
            return sorted(files, reverse=opts.get("reverse", False))

    Files.opt("reverse", bool=True)
    Files.arg("sort", Files.sort_files, description="Sort the given files")

    Files().process_cli("-r", "sort", "b", "a")   # ["b", "a"]
"""
from __future__ import annotations

from typing import Any, Callable, ClassVar

from rich.console import Console

from decli.exceptions import ConfigError
from decli.parser.argument import ArgumentSpec
from decli.parser.option import OptionSpec
from decli.parser.parser_types import SpecKind
from decli.parser.registry import Registry


class Program:
    """
    Owner of a set of option and argument declarations.

    After `process_cli()` the final option map is available as `self.opts`.
    """

    registry: ClassVar[Registry]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "registry" not in cls.__dict__:
            cls.registry = Registry()

    def __init__(self) -> None:
        self.opts: dict[str, Any] = {}

    @classmethod
    def get_registry(cls) -> Registry:
        """
        Return the registry holding this class's declarations.

        Raises:
            ConfigError: If called on `Program` itself, which has no registry.
        """
        registry = getattr(cls, "registry", None)
        if registry is None:
            raise ConfigError(
                f"{cls.__name__} has no registry, declare options on a subclass"
            )
        return registry

    @classmethod
    def opt(cls, name: str, **config: Any) -> OptionSpec:
        """Declare an option, see `Registry.add_opt`."""
        return cls.get_registry().add_opt(name, **config)

    @classmethod
    def arg(
        cls, name: str, handler: Callable[..., Any] | None = None, **config: Any
    ) -> ArgumentSpec:
        """Declare a positional command, see `Registry.add_arg`."""
        return cls.get_registry().add_arg(name, handler, **config)

    @classmethod
    def command(cls, name: str, **config: Any) -> Callable[[Callable], Callable]:
        """
        Decorator form of `arg()`.

        The decorated function is registered as the handler and returned
        unchanged.
        """

        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            cls.get_registry().add_arg(name, handler, **config)
            return handler

        return decorator

    @classmethod
    def describe_opt(cls, name: str, text: str | None = None) -> str:
        return cls.get_registry().describe(SpecKind.OPTION, name, text)

    @classmethod
    def describe_arg(cls, name: str, text: str | None = None) -> str:
        return cls.get_registry().describe(SpecKind.ARGUMENT, name, text)

    @classmethod
    def usage(cls) -> str:
        return cls.get_registry().get_usage()

    @classmethod
    def render_usage(cls, console: Console | None = None) -> None:
        cls.get_registry().render_usage(console)

    def set_opts(self, opts: dict[str, Any]) -> None:
        """Store the option map of the last processed command line."""
        self.opts = opts

    def process_cli(self, *tokens: str) -> Any:
        """
        Process a command line with this instance as owner.

        Returns:
            Any: The option map, or the selected handler's result.
        """
        return self.get_registry().process(self, tokens)
