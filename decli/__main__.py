"""
Decli CLI Declarations

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""
from __future__ import annotations

import logging
import shlex
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Sequence

from prompt_toolkit import PromptSession
from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape

from decli.completer import DecliCompleter
from decli.config import find_decli_config, read_config
from decli.console import console
from decli.exceptions import DecliError
from decli.logger import logger
from decli.parser.registry import Registry
from decli.program import Program
from decli.utils import get_program_invocation, setup_logging


class ConfiguredProgram(Program):
    """
    Base for programs declared in a configuration file.

    Use `from_registry()`: it creates a subclass holding the loaded registry,
    so class-level helpers such as `render_usage()` see the declarations.
    """

    name: str = "decli"

    @classmethod
    def from_registry(
        cls, registry: Registry, name: str | None = None
    ) -> ConfiguredProgram:
        name = name or get_program_invocation()
        program_cls = type(cls.__name__, (cls,), {"registry": registry, "name": name})
        return program_cls()


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="decli",
        description="Run a command line program declared in a YAML or TOML file.",
        epilog="Put -- before the declared program's own options, e.g. decli -c app.yaml -- -v run.",
    )
    parser.add_argument("-c", "--config", type=Path, help="Path to the declaration file.")
    parser.add_argument(
        "--usage", action="store_true", help="Show the declared options and commands."
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read command lines from an interactive prompt with completion.",
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Logging output mode."
    )
    parser.add_argument("--log-file", default=None, help="Also log to this file.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging on the console."
    )
    parser.add_argument("tokens", nargs=REMAINDER, help="Command line to process.")
    return parser


def print_result(result: Any) -> None:
    if result is None:
        return
    if isinstance(result, (list, tuple)):
        for item in result:
            console.print(escape(str(item)))
    elif isinstance(result, str):
        console.print(escape(result))
    else:
        console.print(result)


def run_once(program: ConfiguredProgram, tokens: Sequence[str]) -> int:
    try:
        print_result(program.process_cli(*tokens))
    except DecliError as error:
        console.print(f"[error]{escape(str(error))}[/]")
        return 1
    return 0


def run_interactive(program: ConfiguredProgram) -> int:
    session: PromptSession = PromptSession(
        message=f"{program.name} > ",
        completer=DecliCompleter(program.get_registry()),
        complete_while_typing=False,
    )
    while True:
        try:
            text = session.prompt()
        except (EOFError, KeyboardInterrupt):
            return 0
        try:
            tokens = shlex.split(text)
        except ValueError as error:
            console.print(f"[error]{escape(str(error))}[/]")
            continue
        if tokens:
            run_once(program, tokens)


def main(argv: Sequence[str] | None = None) -> int:
    args: Namespace = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        log_filename=args.log_file,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    config_path = args.config or find_decli_config()
    if not config_path:
        console.print("[error]No declaration file found. Use --config PATH.[/]")
        return 1

    try:
        config = read_config(config_path)
        program = ConfiguredProgram.from_registry(config.to_registry(), config.program)
    except (DecliError, PydanticValidationError, ValueError, OSError) as error:
        logger.debug("Failed to load '%s'", config_path, exc_info=True)
        console.print(f"[error]Invalid declaration file '{config_path}':[/]")
        console.print(escape(str(error)))
        return 1

    if args.usage:
        header = f"usage: {program.name} [OPTIONS] [COMMAND] [ARGS]"
        console.print(f"[bold]{escape(header)}[/]\n")
        program.render_usage(console)
        return 0

    if args.interactive:
        return run_interactive(program)

    tokens = args.tokens
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]
    return run_once(program, tokens)


if __name__ == "__main__":
    sys.exit(main())
