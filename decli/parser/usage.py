# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage rendering for a `Registry`.

Options and commands are each listed once under their canonical name, sorted
alphabetically, with columns sized to the longest canonical name:

    Options:
        -bar  XXX,...    No Description.
        -foo  XXX        The foo file

    Commands:
        show    Show things

Scalar options show an `XXX` value placeholder, list options `XXX,...`, and
boolean options none.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from decli.console import console as default_console

if TYPE_CHECKING:
    from decli.parser.registry import Registry


def _width(names) -> int:
    return max((len(name) for name in names), default=0)


def get_option_lines(registry: Registry) -> list[tuple[str, str, str]]:
    """Return (name, value placeholder, description) per option, sorted by name."""
    return [
        (name, spec.get_value_text(), spec.description)
        for name, spec in sorted(registry.option_specs.items())
    ]


def get_argument_lines(registry: Registry) -> list[tuple[str, str]]:
    """Return (name, description) per argument, sorted by name."""
    return [
        (name, spec.description) for name, spec in sorted(registry.argument_specs.items())
    ]


def get_usage(registry: Registry) -> str:
    """
    Render the usage listing as plain text.

    Returns:
        str: "Options:" and "Commands:" sections separated by a blank line.
    """
    opt_len = _width(registry.option_specs)
    arg_len = _width(registry.argument_specs)

    options = "\n".join(
        f"    -{name:<{opt_len}} {value:<7}    {description}"
        for name, value, description in get_option_lines(registry)
    )
    commands = "\n".join(
        f"    {name:<{arg_len}}    {description}"
        for name, description in get_argument_lines(registry)
    )
    return f"Options:\n{options}\n\nCommands:\n{commands}\n\n"


def render_usage(registry: Registry, console: Console | None = None) -> None:
    """Print the usage listing with Rich styling."""
    console = console or default_console
    opt_len = _width(registry.option_specs)
    arg_len = _width(registry.argument_specs)

    console.print(Text("Options:", style="usage.header"))
    for name, value, description in get_option_lines(registry):
        console.print(
            Text.assemble(
                "    -",
                (f"{name:<{opt_len}}", "usage.name"),
                " ",
                (f"{value:<7}", "usage.value"),
                "    ",
                (description, "usage.description"),
            )
        )

    console.print()
    console.print(Text("Commands:", style="usage.header"))
    for name, description in get_argument_lines(registry):
        console.print(
            Text.assemble(
                "    ",
                (f"{name:<{arg_len}}", "usage.name"),
                "    ",
                (description, "usage.description"),
            )
        )
