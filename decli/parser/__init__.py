"""
Decli CLI Declarations

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec
from .checks import CheckType, validate
from .dispatch import process
from .option import OptionSpec
from .option_kind import OptionKind
from .parser_types import MISSING, ParseResult, SpecKind
from .registry import Registry
from .resolver import resolve
from .tokenizer import parse_cli
from .usage import get_usage, render_usage

__all__ = [
    "ArgumentSpec",
    "CheckType",
    "MISSING",
    "OptionKind",
    "OptionSpec",
    "ParseResult",
    "Registry",
    "SpecKind",
    "get_usage",
    "parse_cli",
    "process",
    "render_usage",
    "resolve",
    "validate",
]
