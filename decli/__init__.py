"""
Decli CLI Declarations

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    AmbiguityError,
    ConfigError,
    DecliError,
    MissingValueError,
    ParseError,
    SpecNotFoundError,
    UnknownNameError,
    ValidationError,
)
from .logger import logger
from .parser import OptionKind, ParseResult, Registry, SpecKind
from .program import Program

__all__ = [
    "AmbiguityError",
    "ConfigError",
    "DecliError",
    "MissingValueError",
    "OptionKind",
    "ParseError",
    "ParseResult",
    "Program",
    "Registry",
    "SpecKind",
    "SpecNotFoundError",
    "UnknownNameError",
    "ValidationError",
    "logger",
]
