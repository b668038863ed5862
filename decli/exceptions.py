# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Decli.

Registration problems are reported with `ConfigError` as soon as the offending
declaration is made. Everything that can go wrong while turning a command line
into options and a dispatched command derives from `ParseError`, so callers can
catch a single type around `process()`.

Exception Hierarchy:
- DecliError
    ├── ConfigError
    ├── SpecNotFoundError (also a LookupError)
    └── ParseError
        ├── AmbiguityError
        ├── UnknownNameError
        ├── MissingValueError
        └── ValidationError

None of these are caught inside the library; they propagate to the caller of
the registration or parsing call that raised them.
"""
from __future__ import annotations

from typing import Any, Sequence


class DecliError(Exception):
    """Base exception for Decli."""


class ConfigError(DecliError):
    """Exception raised when an option or argument declaration is invalid."""


class SpecNotFoundError(DecliError, LookupError):
    """Exception raised when a named option or argument is not registered."""


class ParseError(DecliError):
    """Exception raised when a command line cannot be processed."""


class AmbiguityError(ParseError):
    """Exception raised when a partial name matches more than one declaration."""

    def __init__(self, kind: str, key: str, candidates: Sequence[str]):
        self.kind = kind
        self.key = key
        self.candidates = sorted(candidates)
        super().__init__(
            f"partial {kind} '{key}' is ambiguous, could be: "
            f"{', '.join(self.candidates)}"
        )


class UnknownNameError(ParseError):
    """Exception raised when a name matches no declaration."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"unknown {kind} '{key}'")


class MissingValueError(ParseError):
    """Exception raised when an option expecting a value is the last token."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"option '{option}' requires a value")


class ValidationError(ParseError):
    """Exception raised when option values fail their check."""

    def __init__(self, option: str, check_type: str, values: Sequence[Any]):
        self.option = option
        self.check_type = check_type
        self.values = list(values)
        super().__init__(
            f"Validation Failed for '{option}={check_type}': "
            f"{', '.join(str(value) for value in self.values)}"
        )
