# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value checks for declared options.

An option's `check` is one of:

- a callable predicate: the value passes when `predicate(value)` is truthy
- a compiled regular expression: the value passes when the pattern is found in it
- "file": the value names an existing regular file
- "dir": the value names an existing directory
- "number": the value consists solely of ASCII digits

Every value of an option is checked (scalar values as a one element list) and
all failures are reported together in a single `ValidationError`.
"""
from __future__ import annotations

import os
import re
from enum import Enum
from typing import Any, Callable, Iterable

from decli.exceptions import ConfigError, ValidationError
from decli.logger import logger
from decli.parser.option import OptionSpec

_DIGITS = re.compile(r"[0-9]+")


class CheckType(Enum):
    """Type tag of an option check, reported in validation failures."""

    PREDICATE = "predicate"
    PATTERN = "pattern"
    FILE = "file"
    DIR = "dir"
    NUMBER = "number"

    @classmethod
    def builtin_tags(cls) -> tuple[str, ...]:
        return (cls.FILE.value, cls.DIR.value, cls.NUMBER.value)

    def __str__(self) -> str:
        return self.value


def get_check_type(check: Any) -> CheckType:
    """
    Classify a check declaration.

    Raises:
        ConfigError: If the check is not a predicate, a compiled pattern, or a
            builtin tag.
    """
    if isinstance(check, re.Pattern):
        return CheckType.PATTERN
    if callable(check):
        return CheckType.PREDICATE
    if isinstance(check, str) and check in CheckType.builtin_tags():
        return CheckType(check)
    raise ConfigError(f"'{check}' is not a valid value for 'check'")


def _is_file(value: Any) -> bool:
    return os.path.isfile(value)


def _is_dir(value: Any) -> bool:
    return os.path.isdir(value)


def _is_number(value: Any) -> bool:
    return _DIGITS.fullmatch(str(value)) is not None


def _get_predicate(check: Any, check_type: CheckType) -> Callable[[Any], Any]:
    if check_type is CheckType.PATTERN:
        return lambda value: check.search(str(value))
    if check_type is CheckType.PREDICATE:
        return check
    return {
        CheckType.FILE: _is_file,
        CheckType.DIR: _is_dir,
        CheckType.NUMBER: _is_number,
    }[check_type]


def validate(spec: OptionSpec, values: Iterable[Any]) -> None:
    """
    Check every value of `spec` against its declared check.

    Args:
        spec (OptionSpec): The option being validated.
        values (Iterable[Any]): Values after transformation.

    Raises:
        ValidationError: Naming the option, the check type and the failing
            values in encounter order.
    """
    if spec.check is None:
        return
    check_type = get_check_type(spec.check)
    predicate = _get_predicate(spec.check, check_type)
    bad = [value for value in values if not predicate(value)]
    if bad:
        logger.debug("Option '%s' failed %s check: %r", spec.name, check_type, bad)
        raise ValidationError(spec.name, check_type.value, bad)
