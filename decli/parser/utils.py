# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value helpers for Decli option parsing.

Functions:
- split_list_value: Split a list option value on commas.
- is_composite: Whether a default value is a mutable container.
"""
import re
from typing import Any

_LIST_SEPARATOR = re.compile(r"\s*,\s*")


def split_list_value(value: str) -> list[str]:
    """
    Split a list option value on commas, trimming whitespace around each item.

    Trailing empty items are dropped, so "a,b," yields ["a", "b"].

    Args:
        value (str): Raw value, e.g. "a, b,c".

    Returns:
        list[str]: The items in order.
    """
    items = _LIST_SEPARATOR.split(value.strip())
    while items and items[-1] == "":
        items.pop()
    return items


def is_composite(value: Any) -> bool:
    """Return True for mutable containers that must not be shared as defaults."""
    return isinstance(value, (list, dict, set, bytearray))
