"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = frozenset("\t\n\v\f\r ")


class InputError(ValueError):
    """Raised when the arguments do not describe a stack of distinct integers."""


def parse_long(text: str) -> int:
    """Read a signed integer prefix, clamping to the 64-bit range on overflow.

    Leading whitespace is skipped, one sign is allowed, and reading stops at
    the first character that is not a digit.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    negative = False
    if index < len(text) and text[index] in "+-":
        negative = text[index] == "-"
        index += 1
    magnitude = 0
    limit = -LONG_MIN if negative else LONG_MAX
    while index < len(text) and "0" <= text[index] <= "9":
        magnitude = magnitude * 10 + ord(text[index]) - ord("0")
        if magnitude > limit:
            return LONG_MIN if negative else LONG_MAX
        index += 1
    return -magnitude if negative else magnitude


def is_allowed_token(text: str) -> bool:
    """Tell whether an argument is signed integers separated by single spaces."""
    was_number = False
    was_sign = False
    for char in text:
        if char in "+-" and not was_sign and not was_number:
            was_sign = True
        elif "0" <= char <= "9":
            was_number = True
        elif char == " ":
            if not was_number:
                return False
            was_sign = False
            was_number = False
        else:
            return False
    return was_number


def is_allowed_args(args: Iterable[str]) -> bool:
    """Tell whether every argument passes ``is_allowed_token``."""
    return all(is_allowed_token(arg) for arg in args)


def split_words(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter character, dropping empty pieces."""
    return [word for word in text.split(delimiter) if word]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read every number in the arguments, top of the stack first."""
    values: list[int] = []
    for arg in args:
        words = split_words(arg, " ")
        if not words:
            raise InputError(f"no numbers in argument {arg!r}")
        for word in words:
            value = parse_long(word)
            if not INT_MIN <= value <= INT_MAX:
                raise InputError(f"{word!r} is out of range")
            values.append(value)
    return values


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False