"""Reading the command-line arguments into a list of distinct integers."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_SIGNIFICANT_DIGITS = 10


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def skip_spaces(text: str) -> str:
    """Return ``text`` without its leading space characters."""
    return text.lstrip(" ")


def parse_long(text: str) -> int:
    """Read an optional sign and the digits that follow, after leading spaces.

    Reading stops at the first character that is not a digit; no digits give 0.
    """
    text = skip_spaces(text)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    number = 0
    for char in text:
        if not ("0" <= char <= "9"):
            break
        number = number * 10 + int(char)
    return sign * number


def is_invalid_number(text: str) -> bool:
    """Tell whether ``text`` is not an acceptable integer argument.

    Leading spaces and a sign are allowed, leading zeros are ignored, and at
    most ten further digits may follow, each of which may be trailed by spaces.
    """
    text = skip_spaces(text)
    if text[:1] in ("+", "-"):
        text = text[1:]
    if not text:
        return True
    text = text.lstrip("0")
    count = 0
    while text:
        if not ("0" <= text[0] <= "9"):
            return True
        text = skip_spaces(text[1:])
        count += 1
        if count > _MAX_SIGNIFICANT_DIGITS:
            return True
    return False


def count_words(text: str, sep: str) -> int:
    """Count the runs of characters other than ``sep`` in ``text``."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_number(text: str) -> int:
    """Turn one argument into an integer in the 32-bit signed range."""
    if is_invalid_number(text):
        raise ParseError(f"not a valid integer: {text!r}")
    value = parse_long(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Read every argument, splitting those that hold several words.

    Raises ParseError on a malformed number, a value out of range or a
    repeated value.
    """
    values: list[int] = []
    seen: set[int] = set()

    def add(word: str) -> None:
        value = parse_number(word)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)

    for arg in args:
        if count_words(arg, " ") > 1:
            for word in split_words(arg, " "):
                add(word)
        else:
            add(arg)
    return values


def normalize(values: Iterable[int]) -> list[int]:
    """Replace each value with its rank, from 1 for the smallest to n."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    rank = {value: position for position, value in enumerate(sorted(values), start=1)}
    return [rank[value] for value in values]