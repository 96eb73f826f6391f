"""Turning command-line arguments into the list of numbers for stack a."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_arguments(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and return all the words in order.

    An argument that is empty or made only of spaces is rejected.
    """
    words: list[str] = []
    for arg in args:
        if not arg.strip(" "):
            raise InputError()
        words.extend(word for word in arg.split(" ") if word)
    return words


def parse_number(token: str) -> int:
    """Read one word as a decimal integer that fits in 32 signed bits."""
    if not _NUMBER.fullmatch(token):
        raise InputError()
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def parse_args(args: Iterable[str]) -> list[int]:
    """Parse the arguments into distinct integers, keeping their order."""
    values: list[int] = []
    seen: set[int] = set()
    for word in split_arguments(args):
        value = parse_number(word)
        if value in seen:
            raise InputError()
        seen.add(value)
        values.append(value)
    return values