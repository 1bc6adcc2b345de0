"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MAX = 2147483647
INT_MIN = -2147483648
BASE_VALUE = 0

_NUMBER_PREFIX = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_SIGNS = ("+", "-")


class ParseError(ValueError):
    """Raised when the arguments do not form a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_sign(ch: str) -> bool:
    return ch in _SIGNS


def check_number(text: str) -> bool:
    """Return True if the text passes the character check.

    Spaces and a sign not followed by another sign are accepted, and the
    character right after them is passed over unchecked. Any other
    character must be a digit not followed by a sign.
    """
    i = 0
    while i < len(text):
        ch = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if ch == " " or (_is_sign(ch) and not _is_sign(nxt)):
            i += 1
        elif (
            not _is_digit(ch)
            or (_is_digit(ch) and _is_sign(nxt))
            or (_is_sign(ch) and _is_sign(nxt))
        ):
            return False
        i += 1
    return True


def _leading_number(text: str) -> tuple[int, str]:
    match = _NUMBER_PREFIX.match(text)
    sign = -1 if match.group(1) == "-" else 1
    return sign, match.group(2)


def overflows_int(text: str) -> bool:
    """Return True if the leading number of the text leaves the int range."""
    sign, digits = _leading_number(text)
    digits = digits.lstrip("0")
    if len(digits) > len(str(INT_MAX)) + 1:
        return True
    value = int(digits) if digits else 0
    limit = INT_MAX if sign == 1 else -INT_MIN
    return value > limit


def atoi(text: str) -> int:
    """Read the leading number of the text as a 32-bit signed integer."""
    sign, digits = _leading_number(text)
    result = 0
    for ch in digits:
        result = (result * 10 + int(ch)) % 2**32
    result = (result * sign) % 2**32
    return result - 2**32 if result > INT_MAX else result


def split_words(text: str, separator: str) -> list[str]:
    """Split the text on the separator, dropping empty words."""
    return [word for word in text.split(separator) if word]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Build stack a from the command-line arguments.

    A single argument is split on spaces. The stack always begins with a
    base entry of 0, so 0 counts as a duplicate among the arguments.
    Raises ParseError on any invalid input.
    """
    args = list(args)
    if not args:
        raise ParseError()
    if len(args) == 1:
        text = args[0]
        if not text or not check_number(text) or overflows_int(text):
            raise ParseError()
        words = split_words(text, " ")
    else:
        words = args

    stack = [BASE_VALUE]
    seen = {BASE_VALUE}
    for word in words:
        if not check_number(word) or overflows_int(word):
            raise ParseError()
        number = atoi(word)
        if number in seen:
            raise ParseError()
        seen.add(number)
        stack.append(number)
    return stack