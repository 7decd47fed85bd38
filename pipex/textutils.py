"""String helpers used for parsing command lines and environment values."""

from __future__ import annotations

from itertools import zip_longest

_LONG_MAX = 9223372036854775807
_WHITESPACE = "\t\n\v\f\r "


def _to_c_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    On overflow of a 64-bit accumulator the result is -1 for positive
    input and 0 for negative input. The result wraps to a 32-bit int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        digit = ord(char) - ord("0")
        if result > (_LONG_MAX - digit) // 10:
            return 0 if sign == -1 else -1
        result = result * 10 + digit
    return _to_c_int(result * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    if not separator:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` inside the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None when there is none.
    An empty needle matches at index 0.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue=""):
        if a != b:
            return (ord(a) if a else 0) - (ord(b) if b else 0)
    return 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign gives the ordering."""
    if count <= 0:
        return 0
    return _compare(first[:count], second[:count])


def strcmp(first: str | None, second: str) -> int:
    """Compare two strings; a missing first string compares as 1."""
    if first is None:
        return 1
    return _compare(first, second)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]