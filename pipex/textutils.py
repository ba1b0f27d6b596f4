"""Small text helpers: word splitting, integer parsing and formatting, trimming."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def format_int(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``.

    When every character of ``text`` belongs to ``charset``, each side is
    trimmed by half the length, so an odd-length text keeps its middle
    character.
    """
    if not charset:
        return text
    if all(char in charset for char in text):
        half = len(text) // 2
        return text[half:len(text) - half]
    return text.lstrip(charset).rstrip(charset)


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``limit``
    characters of ``haystack``, or ``None``. An empty needle matches at 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index == -1 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]