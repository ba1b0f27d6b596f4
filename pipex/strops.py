"""Character classification and low-level string and byte comparisons."""

from __future__ import annotations


def _code_at(text: str, index: int) -> int:
    """Code point at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def compare_prefix(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns 0 when they agree, otherwise the difference between the code
    points at the first position where they differ. A string that ends
    early compares as if followed by code point 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    end = min(limit, max(len(first), len(second)) + 1)
    for index in range(end):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def compare_bytes(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first ``limit`` bytes of two byte strings.

    Returns 0 when they agree, otherwise the difference between the first
    pair of bytes that differ.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if limit > len(first) or limit > len(second):
        raise ValueError("limit exceeds the length of the data")
    for left, right in zip(first[:limit], second[:limit]):
        if left != right:
            return left - right
    return 0


def find_char(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` finds the terminating position, ``len(text)``.
    """
    char = _single_char(char)
    if char == "\0":
        index = text.find(char)
        return len(text) if index == -1 else index
    index = text.find(char)
    return None if index == -1 else index


def rfind_char(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or ``None``.

    Searching for ``"\\0"`` finds the terminating position, ``len(text)``.
    """
    char = _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def find_byte(data: bytes, value: int, limit: int) -> int | None:
    """Return the index of ``value`` (taken modulo 256) within the first
    ``limit`` bytes of ``data``, or ``None``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if limit > len(data):
        raise ValueError("limit exceeds the length of the data")
    index = bytes(data).find(value & 0xFF, 0, limit)
    return None if index == -1 else index


def is_alpha(code: int) -> bool:
    """True for ASCII letters."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(code: int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII, space included."""
    return 31 < code < 127


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; other codes unchanged."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; other codes unchanged."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code