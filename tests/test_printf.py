import io

import pytest

from pipex.printf import format_printf, printf


def test_plain_text_is_copied():
    assert format_printf("plain text") == "plain text"


def test_decimal_round_trip():
    assert format_printf("%d", 42) == "42"
    assert format_printf("%i", -17) == "-17"


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_argument():
    assert format_printf("[%s]", "abc") == "[abc]"


def test_null_pointer():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


def test_pointer_round_trip():
    result = format_printf("%p", 4096)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 4096


def test_hex_round_trip_and_case():
    lower = format_printf("%x", 48879)
    upper = format_printf("%X", 48879)
    assert int(lower, 16) == 48879
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_char_from_code_and_string():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "z") == "z"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_consumes_char():
    assert format_printf("%q!") == "!"
    assert format_printf("%5d", 42) == "d"


def test_trailing_percent_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s-%d", "ab", 7, stream=stream)
    assert stream.getvalue() == "ab-7"
    assert count == len(stream.getvalue())