import pytest

from solong.printf import format_printf, ft_printf


@pytest.mark.parametrize("number", [0, 7, -1, 42, -2147483648, 2147483647])
def test_decimal_matches_str(number):
    assert format_printf("%d", number) == str(number)
    assert format_printf("%i", number) == str(number)


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps():
    assert format_printf("%u", -1) == str(2**32 - 1)
    assert format_printf("%u", 12) == "12"


@pytest.mark.parametrize("number", [0, 9, 15, 16, 255, 0xDEADBEEF])
def test_hex_matches_format(number):
    assert format_printf("%x", number) == format(number, "x")
    assert format_printf("%X", number) == format(number, "X")


def test_pointer():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0x1A2B) == "0x" + format(0x1A2B, "x")


def test_string_and_null():
    assert format_printf("%s!", "hello") == "hello!"
    assert format_printf("%s", None) == "(null)"


def test_char():
    assert format_printf("%c%c", "a", ord("b")) == "ab"


def test_percent_and_trailing_percent():
    assert format_printf("100%%") == "100%"
    assert format_printf("end%") == "end%"


def test_unknown_conversion_dropped():
    assert format_printf("a%qb") == "ab"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_ft_printf_writes_and_counts(capsys):
    count = ft_printf("Your score is %d\n", 5)
    captured = capsys.readouterr().out
    assert captured == format_printf("Your score is %d\n", 5)
    assert count == len(captured)