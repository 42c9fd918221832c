import io

import pytest

from minitalk.printf import (
    BASE10,
    BASE16_MAJ,
    BASE16_MIN,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
    printf,
    put_line,
    put_number,
)


def test_plain_text_passes_through():
    assert format_string("Server is ready to listen\n") == "Server is ready to listen\n"


def test_decimal_conversion():
    assert format_string("This server's ID is %d\n", 4242) == "This server's ID is 4242\n"


def test_i_matches_d():
    assert format_string("%i", -17) == format_string("%d", -17)


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_string_and_null():
    assert format_string("Message received : %s\n", "hi") == "Message received : hi\n"
    assert format_string("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_string("%q%d", 5) == "5"


def test_trailing_percent_is_error():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_missing_argument_is_error():
    with pytest.raises(ValueError):
        format_string("%d %d", 1)


def test_int_min_is_fixed_text():
    assert format_int(-2147483648, BASE10) == "-2147483648"
    assert format_int(-2147483648, BASE16_MIN) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 9, 10, 123456, -1, -98765, 2147483647])
def test_format_int_round_trip(n):
    assert int(format_int(n, BASE10)) == n


@pytest.mark.parametrize("n", [0, 7, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    assert int(format_unsigned(n, BASE16_MIN), 16) == n
    assert format_unsigned(n, BASE16_MAJ) == format_unsigned(n, BASE16_MIN).upper()


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2**32 - 1
    assert int(format_unsigned(-5, BASE10)) == 2**32 - 5


def test_x_and_big_x_differ_only_in_case():
    assert format_string("%X", 48879) == format_string("%x", 48879).upper()


def test_pointer_nil():
    assert format_pointer(0, BASE16_MIN) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


@pytest.mark.parametrize("n", [1, 15, 16, 0x7FFF12345678])
def test_pointer_round_trip(n):
    text = format_pointer(n, BASE16_MIN)
    assert text.startswith("0x")
    assert int(text, 16) == n


def test_base_too_short_is_error():
    with pytest.raises(ValueError):
        format_unsigned(5, "0")


def test_printf_writes_and_counts(capsys):
    count = printf("pid %d: %s\n", 31, "ok")
    out = capsys.readouterr().out
    assert out == "pid 31: ok\n"
    assert count == len(out)


def test_put_number_round_trip():
    for n in (0, 5, -42, 2147483647, -2147483648):
        buf = io.StringIO()
        put_number(n, buf)
        assert int(buf.getvalue()) == n


def test_put_line_appends_newline():
    buf = io.StringIO()
    put_line("hello", buf)
    put_line("", buf)
    assert buf.getvalue() == "hello\n\n"


def test_put_line_defaults_to_stdout(capsys):
    put_line("x")
    assert capsys.readouterr().out == "x\n"