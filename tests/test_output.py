import io

import pytest

from cub3d.output import (
    dprintf,
    format_hex,
    format_number,
    format_octal,
    format_pointer,
    format_string,
    format_unsigned,
    format_upper_hex,
    printf,
    put_endl,
    render_format,
)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_format_number_round_trip(n):
    assert int(format_number(n)) == n


def test_format_number_min_int():
    assert format_number(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_format_number_out_of_range(n):
    with pytest.raises(OverflowError):
        format_number(n)


@pytest.mark.parametrize("n", [0, 9, 10, 2**32 - 1])
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_rejects_negative():
    with pytest.raises(OverflowError):
        format_unsigned(-1)


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF, 2**64 - 1])
def test_format_hex_round_trip(n):
    text = format_hex(n)
    assert int(text, 16) == n
    assert text == text.lower()


@pytest.mark.parametrize("n", [0, 10, 171, 0xCAFE])
def test_format_upper_hex_only_last_digit_upper(n):
    text = format_upper_hex(n)
    assert text.lower() == format_hex(n)
    assert text[:-1] == format_hex(n)[:-1]
    assert text[-1] == text[-1].upper()


@pytest.mark.parametrize("n", [0, 7, 8, 511, 123456])
def test_format_octal_round_trip(n):
    assert int(format_octal(n), 8) == n


def test_format_octal_rejects_negative():
    with pytest.raises(ValueError):
        format_octal(-1)


def test_format_pointer():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"
    text = format_pointer(0x1234ABCD)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1234ABCD


def test_format_string():
    assert format_string(None) == "(null)"
    assert format_string("wall") == "wall"


def test_render_plain_text():
    assert render_format("hello world") == "hello world"


def test_render_conversions_use_arguments():
    assert render_format("%d|%i|%s|%c", 42, -3, "map", "N") == "42|-3|map|N"
    assert render_format("%c", ord("Z")) == "Z"


def test_render_percent_and_unknown():
    assert render_format("100%%") == "100%"
    assert render_format("%q") == "%q"


def test_render_trailing_percent_stops_output():
    assert render_format("ab%") == "ab"


def test_render_null_values():
    assert render_format("%s %p", None, None) == "(null) (nil)"


def test_render_int_wraps_to_32_bits():
    assert render_format("%d", 2**31) == "-2147483648"
    assert int(render_format("%u", -1)) == 2**32 - 1
    assert int(render_format("%x", -1), 16) == 2**32 - 1


def test_render_hex_matches_helpers():
    assert render_format("%x", 0xBEEF) == format_hex(0xBEEF)
    assert render_format("%X", 0xBEEF) == format_upper_hex(0xBEEF)


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render_format("%d")


def test_dprintf_writes_and_counts():
    stream = io.StringIO()
    count = dprintf(stream, "x=%d y=%s", 8, "eight")
    assert stream.getvalue() == "x=8 y=eight"
    assert count == len(stream.getvalue())


def test_printf_writes_stdout(capsys):
    count = printf("input %X\n", 4)
    out = capsys.readouterr().out
    assert out == "input 4\n"
    assert count == len(out)


def test_put_endl():
    stream = io.StringIO()
    assert put_endl("CUB3D", stream) == len("CUB3D") + 1
    put_endl(None, stream)
    assert stream.getvalue() == "CUB3D\n(null)\n"