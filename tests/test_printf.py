import io

import pytest

from ftformat.conversions import format_pointer
from ftformat.printf import printf, render


def test_render_percent_literal():
    assert render("%%") == "%"


def test_render_int_limits():
    assert render("%i", 2147483647) == "2147483647"
    assert render("%d", -2147483648) == "-2147483648"


def test_render_null_pointer():
    assert render("%p", None) == "(nil)"


def test_render_null_string():
    assert render("%s", None) == "(null)"


def test_render_empty_string_argument():
    assert render("%s", "") == ""


def test_render_hex_zero():
    assert render("%x", 0) == "0"


def test_render_plain_text_unchanged():
    assert render("no conversions here") == "no conversions here"


def test_render_mixed_sequence():
    result = render("%c|%s|%u|%X", "q", "word", 42, 0xABC)
    parts = result.split("|")
    assert parts[0] == "q"
    assert parts[1] == "word"
    assert int(parts[2]) == 42
    assert int(parts[3], 16) == 0xABC
    assert parts[3] == parts[3].upper()


def test_render_pointer_matches_conversion():
    assert render("at %p", 0x1000) == "at " + format_pointer(0x1000)


def test_render_unknown_conversion_consumes_nothing():
    assert render("a%qb%s", "c") == "abc"


def test_render_trailing_percent_ends_output():
    assert render("abc%") == "abc"


def test_render_extra_arguments_ignored():
    assert render("%s", "x", "y") == "x"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render("%d")


def test_render_requires_format():
    with pytest.raises(ValueError):
        render(None)


def test_render_rejects_non_string_format():
    with pytest.raises(TypeError):
        render(b"%d", 1)


def test_printf_writes_to_file_and_counts():
    buffer = io.StringIO()
    count = printf("%s=%d\n", "value", -12, file=buffer)
    assert buffer.getvalue() == render("%s=%d\n", "value", -12)
    assert count == len(buffer.getvalue())


def test_printf_counts_null_char():
    buffer = io.StringIO()
    assert printf("%c", 0, file=buffer) == 1
    assert buffer.getvalue() == "\0"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%%%s", "ok")
    out = capsys.readouterr().out
    assert out == "%ok"
    assert count == len(out)


def test_printf_requires_format():
    with pytest.raises(ValueError):
        printf(None, file=io.StringIO())