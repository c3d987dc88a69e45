import io

import pytest

from renderer import render, write


def test_line_break_after_every_row():
    assert render("abcdef", 3) == "abc\ndef\n"


def test_single_column():
    assert render("xyz", 1) == "x\ny\nz\n"


def test_single_row():
    assert render(" {", 2) == " {\n"


def test_blank_glyphs_are_kept():
    assert render("    ", 2) == "  \n  \n"


def test_empty():
    assert render("", 0) == ""
    assert render("", 5) == ""


def test_non_positive_width():
    with pytest.raises(ValueError):
        render("ab", 0)


def test_write_to_stream():
    out = io.StringIO()
    write("ab\n", out)
    assert out.getvalue() == "ab\n"


def test_write_defaults_to_stdout(capsys):
    write("hello\n")
    assert capsys.readouterr().out == "hello\n"
