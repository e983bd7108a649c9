import io

import pytest

from coquille.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text_verbatim():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_empty_text_is_just_newline():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 5, -5, 10, 2147483647, -99])
def test_put_nbr_round_trip(number):
    buf = io.StringIO()
    put_nbr(number, buf)
    assert int(buf.getvalue()) == number


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("3", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_endl("def")
    put_char("!")
    assert capsys.readouterr().out == "abcdef\n!"