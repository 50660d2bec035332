import os

import pytest

from bytekit.numbers import INT_MAX, INT_MIN
from bytekit.output import put_char, put_endl, put_nbr, put_str


class _Sink:
    """A file descriptor backed by a temporary file, readable after writes."""

    def __init__(self, path):
        self.path = path
        self.fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC)

    def contents(self):
        return self.path.read_bytes()

    def close(self):
        os.close(self.fd)


@pytest.fixture
def sink(tmp_path):
    target = _Sink(tmp_path / "out.bin")
    yield target
    target.close()


def test_put_char_string(sink):
    put_char("x", sink.fd)
    assert sink.contents() == b"x"


def test_put_char_byte_value(sink):
    put_char(65, sink.fd)
    assert sink.contents() == bytes([65])


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_char_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        put_char(256, 1)


def test_put_str_writes_text(sink):
    put_str("hello world", sink.fd)
    assert sink.contents() == b"hello world"


def test_put_str_none_writes_nothing(sink):
    put_str(None, sink.fd)
    assert sink.contents() == b""


def test_put_str_empty(sink):
    put_str("", sink.fd)
    assert sink.contents() == b""


def test_put_endl_appends_newline(sink):
    put_endl("line", sink.fd)
    assert sink.contents() == b"line\n"


def test_put_endl_none_writes_nothing(sink):
    put_endl(None, sink.fd)
    assert sink.contents() == b""


@pytest.mark.parametrize("n", [0, 5, -5, 42, -100, 123456, INT_MAX, INT_MIN])
def test_put_nbr_writes_decimal(sink, n):
    put_nbr(n, sink.fd)
    assert sink.contents() == str(n).encode("ascii")


def test_put_nbr_minimum(sink):
    put_nbr(-2147483648, sink.fd)
    assert sink.contents() == b"-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(INT_MAX + 1, 1)


def test_large_string_written_fully(sink):
    text = "ab" * 10000
    put_str(text, sink.fd)
    assert sink.contents() == text.encode("ascii")