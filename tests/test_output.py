import os

import pytest

from pushswap.output import put_char, put_line, put_number, put_str


def _capture(action):
    read_end, write_end = os.pipe()
    try:
        result = action(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        data = reader.read()
    return result, data


def test_put_char_string():
    count, data = _capture(lambda fd: put_char("c", fd))
    assert data == b"c"
    assert count == 1


def test_put_char_code():
    _, data = _capture(lambda fd: put_char(ord("z"), fd))
    assert data == b"z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_str_writes_text():
    count, data = _capture(lambda fd: put_str("Hello how", fd))
    assert data == b"Hello how"
    assert count == len("Hello how")


def test_put_str_skips_descriptor_zero():
    assert put_str("ignored", 0) == 0


def test_put_line_appends_newline():
    _, data = _capture(lambda fd: put_line("Error", fd))
    assert data == b"Error\n"


def test_put_line_skips_descriptor_zero():
    assert put_line("ignored", 0) == 0


@pytest.mark.parametrize("n", [0, 1233, -2147483648, 2147483647, -7])
def test_put_number_round_trip(n):
    _, data = _capture(lambda fd: put_number(n, fd))
    assert int(data.decode("ascii")) == n


def test_put_number_negative_has_sign():
    _, data = _capture(lambda fd: put_number(-5, fd))
    assert data.startswith(b"-")