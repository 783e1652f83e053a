import os

import pytest

from pushswap.line_reader import LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    opened = []

    def _open(content: bytes, name="data.txt"):
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        os.close(fd)


def test_reads_lines_with_newlines(open_file):
    fd = open_file(b"one\ntwo\nthree")
    reader = LineReader(fd)
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() == "three"
    assert reader.read_line() is None


def test_empty_file_gives_none(open_file):
    fd = open_file(b"")
    assert LineReader(fd).read_line() is None


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 7, 1000])
def test_lines_join_back_to_content(open_file, buffer_size):
    content = "pa\npb\n\nrra\nlong line with words\nend\n"
    fd = open_file(content.encode())
    lines = list(LineReader(fd, buffer_size))
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines)
    assert len(lines) == content.count("\n")


def test_iteration_stops_at_end(open_file):
    fd = open_file(b"a\nb\n")
    reader = LineReader(fd, 1)
    assert list(reader) == ["a\n", "b\n"]
    assert reader.read_line() is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0, 0)


def test_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_closed_descriptor_raises(tmp_path):
    path = tmp_path / "x.txt"
    path.write_bytes(b"abc\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).read_line()


def test_get_next_line_interleaves_descriptors(open_file):
    first = open_file(b"a1\na2\n", "first.txt")
    second = open_file(b"b1\nb2\n", "second.txt")
    assert get_next_line(first) == "a1\n"
    assert get_next_line(second) == "b1\n"
    assert get_next_line(first) == "a2\n"
    assert get_next_line(second) == "b2\n"
    assert get_next_line(first) is None
    assert get_next_line(second) is None


def test_get_next_line_through_pipe():
    read_end, write_end = os.pipe()
    os.write(write_end, b"sa\nrr")
    os.close(write_end)
    try:
        assert get_next_line(read_end) == "sa\n"
        assert get_next_line(read_end) == "rr"
        assert get_next_line(read_end) is None
    finally:
        os.close(read_end)