import io

import pytest

from cub3d.lines import LineReader, read_lines


def test_readline_text_stream():
    reader = LineReader(io.StringIO("one\ntwo\nthree"))
    assert reader.readline() == "one\n"
    assert reader.readline() == "two\n"
    assert reader.readline() == "three"
    assert reader.readline() is None


def test_readline_bytes_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"), buffer_size=1)
    assert reader.readline() == b"ab\n"
    assert reader.readline() == b"cd\n"
    assert reader.readline() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_iteration_reassembles_input(size):
    text = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_empty_stream_yields_nothing():
    assert list(LineReader(io.StringIO(""))) == []


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=0)


def test_read_lines_pads_with_none(tmp_path):
    path = tmp_path / "map"
    path.write_text("1111\n1001\n1111\n", encoding="utf-8")
    lines = read_lines(path, 5)
    assert lines == ["1111\n", "1001\n", "1111\n", None, None]


def test_read_lines_stops_at_count(tmp_path):
    path = tmp_path / "map"
    path.write_text("a\nb\nc\n", encoding="utf-8")
    assert read_lines(path, 2) == ["a\n", "b\n"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent", 3)