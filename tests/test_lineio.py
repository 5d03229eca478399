import io

import pytest

from cub3d.lineio import read_lines


def test_lines_keep_newlines():
    assert list(read_lines(io.StringIO("NO ./a.png\nSO ./b.png\n"))) == [
        "NO ./a.png\n",
        "SO ./b.png\n",
    ]


def test_last_line_without_newline():
    assert list(read_lines(io.StringIO("111\n101\n111"))) == ["111\n", "101\n", "111"]


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []


def test_blank_lines_are_kept():
    assert list(read_lines(io.StringIO("a\n\n\nb\n"))) == ["a\n", "\n", "\n", "b\n"]


def test_lines_longer_than_buffer():
    long_line = "1" * 57
    text = long_line + "\n" + long_line
    assert list(read_lines(io.StringIO(text))) == [long_line + "\n", long_line]


@pytest.mark.parametrize(
    "text",
    ["x", "\n", "abc\ndef\n", "0123456789\n0123456789", "a\n\nb\n\n\n"],
)
def test_join_reconstructs_input(text):
    assert "".join(read_lines(io.StringIO(text))) == text


def test_byte_stream_is_decoded():
    data = "F 220,100,0\nC é,1\n".encode("utf-8")
    assert list(read_lines(io.BytesIO(data))) == ["F 220,100,0\n", "C é,1\n"]


def test_multibyte_split_across_chunks():
    text = "ééééééééé\nend"
    data = text.encode("utf-8")
    assert "".join(read_lines(io.BytesIO(data))) == text


def test_read_error_ends_input():
    class Failing:
        def __init__(self):
            self.calls = 0

        def read(self, size):
            self.calls += 1
            if self.calls == 1:
                return "ab\ncd"
            raise OSError("boom")

    assert list(read_lines(Failing())) == ["ab\n", "cd"]