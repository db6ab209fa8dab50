import io

import pytest

from hdfskit.cli.section import (
    TAIL_SEARCH_SIZE,
    copy_bytes,
    head_lines,
    resolve_section_limits,
    tail_lines,
)

DATA = b"a\nb\nc\n"


def test_limits_default_to_ten_lines():
    assert resolve_section_limits(None, None) == (10, None)


def test_limits_both_raises():
    with pytest.raises(ValueError, match="You can't specify both -n and -c."):
        resolve_section_limits(3, 4)


def test_limits_pass_through():
    assert resolve_section_limits(5, None) == (5, None)
    assert resolve_section_limits(None, 7) == (None, 7)


def test_head_lines():
    out = io.BytesIO()
    written = head_lines(io.BytesIO(DATA), 2, out)
    assert out.getvalue() == DATA[:4]
    assert written == 4


def test_head_more_lines_than_file():
    out = io.BytesIO()
    written = head_lines(io.BytesIO(DATA), 50, out)
    assert out.getvalue() == DATA
    assert written == len(DATA)


def test_head_zero_lines():
    out = io.BytesIO()
    written = head_lines(io.BytesIO(DATA), 0, out)
    assert out.getvalue() == b""
    assert written == 0


def test_head_matches_splitlines_on_large_input():
    data = b"".join(b"line %d\n" % i for i in range(30000))
    expected = b"".join(data.splitlines(keepends=True)[:12345])
    out = io.BytesIO()
    written = head_lines(io.BytesIO(data), 12345, out)
    assert out.getvalue() == expected
    assert written == len(expected)


def test_tail_lines():
    out = io.BytesIO()
    written = tail_lines(io.BytesIO(DATA), len(DATA), 2, out)
    assert out.getvalue() == DATA[2:]
    assert written == len(DATA) - 2


def test_tail_without_trailing_newline():
    data = b"a\nb\nc"
    out = io.BytesIO()
    written = tail_lines(io.BytesIO(data), len(data), 1, out)
    assert out.getvalue() == data[-1:]
    assert written == 1


def test_tail_more_lines_than_file():
    out = io.BytesIO()
    written = tail_lines(io.BytesIO(DATA), len(DATA), 50, out)
    assert out.getvalue() == DATA
    assert written == len(DATA)


def test_tail_across_windows():
    data = b"".join(b"row %05d\n" % i for i in range(10000))
    assert len(data) > 2 * TAIL_SEARCH_SIZE
    wanted = 3000
    expected = b"".join(data.splitlines(keepends=True)[-wanted:])
    out = io.BytesIO()
    written = tail_lines(io.BytesIO(data), len(data), wanted, out)
    assert out.getvalue() == expected
    assert written == len(expected)


def test_copy_bytes_from_start():
    out = io.BytesIO()
    written = copy_bytes(io.BytesIO(DATA), len(DATA), 3, False, out)
    assert out.getvalue() == DATA[:3]
    assert written == 3


def test_copy_bytes_from_end():
    out = io.BytesIO()
    written = copy_bytes(io.BytesIO(DATA), len(DATA), 3, True, out)
    assert out.getvalue() == DATA[-3:]
    assert written == 3


def test_copy_bytes_from_end_too_many():
    out = io.BytesIO()
    written = copy_bytes(io.BytesIO(DATA), len(DATA), len(DATA) + 1, True, out)
    assert out.getvalue() == b""
    assert written == 0