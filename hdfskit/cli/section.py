"""Printing the head or tail of a file, by lines or by bytes."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

DEFAULT_LINES = 10
TAIL_SEARCH_SIZE = 16384
_CHUNK_SIZE = 64 * 1024


def resolve_section_limits(
    num_lines: Optional[int], num_bytes: Optional[int]
) -> tuple[Optional[int], Optional[int]]:
    """Check the -n/-c choice; with neither, default to ten lines."""
    if num_lines is not None and num_bytes is not None:
        raise ValueError("You can't specify both -n and -c.")
    if num_lines is None and num_bytes is None:
        return DEFAULT_LINES, None
    return num_lines, num_bytes


def _copy(source: BinaryIO, out: BinaryIO, limit: Optional[int] = None) -> int:
    written = 0
    while limit is None or written < limit:
        want = _CHUNK_SIZE if limit is None else min(_CHUNK_SIZE, limit - written)
        chunk = source.read(want)
        if not chunk:
            break
        out.write(chunk)
        written += len(chunk)
    return written


def head_lines(source: BinaryIO, num_lines: int, out: BinaryIO) -> int:
    """Copy the first ``num_lines`` lines of ``source`` to ``out``; return bytes written."""
    remaining = num_lines
    written = 0
    while remaining > 0:
        chunk = source.read(_CHUNK_SIZE)
        if not chunk:
            break

        count = chunk.count(b"\n")
        if count < remaining:
            out.write(chunk)
            written += len(chunk)
            remaining -= count
            continue

        end = -1
        for _ in range(remaining):
            end = chunk.index(b"\n", end + 1)
        out.write(chunk[: end + 1])
        written += end + 1
        break
    return written


def _newline_offsets(window: bytes, base: int, size: int) -> Iterator[int]:
    pos = window.find(b"\n")
    while pos >= 0:
        offset = base + pos
        if offset + 1 != size:
            yield offset
        pos = window.find(b"\n", pos + 1)


def tail_lines(source: BinaryIO, size: int, num_lines: int, out: BinaryIO) -> int:
    """Copy the last ``num_lines`` lines of a seekable ``source`` of ``size`` bytes.

    The file is searched backwards in windows of TAIL_SEARCH_SIZE bytes; a
    newline that ends the file does not count. Returns the bytes written.
    """
    if num_lines <= 0:
        return 0

    search_point = max(size - TAIL_SEARCH_SIZE, 0)
    read_size = min(TAIL_SEARCH_SIZE, size)
    print_offset = 0

    while search_point >= 0:
        source.seek(search_point)
        window = source.read(read_size)
        newlines = list(_newline_offsets(window, search_point, size))

        if len(newlines) >= num_lines:
            print_offset = newlines[len(newlines) - num_lines] + 1
            break

        num_lines -= len(newlines)
        search_point -= TAIL_SEARCH_SIZE

    source.seek(print_offset)
    return _copy(source, out)


def copy_bytes(source: BinaryIO, size: int, num_bytes: int, from_end: bool, out: BinaryIO) -> int:
    """Copy ``num_bytes`` bytes from the start or end of ``source``; return bytes written.

    Asking for more bytes from the end than the file holds writes nothing.
    """
    offset = size - num_bytes if from_end else 0
    if offset < 0 or num_bytes <= 0:
        return 0
    source.seek(offset)
    return _copy(source, out, num_bytes)