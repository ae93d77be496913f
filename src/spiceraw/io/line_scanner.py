"""Line scanner for the UTF-16LE header of a raw file.

The header is a run of lines made of 2-byte little-endian code units, each
line ending with the code unit 0x000A. The scanner reads exactly one code
unit at a time so the stream is left positioned on the first byte after the
last line it returned, which is where the binary body starts.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from spiceraw.errors import LineTooLongError, RawReadError, UnexpectedEndOfInputError

DEFAULT_MAX_LINE_LENGTH = 4096

_LINE_FEED = b"\n\x00"


def fill(stream: BinaryIO, view: memoryview) -> int:
    """Read into ``view`` until it is full or the stream is exhausted.

    Unbuffered streams may return fewer bytes than requested before the end,
    so a short count here always means end of input.

    Returns:
        Number of bytes read.

    Raises:
        RawReadError: If the stream raises an I/O error.
    """
    filled = 0
    while filled < len(view):
        try:
            n = stream.readinto(view[filled:])
        except OSError as e:
            raise RawReadError(f"Failed to read from stream: {e}") from e
        if not n:
            break
        filled += n
    return filled


def read_line(stream: BinaryIO, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Read one terminated header line and return it without the terminator.

    Args:
        stream: Binary stream positioned at the start of a line.
        max_line_length: Maximum number of code units before a terminator.

    Returns:
        The decoded line text.

    Raises:
        LineTooLongError: If more than ``max_line_length`` units precede the terminator.
        UnexpectedEndOfInputError: If the stream ends before the terminator.
        RawReadError: If the stream raises an I/O error.
    """
    buffer = bytearray()
    unit = bytearray(2)
    view = memoryview(unit)
    while True:
        if len(buffer) // 2 > max_line_length:
            raise LineTooLongError(max_line_length)
        if fill(stream, view) < 2:
            raise UnexpectedEndOfInputError(
                "Stream ended inside the header before a line terminator"
            )
        if unit == _LINE_FEED:
            return buffer.decode("utf-16-le", errors="replace")
        buffer += unit


def iter_lines(
    stream: BinaryIO, max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> Iterator[str]:
    """Yield header lines lazily; a line is only read when requested.

    Never stops on its own: the header has no clean end-of-stream, so running
    out of input raises ``UnexpectedEndOfInputError``.
    """
    while True:
        yield read_line(stream, max_line_length)
