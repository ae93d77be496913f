"""Tests for the UTF-16LE header line scanner."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from spiceraw.errors import (
    ErrorKind,
    LineTooLongError,
    RawReadError,
    UnexpectedEndOfInputError,
)
from spiceraw.io.line_scanner import iter_lines, read_line


class _FailingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, buffer: object) -> int:
        raise OSError("device not ready")


class TestReadLine:
    """Tests for read_line function."""

    def test_reads_single_line(self) -> None:
        stream = io.BytesIO("Title: rc\n".encode("utf-16-le"))
        assert read_line(stream) == "Title: rc"

    def test_leaves_stream_after_terminator(self) -> None:
        stream = io.BytesIO("Binary:\n".encode("utf-16-le") + b"\x01\x02")
        read_line(stream)
        assert stream.read() == b"\x01\x02"

    def test_decodes_non_ascii(self) -> None:
        stream = io.BytesIO("Title: 電圧 µV\n".encode("utf-16-le"))
        assert read_line(stream) == "Title: 電圧 µV"

    def test_one_byte_reads_are_completed(
        self, trickle_stream: Callable[[bytes], io.RawIOBase]
    ) -> None:
        stream = trickle_stream("Flags: real\n".encode("utf-16-le") + b"\x07")
        assert read_line(stream) == "Flags: real"
        assert stream.read(1) == b"\x07"

    def test_empty_line(self) -> None:
        stream = io.BytesIO("\n".encode("utf-16-le"))
        assert read_line(stream) == ""

    def test_eof_before_terminator_raises(self) -> None:
        stream = io.BytesIO("Title: no newline".encode("utf-16-le"))
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            read_line(stream)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_EOF

    def test_empty_stream_raises(self) -> None:
        with pytest.raises(UnexpectedEndOfInputError):
            read_line(io.BytesIO(b""))

    def test_odd_trailing_byte_raises(self) -> None:
        stream = io.BytesIO("ab".encode("utf-16-le") + b"\x0a")
        with pytest.raises(UnexpectedEndOfInputError):
            read_line(stream)

    def test_line_too_long_raises(self) -> None:
        stream = io.BytesIO(("x" * 20 + "\n").encode("utf-16-le"))
        with pytest.raises(LineTooLongError) as exc_info:
            read_line(stream, max_line_length=8)
        assert exc_info.value.kind == ErrorKind.LINE_TOO_LONG
        assert exc_info.value.max_line_length == 8

    def test_line_at_limit_accepted(self) -> None:
        stream = io.BytesIO(("x" * 8 + "\n").encode("utf-16-le"))
        assert read_line(stream, max_line_length=8) == "x" * 8

    def test_single_byte_encoded_input_is_too_long(self) -> None:
        """An 8-bit file never yields a 0x000A unit, so the bound trips."""
        stream = io.BytesIO(b"Title: ascii file\nDate: x\n" * 10)
        with pytest.raises(LineTooLongError):
            read_line(stream, max_line_length=16)

    def test_io_error_becomes_read_error(self) -> None:
        with pytest.raises(RawReadError) as exc_info:
            read_line(_FailingStream())
        assert exc_info.value.kind == ErrorKind.READ_ERROR
        assert isinstance(exc_info.value.__cause__, OSError)


class TestIterLines:
    """Tests for iter_lines generator."""

    def test_yields_lines_in_order(self) -> None:
        stream = io.BytesIO("a\nb\nc\n".encode("utf-16-le"))
        lines = iter_lines(stream)
        assert [next(lines), next(lines), next(lines)] == ["a", "b", "c"]

    def test_is_lazy(self) -> None:
        stream = io.BytesIO("a\nb\n".encode("utf-16-le"))
        lines = iter_lines(stream)
        assert next(lines) == "a"
        assert stream.tell() == 4

    def test_exhausted_stream_raises(self) -> None:
        lines = iter_lines(io.BytesIO("a\n".encode("utf-16-le")))
        next(lines)
        with pytest.raises(UnexpectedEndOfInputError):
            next(lines)
