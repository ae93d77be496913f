"""Exceptions raised while decoding raw files.

Every error carries a ``kind`` so callers can branch on the failure class
without importing each exception type. Nothing inside the reader catches
these; they surface to the caller unchanged.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Failure classes of a decode call."""

    RESOURCE_OPEN = "resource-open"
    LINE_TOO_LONG = "line-too-long"
    UNEXPECTED_EOF = "unexpected-end-of-input"
    READ_ERROR = "read-error"
    METADATA_FORMAT = "metadata-format"


class RawFileError(Exception):
    """Base class for all raw file decoding errors."""

    kind: ErrorKind


class ResourceOpenError(RawFileError):
    """Raised when the input file cannot be opened."""

    kind = ErrorKind.RESOURCE_OPEN


class LineTooLongError(RawFileError):
    """Raised when a header line exceeds the configured maximum length.

    Usually means the file is not 16-bit encoded and the scanner never
    sees a line terminator.
    """

    kind = ErrorKind.LINE_TOO_LONG

    def __init__(self, max_line_length: int) -> None:
        self.max_line_length = max_line_length
        super().__init__(
            f"Header line exceeds {max_line_length} characters without a terminator"
        )


class UnexpectedEndOfInputError(RawFileError):
    """Raised when the stream ends before a header line is terminated."""

    kind = ErrorKind.UNEXPECTED_EOF


class DataTruncationError(UnexpectedEndOfInputError):
    """Raised when the binary body is shorter than the header declares."""

    def __init__(self, variable: str, point: int, expected: int, got: int) -> None:
        self.variable = variable
        self.point = point
        self.expected = expected
        self.got = got
        super().__init__(
            f"Data truncated at point {point} of variable '{variable}': "
            f"expected {expected} bytes, got {got}"
        )


class RawReadError(RawFileError):
    """Raised when the underlying stream fails with an I/O error."""

    kind = ErrorKind.READ_ERROR


class MetadataFormatError(RawFileError):
    """Raised when a header line or variable table row cannot be interpreted."""

    kind = ErrorKind.METADATA_FORMAT
