"""spiceraw: reader for circuit-simulator binary raw output files."""

from spiceraw.errors import (
    DataTruncationError,
    ErrorKind,
    LineTooLongError,
    MetadataFormatError,
    RawFileError,
    RawReadError,
    ResourceOpenError,
    UnexpectedEndOfInputError,
)
from spiceraw.io.raw_reader import read_all_raw_files, read_raw, read_raw_header
from spiceraw.models import FieldWidth, RawDataset, RawFileMetadata, RawVariable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "read_raw",
    "read_raw_header",
    "read_all_raw_files",
    "FieldWidth",
    "RawVariable",
    "RawFileMetadata",
    "RawDataset",
    "ErrorKind",
    "RawFileError",
    "ResourceOpenError",
    "LineTooLongError",
    "UnexpectedEndOfInputError",
    "DataTruncationError",
    "RawReadError",
    "MetadataFormatError",
]
