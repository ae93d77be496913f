"""Binary sample decoder for raw files.

Reads the body that follows the header. Each field is read into one
16-byte scratch buffer reused for the whole body and decoded according to
the declaring variable's width:

- 4 bytes: little-endian float32, widened to float64
- 8 bytes: little-endian float64
- 16 bytes: two little-endian float64 values, real then imaginary

Rows are point-major unless the header flags ``fastaccess``, in which case
the body holds every point of one variable before the next variable.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterator
from typing import BinaryIO

import numpy as np

from spiceraw.errors import DataTruncationError
from spiceraw.io.line_scanner import fill
from spiceraw.models.metadata import FieldWidth, RawFileMetadata, RawVariable

_FLOAT32 = struct.Struct("<f")
_FLOAT64 = struct.Struct("<d")
_COMPLEX128 = struct.Struct("<dd")

Decoded = tuple[float, float | None]


def _decode_single(buffer: bytearray) -> Decoded:
    return _FLOAT32.unpack_from(buffer)[0], None


def _decode_double(buffer: bytearray) -> Decoded:
    return _FLOAT64.unpack_from(buffer)[0], None


def _decode_complex(buffer: bytearray) -> Decoded:
    real, imag = _COMPLEX128.unpack_from(buffer)
    return real, imag


FIELD_DECODERS: dict[FieldWidth, Callable[[bytearray], Decoded]] = {
    FieldWidth.SINGLE: _decode_single,
    FieldWidth.DOUBLE: _decode_double,
    FieldWidth.COMPLEX: _decode_complex,
}

_SCRATCH_SIZE = int(max(FieldWidth))


def _field_order(metadata: RawFileMetadata) -> Iterator[tuple[int, RawVariable]]:
    if metadata.is_fastaccess:
        for variable in metadata.variables:
            for point in range(metadata.no_points):
                yield point, variable
    else:
        for point in range(metadata.no_points):
            for variable in metadata.variables:
                yield point, variable


def decode_samples(
    stream: BinaryIO, metadata: RawFileMetadata
) -> tuple[dict[str, np.ndarray], dict[str, np.ndarray]]:
    """Decode ``metadata.no_points`` points from the stream.

    Args:
        stream: Binary stream positioned just after the header terminator.
        metadata: Frozen header metadata.

    Returns:
        Tuple of (real values by variable name, imaginary values by variable
        name). The second mapping only has entries for complex variables.
        Arrays are read-only and in variable declaration order.

    Raises:
        DataTruncationError: If the body ends before every field is read.
        RawReadError: If the stream raises an I/O error.
    """
    n_points = metadata.no_points
    data = {v.name: np.zeros(n_points, dtype=np.float64) for v in metadata.variables}
    imaginary = {
        v.name: np.zeros(n_points, dtype=np.float64)
        for v in metadata.variables
        if v.width == FieldWidth.COMPLEX
    }

    scratch = bytearray(_SCRATCH_SIZE)
    view = memoryview(scratch)
    for point, variable in _field_order(metadata):
        width = int(variable.width)
        got = fill(stream, view[:width])
        if got < width:
            raise DataTruncationError(variable.name, point, width, got)
        real, imag = FIELD_DECODERS[variable.width](scratch)
        data[variable.name][point] = real
        if imag is not None:
            imaginary[variable.name][point] = imag

    for arr in (*data.values(), *imaginary.values()):
        arr.flags.writeable = False
    return data, imaginary
