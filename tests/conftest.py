"""Shared fixtures: synthetic raw files built from UTF-16LE headers and packed bodies."""

from __future__ import annotations

import io
import struct
from collections.abc import Callable
from pathlib import Path

import pytest

TRAN_HEADER: list[str] = [
    "Title: * C:\\sim\\rc_filter.net",
    "Date: Mon Oct 19 10:00:00 2026",
    "Plotname: Transient Analysis",
    "Flags: real forward",
    "No. Variables: 2",
    "No. Points: 3",
    "Offset:   0.0000000000000000e+000",
    "Command: Linear Technology Corporation LTspice XVII",
    "Backannotation: u1 1 2",
    "Variables:",
    "\t0\ttime\ttime",
    "\t1\tV(out)\tvoltage",
    "Binary:",
]

# (time, V(out)) per point; all values exact in float32
TRAN_ROWS: list[tuple[float, float]] = [
    (0.0, 0.5),
    (1.0e-3, 1.25),
    (2.5e-3, -2.0),
]


def _encode(lines: list[str]) -> bytes:
    return "".join(f"{line}\n" for line in lines).encode("utf-16-le")


def _pack_tran_rows(rows: list[tuple[float, float]]) -> bytes:
    return b"".join(struct.pack("<df", t, v) for t, v in rows)


class _TrickleStream(io.RawIOBase):
    """Unbuffered stream returning at most one byte per readinto call."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: memoryview) -> int:  # type: ignore[override]
        chunk = self._data.read(1)
        buffer[: len(chunk)] = chunk
        return len(chunk)


@pytest.fixture
def trickle_stream() -> Callable[[bytes], io.RawIOBase]:
    """Factory for streams that deliver their content one byte at a time."""
    return _TrickleStream


@pytest.fixture
def tran_bytes() -> bytes:
    """A complete transient raw file: one 8-byte and one 4-byte variable, 3 points."""
    return _encode(TRAN_HEADER) + _pack_tran_rows(TRAN_ROWS)


@pytest.fixture
def make_raw_file(tmp_path: Path) -> Callable[[bytes, str], Path]:
    """Write raw bytes to a file under tmp_path and return its path."""

    def _make(content: bytes, name: str = "sim.raw") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def encode_header() -> Callable[[list[str]], bytes]:
    """Encode header lines the way the simulator writes them."""
    return _encode


@pytest.fixture
def tran_header() -> list[str]:
    return list(TRAN_HEADER)


@pytest.fixture
def tran_rows() -> list[tuple[float, float]]:
    return list(TRAN_ROWS)
