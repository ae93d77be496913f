"""Raw file reader.

Opens a raw file (or takes ownership of an open binary stream), parses the
UTF-16LE header and then decodes the binary body whose layout that header
declares. Decoding is all-or-nothing: any failure raises and no partial
dataset is returned. The stream is closed on every exit path.
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from spiceraw.errors import ResourceOpenError
from spiceraw.io.header_parser import parse_header
from spiceraw.io.line_scanner import DEFAULT_MAX_LINE_LENGTH, iter_lines
from spiceraw.io.sample_decoder import decode_samples
from spiceraw.models.dataset import RawDataset
from spiceraw.models.metadata import RawFileMetadata

RawSource = str | Path | BinaryIO


def _open_source(source: RawSource) -> tuple[BinaryIO, str]:
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return path.open("rb"), path.name
        except OSError as e:
            raise ResourceOpenError(f"Cannot open raw file {path}: {e}") from e
    return source, str(getattr(source, "name", "<stream>"))


def read_raw(
    source: RawSource,
    *,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> RawDataset:
    """Decode a raw file into a dataset.

    Args:
        source: Path to a .raw file, or an open binary stream. A stream is
            closed when the call returns.
        max_line_length: Maximum header line length in 16-bit code units.

    Returns:
        RawDataset with one sample array per declared variable.

    Raises:
        ResourceOpenError: If the file cannot be opened.
        LineTooLongError: If a header line exceeds ``max_line_length``.
        UnexpectedEndOfInputError: If the header is not terminated.
        DataTruncationError: If the body is shorter than declared.
        RawReadError: If the stream raises an I/O error.
        MetadataFormatError: If the header cannot be interpreted.
    """
    stream, label = _open_source(source)
    with closing(stream):
        logger.info("Reading raw file: {}", label)
        metadata = parse_header(iter_lines(stream, max_line_length))
        data, imaginary = decode_samples(stream, metadata)

    logger.info(
        "Read {}: {} points x {} variables ({})",
        label,
        metadata.no_points,
        len(metadata.variables),
        metadata.flags or "no flags",
    )
    return RawDataset(metadata=metadata, data=data, imaginary=imaginary)


def read_raw_header(
    source: RawSource,
    *,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> RawFileMetadata:
    """Parse only the header of a raw file; the body is not read.

    Raises the same header errors as ``read_raw``.
    """
    stream, label = _open_source(source)
    with closing(stream):
        logger.info("Reading raw file header: {}", label)
        return parse_header(iter_lines(stream, max_line_length))


def read_all_raw_files(
    data_dir: str | Path,
    *,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> dict[str, RawDataset]:
    """Read all .raw files in a directory.

    Args:
        data_dir: Path to directory containing .raw files.
        max_line_length: Passed through to ``read_raw``.

    Returns:
        Dict keyed by filename stem with the decoded datasets.

    Raises:
        FileNotFoundError: If the directory does not exist.
        ValueError: If no .raw files are found.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    raw_files = sorted(data_dir.glob("*.raw"))
    if not raw_files:
        raise ValueError(f"No .raw files found in: {data_dir}")

    logger.info("Found {} raw files in {}", len(raw_files), data_dir)

    results: dict[str, RawDataset] = {}
    for raw_file in raw_files:
        try:
            results[raw_file.stem] = read_raw(raw_file, max_line_length=max_line_length)
        except Exception:
            logger.exception("Failed to read raw file: {}", raw_file.name)
            raise

    logger.info("Successfully read {} raw files", len(results))
    return results
