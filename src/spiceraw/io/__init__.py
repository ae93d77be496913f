"""Raw file decoding: header line scanner, header parser and sample decoder."""

from spiceraw.io.header_parser import parse_header
from spiceraw.io.line_scanner import DEFAULT_MAX_LINE_LENGTH, iter_lines, read_line
from spiceraw.io.raw_reader import read_all_raw_files, read_raw, read_raw_header
from spiceraw.io.sample_decoder import decode_samples

__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "read_line",
    "iter_lines",
    "parse_header",
    "decode_samples",
    "read_raw",
    "read_raw_header",
    "read_all_raw_files",
]
