"""Header parser for raw files.

Consumes decoded header lines and folds them into a ``RawFileMetadata``.
Parsing stops at the first line mentioning ``binary`` or ``values``, which
marks the start of the sample body. The variable table is read inline from
the same line source because its rows carry no ``key:`` prefix.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from loguru import logger
from pydantic import ValidationError

from spiceraw.errors import MetadataFormatError, UnexpectedEndOfInputError
from spiceraw.models.metadata import FieldWidth, RawFileMetadata, RawVariable

TERMINATOR_MARKERS: tuple[str, ...] = ("binary", "values")

_TEXT_KEYS: dict[str, str] = {
    "title": "title",
    "date": "date",
    "plotname": "plotname",
    "flags": "flags",
    "command": "command",
}
_KEY_NO_VARIABLES = "no. variables"
_KEY_NO_POINTS = "no. points"
_KEY_OFFSET = "offset"
_KEY_VARIABLES = "variables"


def is_terminator(line: str) -> bool:
    """Return True if the line marks the end of the header."""
    text = line.strip().lower()
    return any(marker in text for marker in TERMINATOR_MARKERS)


def field_width(var_type: str, flag_tokens: frozenset[str]) -> FieldWidth:
    """Derive the byte width of a variable from its type token and the flags.

    Complex plots store every variable as a pair of doubles. Otherwise the
    x-axis (type ``time``) and every variable of a ``double`` plot are
    8 bytes wide, the rest single precision.
    """
    if "complex" in flag_tokens:
        return FieldWidth.COMPLEX
    if "double" in flag_tokens or var_type.lower() == "time":
        return FieldWidth.DOUBLE
    return FieldWidth.SINGLE


def _parse_count(key: str, value: str) -> int:
    try:
        count = int(value)
    except ValueError as e:
        raise MetadataFormatError(f"'{key}' is not an integer: {value!r}") from e
    if count < 0:
        raise MetadataFormatError(f"'{key}' must not be negative: {count}")
    return count


def _parse_variable_row(row: str, position: int) -> tuple[int, str, str]:
    tokens = row.split()
    if len(tokens) < 3:
        raise MetadataFormatError(
            f"Variable row {position} needs index, name and type: {row.strip()!r}"
        )
    try:
        index = int(tokens[0])
    except ValueError as e:
        raise MetadataFormatError(
            f"Variable row {position} has a non-integer index: {tokens[0]!r}"
        ) from e
    if index != position:
        raise MetadataFormatError(
            f"Variable row {position} declares index {index}; rows must be in column order"
        )
    return index, tokens[1], tokens[2]


class _HeaderBuilder:
    """Mutable accumulator used while header lines are being read."""

    def __init__(self) -> None:
        self.fields: dict[str, Any] = {}
        self.no_variables: int | None = None
        self.rows: list[tuple[int, str, str]] = []
        self.extra: dict[str, list[str]] = {}

    def add_line(self, line: str, lines: Iterator[str]) -> None:
        if not line.strip():
            return
        key, sep, value = line.partition(":")
        if not sep:
            raise MetadataFormatError(f"Header line is not a 'key: value' pair: {line!r}")
        norm_key = key.strip().lower()
        value = value.strip()

        if norm_key in _TEXT_KEYS:
            self.fields[_TEXT_KEYS[norm_key]] = value
        elif norm_key == _KEY_NO_VARIABLES:
            self.no_variables = _parse_count(key.strip(), value)
        elif norm_key == _KEY_NO_POINTS:
            self.fields["no_points"] = _parse_count(key.strip(), value)
        elif norm_key == _KEY_OFFSET:
            try:
                self.fields["offset"] = float(value)
            except ValueError as e:
                raise MetadataFormatError(f"'Offset' is not a number: {value!r}") from e
        elif norm_key == _KEY_VARIABLES:
            self._read_variable_table(lines)
            return
        else:
            self.extra.setdefault(key.strip(), []).append(value)
        logger.debug("Header {} = {!r}", key.strip(), value)

    def _read_variable_table(self, lines: Iterator[str]) -> None:
        if self.no_variables is None:
            raise MetadataFormatError("Variable table found before 'No. Variables'")
        if self.rows:
            raise MetadataFormatError("Header declares a second variable table")
        for position in range(self.no_variables):
            row = next(lines, None)
            if row is None:
                raise UnexpectedEndOfInputError("Line source ended inside the variable table")
            self.rows.append(_parse_variable_row(row, position))
        logger.debug("Read variable table with {} rows", len(self.rows))

    def freeze(self) -> RawFileMetadata:
        if not self.rows:
            raise MetadataFormatError("Header declares no variables")
        if "no_points" not in self.fields:
            raise MetadataFormatError("Header has no 'No. Points' line")

        flag_tokens = frozenset(str(self.fields.get("flags", "")).lower().split())
        variables = [
            RawVariable(
                index=index,
                name=name,
                var_type=var_type,
                width=field_width(var_type, flag_tokens),
            )
            for index, name, var_type in self.rows
        ]
        try:
            return RawFileMetadata(variables=variables, extra=self.extra, **self.fields)
        except ValidationError as e:
            raise MetadataFormatError(f"Invalid header: {e}") from e


def parse_header(lines: Iterable[str]) -> RawFileMetadata:
    """Read header lines up to and including the terminator line.

    Args:
        lines: Decoded header lines, usually from ``iter_lines``.
            Lines after the terminator are never requested.

    Returns:
        Frozen metadata describing the binary body.

    Raises:
        MetadataFormatError: If a line or variable row cannot be interpreted,
            or the header is missing its variables or point count.
        UnexpectedEndOfInputError: If ``lines`` is exhausted before the terminator.
        LineTooLongError, RawReadError: Propagated from the line source.
    """
    line_iter = iter(lines)
    builder = _HeaderBuilder()
    for line in line_iter:
        if is_terminator(line):
            return builder.freeze()
        builder.add_line(line, line_iter)
    raise UnexpectedEndOfInputError("Header ended without a binary data marker")
