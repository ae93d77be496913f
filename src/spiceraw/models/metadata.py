"""Raw file header models.

These models hold what the textual header of a raw file declares: the
descriptive fields, the flag set and the ordered variable table that fixes
the layout of the binary body. They are built once per decode and frozen
before any sample is read.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_serializer,
    field_validator,
)


class FieldWidth(IntEnum):
    """Byte widths a sample field can have in the binary body."""

    SINGLE = 4
    DOUBLE = 8
    COMPLEX = 16


class RawVariable(BaseModel):
    """One declared output channel of the simulation."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Column position in each binary row")
    name: str = Field(..., min_length=1, description="Variable name (e.g., 'V(out)')")
    var_type: str = Field(..., description="Type token as written (e.g., 'voltage', 'time')")
    width: FieldWidth = Field(..., description="Byte width of one encoded sample")


class RawFileMetadata(BaseModel):
    """Parsed header of a raw file.

    Keys the reader does not know are kept verbatim in ``extra``, mapped to
    every value they appeared with in order.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Simulated netlist path or title")
    date: str = Field(default="", description="Simulation date as written")
    plotname: str = Field(default="", description="Analysis name (e.g., 'Transient Analysis')")
    flags: str = Field(default="", description="Flags line as written")
    command: str = Field(default="", description="Simulator command line")
    offset: float = Field(default=0.0, description="Offset of the x-axis")
    no_points: int = Field(..., ge=0, description="Number of rows in the binary body")
    variables: tuple[RawVariable, ...] = Field(
        ..., min_length=1, description="Variables in binary column order"
    )
    extra: Mapping[str, tuple[str, ...]] = Field(
        default_factory=dict,
        validate_default=True,
        description="Unrecognized header keys and their values",
    )

    @field_validator("extra", mode="after")
    @classmethod
    def _freeze_extra(cls, value: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_serializer("extra")
    def _serialize_extra(self, value: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
        return {key: list(values) for key, values in value.items()}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def flag_tokens(self) -> frozenset[str]:
        return frozenset(self.flags.lower().split())

    @property
    def is_complex(self) -> bool:
        return "complex" in self.flag_tokens

    @property
    def is_fastaccess(self) -> bool:
        """True when the body is stored column by column."""
        return "fastaccess" in self.flag_tokens

    @property
    def row_size(self) -> int:
        """Bytes in one point across all variables."""
        return sum(int(v.width) for v in self.variables)
