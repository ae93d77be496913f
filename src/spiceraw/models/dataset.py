"""Decoded raw file dataset."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, PrivateAttr

from spiceraw.models.metadata import RawFileMetadata


def _read_only(arrays: Mapping[str, np.ndarray] | None) -> dict[str, np.ndarray]:
    frozen: dict[str, np.ndarray] = {}
    for name, values in (arrays or {}).items():
        view = np.asarray(values, dtype=np.float64).view()
        view.flags.writeable = False
        frozen[name] = view
    return frozen


class RawDataset(BaseModel):
    """Header metadata plus one sample sequence per variable.

    ``data`` holds the real value of every sample, keyed by variable name in
    declaration order. ``imaginary`` holds the imaginary parts and only has
    entries for 16-byte (complex) variables. Both mappings and all arrays
    are read-only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    metadata: RawFileMetadata
    _data: dict[str, np.ndarray] = PrivateAttr(default_factory=dict)
    _imaginary: dict[str, np.ndarray] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        metadata: RawFileMetadata,
        data: Mapping[str, np.ndarray] | None = None,
        imaginary: Mapping[str, np.ndarray] | None = None,
    ) -> None:
        super().__init__(metadata=metadata)
        self._data = _read_only(data)
        self._imaginary = _read_only(imaginary)

    @property
    def data(self) -> Mapping[str, np.ndarray]:
        return MappingProxyType(self._data)

    @property
    def imaginary(self) -> Mapping[str, np.ndarray]:
        return MappingProxyType(self._imaginary)

    @property
    def variable_names(self) -> list[str]:
        return list(self._data)

    def __getitem__(self, name: str) -> np.ndarray:
        return self._data[name]

    def __len__(self) -> int:
        return self.metadata.no_points

    def to_dataframe(self) -> pd.DataFrame:
        """Return the samples as a DataFrame, one column per variable.

        Complex variables become complex128 columns.
        """
        columns: dict[str, np.ndarray] = {}
        for name, values in self._data.items():
            if name in self._imaginary:
                columns[name] = values + 1j * self._imaginary[name]
            else:
                columns[name] = values
        return pd.DataFrame(columns)
