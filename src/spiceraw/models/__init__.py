"""Pydantic models for raw file headers and decoded datasets."""

from spiceraw.models.dataset import RawDataset
from spiceraw.models.metadata import FieldWidth, RawFileMetadata, RawVariable

__all__ = [
    "FieldWidth",
    "RawVariable",
    "RawFileMetadata",
    "RawDataset",
]
