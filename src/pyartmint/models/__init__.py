"""Data models for pyartmint records."""

from pyartmint.models._base import ArtMintBaseModel
from pyartmint.models.record import ArtRecord, DerivedState, StoreMetadata

__all__ = [
    "ArtMintBaseModel",
    "ArtRecord",
    "DerivedState",
    "StoreMetadata",
]
