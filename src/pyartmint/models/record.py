"""Art record models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, model_validator

from pyartmint._constants import CLASS_COUNT, U64_LIMIT
from pyartmint.models._base import ArtMintBaseModel

Magnitude = Annotated[float, Field(ge=0.0, lt=1.0)]
ArtClass = Annotated[int, Field(ge=0, lt=CLASS_COUNT)]
RecordId = Annotated[int, Field(ge=0, lt=U64_LIMIT)]


class DerivedState(ArtMintBaseModel):
    """Numeric payload of an art record.

    Both sequences are derived from the same 4-byte entropy chunks, so
    ``magnitudes[i]`` and ``classes[i]`` always describe one chunk.
    """

    magnitudes: tuple[Magnitude, ...] = ()
    classes: tuple[ArtClass, ...] = ()

    @model_validator(mode="after")
    def _check_aligned(self) -> DerivedState:
        if len(self.magnitudes) != len(self.classes):
            raise ValueError(
                f"magnitudes and classes must align, got {len(self.magnitudes)} and {len(self.classes)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.magnitudes)


class ArtRecord(ArtMintBaseModel):
    """One generated art piece.

    Parameters
    ----------
    id : int
        Unsigned 64-bit identifier assigned by the record store.
    creator : Any
        Opaque caller identity. Only compared for equality.
    derived_state : DerivedState
        Sequences derived from the entropy block.
    created_at : int
        Monotonic timestamp in nanoseconds, captured once at creation.
    """

    id: RecordId
    creator: Any
    derived_state: DerivedState
    created_at: int = Field(ge=0)


class StoreMetadata(ArtMintBaseModel):
    """Snapshot of the record store for observability."""

    total_pieces: int = Field(ge=0)
    next_id: int = Field(ge=0)
