"""Base model for pyartmint records.

Every record model inherits from :class:`ArtMintBaseModel`, which makes
instances immutable and rejects unknown fields.  Mutation inside the
store is expressed as ``model_copy(update=...)`` followed by a replace.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ArtMintBaseModel(BaseModel):
    """Base for all pyartmint models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
