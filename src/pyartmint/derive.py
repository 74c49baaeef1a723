"""Deterministic derivation of art state from an entropy block.

Each complete 4-byte chunk of the block is read as a little-endian
unsigned 32-bit value ``v`` and yields one magnitude ``v / (2**32 - 1)``
and one class ``v % 10``.  A trailing remainder shorter than a chunk is
discarded.
"""

from __future__ import annotations

import math
import struct

from pyartmint._constants import CHUNK_SIZE, CLASS_COUNT, U32_MAX
from pyartmint.models.record import DerivedState

_CHUNK = struct.Struct("<I")

# v == U32_MAX would divide to exactly 1.0; magnitudes are half-open.
_MAX_MAGNITUDE = math.nextafter(1.0, 0.0)


def chunk_values(entropy: bytes | bytearray | memoryview) -> list[int]:
    """Return the unsigned 32-bit value of every complete chunk in *entropy*."""
    if not isinstance(entropy, (bytes, bytearray, memoryview)):
        raise TypeError(f"entropy must be bytes-like, got {type(entropy).__name__}")
    view = memoryview(entropy).cast("B")
    usable = len(view) - len(view) % CHUNK_SIZE
    return [value for (value,) in _CHUNK.iter_unpack(view[:usable])]


def magnitude_of(value: int) -> float:
    """Normalise a chunk value into [0, 1)."""
    return min(value / U32_MAX, _MAX_MAGNITUDE)


def derive_state(entropy: bytes | bytearray | memoryview) -> DerivedState:
    """Derive magnitudes and classes from *entropy*.

    Empty or undersized input yields an empty state.  Raises
    :class:`TypeError` when *entropy* is not bytes-like.
    """
    values = chunk_values(entropy)
    return DerivedState(
        magnitudes=tuple(magnitude_of(v) for v in values),
        classes=tuple(v % CLASS_COUNT for v in values),
    )
