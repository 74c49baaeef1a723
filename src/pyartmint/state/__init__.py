"""State/store layer.

:class:`~pyartmint.state.store.RecordStore` is the single source of truth
for minted art records and the identifier counter.
"""

from pyartmint.state.store import RecordStore

__all__ = ["RecordStore"]
