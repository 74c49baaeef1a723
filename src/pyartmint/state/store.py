"""Authoritative in-memory art record store.

This is the only component allowed to mutate records.  It owns the id
counter and the ``id -> ArtRecord`` mapping; callers must serialize
access (the registry runs every mutation on one event loop between
awaits, so no locking is needed).
"""

from __future__ import annotations

import builtins
import logging
from typing import Any

from pyartmint._constants import U64_LIMIT
from pyartmint.exceptions import ArtMintConfigError, ArtMintError, NotAuthorizedError, RecordNotFoundError
from pyartmint.models.record import ArtRecord, StoreMetadata

_logger = logging.getLogger(__name__)


class RecordStore:
    """Keyed record storage with an id allocator and creator-gated mutation.

    Ids are handed out by :meth:`allocate_id` only; the counter never moves
    backwards, so an id consumed by a failed creation stays unused.
    """

    def __init__(self, *, start_id: int = 0) -> None:
        if not 0 <= start_id < U64_LIMIT:
            raise ArtMintConfigError(f"start_id must be in [0, 2**64), got {start_id}")
        self._next_id = start_id
        self._records: dict[int, ArtRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    @property
    def next_id(self) -> int:
        return self._next_id

    def allocate_id(self) -> int:
        """Return the current counter value and advance it by one."""
        record_id = self._next_id
        if record_id >= U64_LIMIT:
            raise ArtMintError("Art record id space exhausted")
        self._next_id = record_id + 1
        _logger.debug("Allocated art record id %d", record_id)
        return record_id

    def insert(self, record_id: int, record: ArtRecord) -> None:
        """Store *record* under a previously allocated *record_id*."""
        if record.id != record_id:
            raise ArtMintError(f"Record id {record.id} does not match insert key {record_id}")
        if record_id >= self._next_id:
            raise ArtMintError(f"Art record id {record_id} was never allocated")
        if record_id in self._records:
            raise ArtMintError(f"Art record {record_id} already exists")
        self._records[record_id] = record

    def get(self, record_id: int) -> ArtRecord:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def list(self) -> builtins.list[ArtRecord]:
        """Return every stored record.  Ordering is not part of the contract."""
        return builtins.list(self._records.values())

    def _owned(self, record_id: int, requester: Any) -> ArtRecord:
        record = self.get(record_id)
        if requester != record.creator:
            raise NotAuthorizedError(record_id, requester)
        return record

    def transfer_ownership(self, record_id: int, requester: Any, new_owner: Any) -> ArtRecord:
        """Hand *record_id* to *new_owner*.  Only the current creator may do this."""
        record = self._owned(record_id, requester)
        updated = record.model_copy(update={"creator": new_owner})
        self._records[record_id] = updated
        _logger.debug("Transferred art record %d from %r to %r", record_id, requester, new_owner)
        return updated

    def delete(self, record_id: int, requester: Any) -> None:
        """Remove *record_id*.  Only the current creator may do this."""
        self._owned(record_id, requester)
        del self._records[record_id]
        _logger.debug("Deleted art record %d", record_id)

    def metadata(self) -> StoreMetadata:
        return StoreMetadata(total_pieces=len(self._records), next_id=self._next_id)
