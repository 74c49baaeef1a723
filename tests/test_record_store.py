from __future__ import annotations

import pytest

from pyartmint._constants import U64_LIMIT
from pyartmint.derive import derive_state
from pyartmint.exceptions import ArtMintConfigError, ArtMintError, NotAuthorizedError, RecordNotFoundError
from pyartmint.models.record import ArtRecord, StoreMetadata
from pyartmint.state.store import RecordStore


def _mint(store: RecordStore, creator: str = "alice", *, created_at: int = 1_000) -> ArtRecord:
    record_id = store.allocate_id()
    record = ArtRecord(
        id=record_id,
        creator=creator,
        derived_state=derive_state(bytes(range(8))),
        created_at=created_at,
    )
    store.insert(record_id, record)
    return record


def test_allocate_id_is_monotonic() -> None:
    store = RecordStore()

    assert [store.allocate_id() for _ in range(3)] == [0, 1, 2]
    assert store.next_id == 3


def test_start_id_respected() -> None:
    store = RecordStore(start_id=41)

    assert store.allocate_id() == 41
    assert store.metadata() == StoreMetadata(total_pieces=0, next_id=42)


def test_insert_then_get_round_trip() -> None:
    store = RecordStore()
    record = _mint(store)

    fetched = store.get(record.id)
    assert fetched == record
    assert fetched.creator == "alice"
    assert fetched.created_at == 1_000


def test_get_unknown_id_raises_not_found() -> None:
    store = RecordStore()

    with pytest.raises(RecordNotFoundError) as exc_info:
        store.get(7)
    assert exc_info.value.record_id == 7


def test_insert_duplicate_id_rejected() -> None:
    store = RecordStore()
    record = _mint(store)

    with pytest.raises(ArtMintError):
        store.insert(record.id, record)


def test_insert_unallocated_id_rejected() -> None:
    store = RecordStore()
    record = ArtRecord(id=0, creator="alice", derived_state=derive_state(b""), created_at=0)

    with pytest.raises(ArtMintError):
        store.insert(0, record)


def test_insert_key_must_match_record_id() -> None:
    store = RecordStore()
    store.allocate_id()
    store.allocate_id()
    record = ArtRecord(id=1, creator="alice", derived_state=derive_state(b""), created_at=0)

    with pytest.raises(ArtMintError):
        store.insert(0, record)


def test_list_returns_every_record() -> None:
    store = RecordStore()
    first = _mint(store, "alice")
    second = _mint(store, "bob")

    assert sorted(store.list(), key=lambda r: r.id) == [first, second]
    assert len(store) == 2
    assert first.id in store


def test_transfer_by_creator_changes_only_creator() -> None:
    store = RecordStore()
    record = _mint(store)

    updated = store.transfer_ownership(record.id, "alice", "bob")

    assert updated.creator == "bob"
    assert store.get(record.id) == record.model_copy(update={"creator": "bob"})
    assert updated.derived_state == record.derived_state
    assert updated.created_at == record.created_at


def test_transfer_by_non_creator_rejected_and_unchanged() -> None:
    store = RecordStore()
    record = _mint(store)

    with pytest.raises(NotAuthorizedError) as exc_info:
        store.transfer_ownership(record.id, "mallory", "mallory")

    assert exc_info.value.requester == "mallory"
    assert store.get(record.id).creator == "alice"


def test_previous_creator_loses_rights_after_transfer() -> None:
    store = RecordStore()
    record = _mint(store)
    store.transfer_ownership(record.id, "alice", "bob")

    with pytest.raises(NotAuthorizedError):
        store.delete(record.id, "alice")
    store.delete(record.id, "bob")
    assert record.id not in store


def test_transfer_unknown_id_raises_not_found() -> None:
    store = RecordStore()

    with pytest.raises(RecordNotFoundError):
        store.transfer_ownership(3, "alice", "bob")


def test_delete_by_non_creator_rejected_and_record_kept() -> None:
    store = RecordStore()
    record = _mint(store)

    with pytest.raises(NotAuthorizedError):
        store.delete(record.id, "mallory")

    assert store.get(record.id) == record


def test_deleted_record_not_found_and_id_not_reused() -> None:
    store = RecordStore()
    record = _mint(store)

    store.delete(record.id, "alice")

    with pytest.raises(RecordNotFoundError):
        store.get(record.id)
    with pytest.raises(RecordNotFoundError):
        store.delete(record.id, "alice")
    assert store.allocate_id() == record.id + 1


def test_identity_compared_by_equality_only() -> None:
    store = RecordStore()
    record = _mint(store, creator=("principal", 42))  # type: ignore[arg-type]

    store.delete(record.id, ("principal", 42))

    assert len(store) == 0


def test_metadata_snapshot() -> None:
    store = RecordStore()
    _mint(store)
    store.allocate_id()

    assert store.metadata() == StoreMetadata(total_pieces=1, next_id=2)


@pytest.mark.parametrize("start_id", [-1, U64_LIMIT])
def test_start_id_outside_u64_rejected(start_id: int) -> None:
    with pytest.raises(ArtMintConfigError):
        RecordStore(start_id=start_id)


def test_allocate_id_stops_at_u64_limit() -> None:
    store = RecordStore(start_id=U64_LIMIT - 1)

    assert store.allocate_id() == U64_LIMIT - 1
    with pytest.raises(ArtMintError):
        store.allocate_id()
    assert store.next_id == U64_LIMIT
