"""High-level async registry for minting and managing art records."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import aiohttp

from pyartmint._redact import redact_for_log
from pyartmint.config import ArtMintConfig
from pyartmint.derive import derive_state
from pyartmint.entropy import EntropyProvider, HttpEntropyProvider, SystemEntropyProvider
from pyartmint.exceptions import ArtMintError, EntropyProviderError
from pyartmint.models.record import ArtRecord, StoreMetadata
from pyartmint.state.store import RecordStore

_logger = logging.getLogger(__name__)


class ArtRegistry:
    """Async front end over a :class:`RecordStore`.

    Usage::

        async with ArtRegistry(config) as registry:
            art_id = await registry.create_record(caller)
            record = registry.get_record(art_id)

    Caller identities are opaque; they are stored as the record creator
    and compared for equality on transfer and delete.
    """

    def __init__(
        self,
        config: ArtMintConfig | None = None,
        *,
        provider: EntropyProvider | None = None,
        store: RecordStore | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else ArtMintConfig()
        self._store = store if store is not None else RecordStore(start_id=self._config.start_id)
        self._clock = clock
        self._provider = provider
        self._external_provider = provider is not None
        self._external_session = session is not None
        self._http_session = session

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ArtRegistry:
        if self._external_provider:
            return self
        if self._config.entropy_url:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._provider = HttpEntropyProvider(self._config, self._http_session)
        else:
            self._provider = SystemEntropyProvider(self._config.entropy_bytes)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_provider:
            self._provider = None

    @property
    def store(self) -> RecordStore:
        return self._store

    def _require_provider(self) -> EntropyProvider:
        if self._provider is None:
            raise ArtMintError("Registry not initialized. Use 'async with ArtRegistry(...) as registry:'")
        return self._provider

    # ------------------------------------------------------------------
    # Mutating endpoints
    # ------------------------------------------------------------------

    async def create_record(self, caller: Any) -> int:
        """Mint a new art record owned by *caller* and return its id.

        The id is allocated before the entropy fetch.  If the fetch fails
        the id stays consumed and :class:`EntropyProviderError` is raised
        with ``record_id`` set to it.
        """
        provider = self._require_provider()
        record_id = self._store.allocate_id()

        try:
            entropy = await provider.fetch_random_bytes()
        except EntropyProviderError as exc:
            _logger.warning("Entropy fetch failed for art record %d: %s", record_id, exc)
            raise EntropyProviderError(
                str(exc),
                status_code=exc.status_code,
                url=exc.url,
                record_id=record_id,
            ) from exc
        except Exception as exc:
            _logger.warning("Entropy provider raised for art record %d", record_id, exc_info=True)
            raise EntropyProviderError(
                f"Entropy provider failed: {exc}",
                record_id=record_id,
            ) from exc

        try:
            derived = derive_state(entropy)
        except TypeError as exc:
            _logger.warning("Entropy provider returned %s for art record %d", type(entropy).__name__, record_id)
            raise EntropyProviderError(
                f"Entropy provider returned invalid data: {exc}",
                record_id=record_id,
            ) from exc

        record = ArtRecord(
            id=record_id,
            creator=caller,
            derived_state=derived,
            created_at=self._clock(),
        )
        self._store.insert(record_id, record)
        _logger.info("Minted art record %d for %r (%d chunks)", record_id, caller, len(derived))
        _logger.debug("Art record %d: %s", record_id, redact_for_log(record.model_dump()))
        return record_id

    def transfer_ownership(self, caller: Any, record_id: int, new_owner: Any) -> ArtRecord:
        """Transfer *record_id* from *caller* to *new_owner*."""
        return self._store.transfer_ownership(record_id, caller, new_owner)

    def delete_record(self, caller: Any, record_id: int) -> None:
        """Delete *record_id*; *caller* must be its creator."""
        self._store.delete(record_id, caller)
        _logger.info("Deleted art record %d", record_id)

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    def get_record(self, record_id: int) -> ArtRecord:
        return self._store.get(record_id)

    def list_records(self) -> list[ArtRecord]:
        return self._store.list()

    def get_metadata(self) -> StoreMetadata:
        return self._store.metadata()
