"""Custom exception hierarchy for pyartmint."""

from __future__ import annotations

from typing import Any


class ArtMintError(Exception):
    """Base exception for all pyartmint errors.

    Also raised directly for conditions no narrower subclass covers.
    """


class ArtMintConfigError(ArtMintError):
    """Invalid or missing configuration."""


class RecordNotFoundError(ArtMintError):
    """No record is stored under the requested id."""

    def __init__(self, record_id: int) -> None:
        self.record_id = record_id
        super().__init__(f"Art record {record_id} not found")


class NotAuthorizedError(ArtMintError):
    """Requester is not the current creator of the record."""

    def __init__(self, record_id: int, requester: Any) -> None:
        self.record_id = record_id
        self.requester = requester
        super().__init__(f"Requester {requester!r} is not the creator of art record {record_id}")


class EntropyProviderError(ArtMintError):
    """The entropy fetch failed (network, non-200, provider exception).

    ``record_id`` is the identifier consumed by the failed creation, when the
    failure happened inside :meth:`ArtRegistry.create_record`.  That id is
    never handed out again.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
        record_id: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.record_id = record_id
        super().__init__(message)


QuantumStateError = EntropyProviderError
"""Name used for a failed creation caused by the entropy source."""
