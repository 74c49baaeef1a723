"""Registry configuration for pyartmint."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyartmint._constants import DEFAULT_ENTROPY_BYTES, DEFAULT_REQUEST_TIMEOUT, U64_LIMIT
from pyartmint.exceptions import ArtMintConfigError


@dataclasses.dataclass(frozen=True)
class ArtMintConfig:
    """Registry configuration.

    Parameters
    ----------
    entropy_url : str or None
        URL returning a raw binary block of random bytes on ``GET``.
        When ``None`` the registry falls back to the operating system's
        random source.
    entropy_bytes : int
        Block size requested from the system entropy source.  Defaults to
        32 bytes (eight magnitude/class pairs).
    request_timeout : float
        Total timeout in seconds for one HTTP entropy fetch.
    start_id : int
        First identifier handed out by a fresh record store.
    """

    entropy_url: str | None = None
    entropy_bytes: int = DEFAULT_ENTROPY_BYTES
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    start_id: int = 0

    def __post_init__(self) -> None:
        if self.entropy_bytes < 0:
            raise ArtMintConfigError(f"entropy_bytes must be >= 0, got {self.entropy_bytes}")
        if self.request_timeout <= 0:
            raise ArtMintConfigError(f"request_timeout must be > 0, got {self.request_timeout}")
        if not 0 <= self.start_id < U64_LIMIT:
            raise ArtMintConfigError(f"start_id must be in [0, 2**64), got {self.start_id}")

    @classmethod
    def from_env(cls, **overrides: Any) -> ArtMintConfig:
        """Create configuration from environment variables.

        Reads ``ARTMINT_ENTROPY_URL``, ``ARTMINT_ENTROPY_BYTES``,
        ``ARTMINT_REQUEST_TIMEOUT`` and ``ARTMINT_START_ID``. Explicit
        keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        url = env.get("ARTMINT_ENTROPY_URL")
        if url is not None and url.strip():
            config_kwargs["entropy_url"] = url.strip()

        # Numeric values, converted separately
        _ENV_NUMERIC_MAP = {
            "ARTMINT_ENTROPY_BYTES": ("entropy_bytes", int),
            "ARTMINT_REQUEST_TIMEOUT": ("request_timeout", float),
            "ARTMINT_START_ID": ("start_id", int),
        }
        for env_key, (field_name, convert) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = convert(val)
            except ValueError as exc:
                raise ArtMintConfigError(f"{env_key} is not a valid number: {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
