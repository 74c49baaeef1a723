"""Entropy providers feeding the creation workflow."""

from __future__ import annotations

import logging
import secrets
from typing import Protocol

import aiohttp

from pyartmint._constants import DEFAULT_ENTROPY_BYTES
from pyartmint._redact import redact_for_log
from pyartmint.config import ArtMintConfig
from pyartmint.exceptions import ArtMintConfigError, EntropyProviderError

_logger = logging.getLogger(__name__)


class EntropyProvider(Protocol):
    """Structural interface for an asynchronous source of random bytes.

    The registry only needs this one coroutine, so tests can pass any
    object with a matching ``fetch_random_bytes``.
    """

    async def fetch_random_bytes(self) -> bytes:
        ...


class SystemEntropyProvider:
    """Entropy from the operating system's random source."""

    def __init__(self, num_bytes: int = DEFAULT_ENTROPY_BYTES) -> None:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        self._num_bytes = num_bytes

    async def fetch_random_bytes(self) -> bytes:
        return secrets.token_bytes(self._num_bytes)


class HttpEntropyProvider:
    """Entropy fetched from an HTTP endpoint returning a raw binary body."""

    def __init__(self, config: ArtMintConfig, http_session: aiohttp.ClientSession) -> None:
        if not config.entropy_url:
            raise ArtMintConfigError("HttpEntropyProvider requires config.entropy_url")
        self._url = config.entropy_url
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)
        self._http = http_session

    async def fetch_random_bytes(self) -> bytes:
        """GET the configured URL and return the response body.

        Raises :class:`EntropyProviderError` on network failure, timeout,
        or a non-200 status.
        """
        _logger.debug("GET %s", self._url)

        try:
            async with self._http.get(self._url, timeout=self._timeout) as resp:
                body = await resp.read()
                if resp.status != 200:
                    raise EntropyProviderError(
                        f"HTTP {resp.status} from entropy source {self._url}",
                        status_code=resp.status,
                        url=self._url,
                    )
        except EntropyProviderError:
            raise
        except TimeoutError as exc:
            raise EntropyProviderError(
                f"Entropy request to {self._url} timed out",
                url=self._url,
            ) from exc
        except aiohttp.ClientError as exc:
            raise EntropyProviderError(
                f"Entropy request to {self._url} failed: {exc}",
                url=self._url,
            ) from exc

        _logger.debug("Entropy response %s", redact_for_log(body))
        return body
