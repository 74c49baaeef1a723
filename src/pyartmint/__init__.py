"""pyartmint - Async in-memory registry for entropy-derived art records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyartmint")
except PackageNotFoundError:
    __version__ = "0+local"
from pyartmint.client import ArtRegistry
from pyartmint.config import ArtMintConfig
from pyartmint.derive import derive_state
from pyartmint.entropy import EntropyProvider, HttpEntropyProvider, SystemEntropyProvider
from pyartmint.exceptions import (
    ArtMintConfigError,
    ArtMintError,
    EntropyProviderError,
    NotAuthorizedError,
    QuantumStateError,
    RecordNotFoundError,
)
from pyartmint.models import ArtRecord, DerivedState, StoreMetadata
from pyartmint.state import RecordStore

__all__ = [
    "__version__",
    "ArtMintConfig",
    "ArtMintConfigError",
    "ArtMintError",
    "ArtRecord",
    "ArtRegistry",
    "DerivedState",
    "EntropyProvider",
    "EntropyProviderError",
    "HttpEntropyProvider",
    "NotAuthorizedError",
    "QuantumStateError",
    "RecordNotFoundError",
    "RecordStore",
    "StoreMetadata",
    "SystemEntropyProvider",
    "derive_state",
]
