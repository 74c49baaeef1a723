"""Internal constants shared across the library."""

#: Bytes consumed per derived magnitude/class pair.
CHUNK_SIZE = 4
U32_MAX = 0xFFFFFFFF
U64_LIMIT = 1 << 64

#: Number of distinct class values (``v % CLASS_COUNT``).
CLASS_COUNT = 10

#: Block size returned by the reference entropy source per call.
DEFAULT_ENTROPY_BYTES = 32
DEFAULT_REQUEST_TIMEOUT = 10.0
