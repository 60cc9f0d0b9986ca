"""Raw DEFLATE compression of joined frame buffers."""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from typing import Dict

from ..errors import AllocationError, CompressionInitError, CompressionStreamError

logger = logging.getLogger(__name__)

# Raw DEFLATE carries no header, so decoders depend on these matching exactly.
COMPRESSION_LEVEL = zlib.Z_DEFAULT_COMPRESSION
WINDOW_BITS = -zlib.MAX_WBITS
MEM_LEVEL = 8
STRATEGY = zlib.Z_DEFAULT_STRATEGY


@dataclass(frozen=True, slots=True)
class CompressedBundle:
    data: bytes
    source_size: int

    @property
    def size(self) -> int:
        return len(self.data)


def compression_parameters() -> Dict[str, int]:
    """Return the encoder parameters used for every bundle."""

    return {
        "level": COMPRESSION_LEVEL,
        "wbits": WINDOW_BITS,
        "mem_level": MEM_LEVEL,
        "strategy": STRATEGY,
    }


def compress_buffer(data: bytes) -> CompressedBundle:
    """Compress ``data`` in one shot as a headerless DEFLATE stream."""

    try:
        encoder = zlib.compressobj(COMPRESSION_LEVEL, zlib.DEFLATED, WINDOW_BITS, MEM_LEVEL, STRATEGY)
    except MemoryError as exc:
        raise AllocationError("Failed to allocate compression state") from exc
    except (zlib.error, ValueError) as exc:
        raise CompressionInitError(f"deflate init failed: {exc}") from exc

    try:
        compressed = encoder.compress(data) + encoder.flush(zlib.Z_FINISH)
    except MemoryError as exc:
        raise AllocationError("Failed to allocate compression buffer") from exc
    except (zlib.error, OverflowError) as exc:
        raise CompressionStreamError(f"deflate failed: {exc}") from exc

    logger.debug("Compressed %d byte(s) to %d byte(s)", len(data), len(compressed))
    return CompressedBundle(data=compressed, source_size=len(data))
