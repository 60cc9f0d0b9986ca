"""Schema definitions for bundle metadata."""

from .bundle import Checksum, CompressionInfo, FrameBundleManifest, FrameRecord

__all__ = [
    "Checksum",
    "CompressionInfo",
    "FrameBundleManifest",
    "FrameRecord",
]
