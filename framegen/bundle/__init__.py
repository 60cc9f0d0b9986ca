"""Frame bundle assembly utilities."""

from .assembler import SEPARATOR, JoinedBuffer, assemble_frames
from .builder import BundleConfig, BundleResult, FrameBundleBuilder
from .compressor import CompressedBundle, compress_buffer
from .discovery import FRAME_SUFFIX, discover_frames
from .loader import FrameEntry, load_frames
from .manifest import build_manifest, dump_manifest, load_manifest
from .writer import write_bundle

__all__ = [
    "SEPARATOR",
    "FRAME_SUFFIX",
    "BundleConfig",
    "BundleResult",
    "FrameBundleBuilder",
    "FrameEntry",
    "JoinedBuffer",
    "CompressedBundle",
    "discover_frames",
    "load_frames",
    "assemble_frames",
    "compress_buffer",
    "write_bundle",
    "build_manifest",
    "dump_manifest",
    "load_manifest",
]
