"""Build-time packer for raw DEFLATE frame bundles."""

__version__ = "0.1.0"
from .bundle.builder import BundleConfig, BundleResult, FrameBundleBuilder
from .config import FramegenSettings, load_settings
from .errors import (
    AllocationError,
    AssemblyError,
    CompressionInitError,
    CompressionStreamError,
    ConfigurationError,
    DirectoryScanError,
    EmptyFrameSetError,
    FileReadError,
    FileWriteError,
    FrameBundleError,
)
from .schemas.bundle import FrameBundleManifest

__all__ = [
    "__version__",
    "BundleConfig",
    "BundleResult",
    "FrameBundleBuilder",
    "FrameBundleManifest",
    "FramegenSettings",
    "load_settings",
    "FrameBundleError",
    "DirectoryScanError",
    "EmptyFrameSetError",
    "FileReadError",
    "AllocationError",
    "AssemblyError",
    "CompressionInitError",
    "CompressionStreamError",
    "FileWriteError",
    "ConfigurationError",
]
