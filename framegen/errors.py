"""Error taxonomy for frame bundle builds."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FrameBundleError(RuntimeError):
    """Base class for every fatal bundle build failure."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class DirectoryScanError(FrameBundleError):
    """Raised when the frames directory cannot be listed."""


class EmptyFrameSetError(FrameBundleError):
    """Raised when no frame files are available to bundle."""


class FileReadError(FrameBundleError):
    """Raised when a frame file cannot be read in full."""


class AllocationError(FrameBundleError):
    """Raised when a buffer for frame data cannot be allocated."""


class AssemblyError(FrameBundleError):
    """Raised when the joined buffer does not match its expected layout."""


class CompressionInitError(FrameBundleError):
    """Raised when the DEFLATE encoder cannot be initialised."""


class CompressionStreamError(FrameBundleError):
    """Raised when the DEFLATE encoder fails while producing output."""


class FileWriteError(FrameBundleError):
    """Raised when the bundle cannot be written to its destination."""


class ConfigurationError(FrameBundleError):
    """Raised when settings cannot be parsed."""


__all__ = [
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
