"""Frame loading helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, List

from ..errors import AllocationError, FileReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FrameEntry:
    """One frame file read from disk as opaque bytes."""

    name: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def load_frames(frames_dir: Path, names: Iterable[str]) -> List[FrameEntry]:
    """Read every named frame from ``frames_dir``; the first failure aborts."""

    frames_dir = Path(frames_dir)
    frames: List[FrameEntry] = []
    for name in names:
        frames.append(read_frame(frames_dir / name))
    logger.debug(
        "Loaded %d frame(s), %d byte(s) total",
        len(frames),
        sum(frame.size for frame in frames),
    )
    return frames


def read_frame(path: Path) -> FrameEntry:
    """Read a single frame file, checking its length against the filesystem."""

    try:
        with path.open("rb") as handle:
            expected = _file_size(handle)
            content = handle.read()
    except MemoryError as exc:
        raise AllocationError(f"Failed to allocate buffer for {path}", path=path) from exc
    except OSError as exc:
        raise FileReadError(f"Failed to open {path}: {exc.strerror or exc}", path=path) from exc

    if len(content) != expected:
        raise FileReadError(
            f"Failed to read {path}: expected {expected} bytes, got {len(content)}",
            path=path,
        )
    return FrameEntry(name=path.name, content=content)


def _file_size(handle: BinaryIO) -> int:
    return os.fstat(handle.fileno()).st_size
