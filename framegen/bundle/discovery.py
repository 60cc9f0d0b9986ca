"""Frame discovery for bundle builds."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from ..errors import DirectoryScanError, EmptyFrameSetError

logger = logging.getLogger(__name__)

FRAME_SUFFIX = ".txt"


def is_frame_name(name: str) -> bool:
    """Return True when ``name`` carries the frame suffix (case-sensitive)."""

    return len(name) > len(FRAME_SUFFIX) and name.endswith(FRAME_SUFFIX)


def discover_frames(frames_dir: Path) -> List[str]:
    """Return frame file names in ``frames_dir`` sorted byte-wise ascending.

    Frame index in the bundle equals the rank of the name in this ordering,
    so the sort key is the filesystem encoding of the name rather than any
    locale-aware collation.
    """

    frames_dir = Path(frames_dir)
    names: List[str] = []
    try:
        with os.scandir(frames_dir) as entries:
            for entry in entries:
                if not is_frame_name(entry.name):
                    continue
                if not entry.is_file():
                    continue
                names.append(entry.name)
    except OSError as exc:
        raise DirectoryScanError(
            f"Failed to scan directory {frames_dir}: {exc.strerror or exc}",
            path=frames_dir,
        ) from exc

    if not names:
        raise EmptyFrameSetError(f"No frame files found in {frames_dir}", path=frames_dir)

    names.sort(key=os.fsencode)
    logger.debug("Discovered %d frame(s) in %s", len(names), frames_dir)
    return names
