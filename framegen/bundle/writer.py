"""Write compressed bundles to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import FileWriteError
from .utils import write_bytes, write_bytes_atomic

logger = logging.getLogger(__name__)


def write_bundle(data: bytes, output_path: Path, *, atomic: bool = True) -> Path:
    """Write ``data`` to ``output_path`` in full or raise ``FileWriteError``.

    With ``atomic`` the destination is only replaced once every byte has
    been written and synced; otherwise it is truncated and written in place.
    """

    output_path = Path(output_path)
    writer = write_bytes_atomic if atomic else write_bytes
    try:
        written = writer(output_path, data)
    except OSError as exc:
        raise FileWriteError(
            f"Failed to create {output_path}: {exc.strerror or exc}",
            path=output_path,
        ) from exc

    if written != len(data):
        raise FileWriteError(
            f"Failed to write compressed data to {output_path}: wrote {written} of {len(data)} bytes",
            path=output_path,
        )

    logger.debug("Wrote %d byte(s) to %s", written, output_path)
    return output_path
