"""Shared helpers used by bundle tooling."""

from __future__ import annotations

import hashlib
import os
import secrets
import stat
from pathlib import Path
from typing import Tuple

_TEMP_ATTEMPTS = 100


def compute_sha256(data: bytes) -> str:
    """Return the SHA-256 checksum for an in-memory payload."""

    return hashlib.sha256(data).hexdigest()


def write_bytes(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path`` in place, returning the byte count written."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as handle:
        return handle.write(data)


def write_bytes_atomic(path: Path, data: bytes) -> int:
    """Write ``data`` beside ``path`` and rename it into place on success."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = _create_temp_beside(path)
    try:
        with os.fdopen(fd, "wb") as handle:
            written = handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        if written == len(data):
            _copy_existing_mode(path, tmp_path)
            os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
    return written


def _create_temp_beside(path: Path) -> Tuple[int, Path]:
    # 0o666 lets the kernel apply the umask, as a plain open() would.
    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    for _ in range(_TEMP_ATTEMPTS):
        candidate = path.parent / f".{path.name}.{secrets.token_hex(6)}.tmp"
        try:
            return os.open(candidate, flags, 0o666), candidate
        except FileExistsError:
            continue
    raise FileExistsError(f"No usable temporary name beside {path}")


def _copy_existing_mode(path: Path, tmp_path: Path) -> None:
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return
    tmp_path.chmod(mode)
