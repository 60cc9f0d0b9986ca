from __future__ import annotations

import logging
import os
import sys
import zlib
from pathlib import Path
from typing import Callable, Mapping

import pytest


@pytest.fixture()
def make_frames(tmp_path: Path) -> Callable[[Mapping[str, bytes]], Path]:
    """Return a factory writing ``{name: content}`` into a fresh frames directory."""

    def _make(frames: Mapping[str, bytes], name: str = "frames") -> Path:
        frames_dir = tmp_path / name
        frames_dir.mkdir()
        for filename, content in frames.items():
            (frames_dir / filename).write_bytes(content)
        return frames_dir

    return _make


@pytest.fixture()
def write_raw_frame() -> Callable[[Path, bytes, bytes], None]:
    """Return a writer for frames whose file name is given as raw bytes."""

    if sys.getfilesystemencoding().lower() != "utf-8":
        pytest.skip("requires a UTF-8 filesystem encoding")

    def _write(frames_dir: Path, raw_name: bytes, content: bytes) -> None:
        try:
            with open(os.path.join(os.fsencode(frames_dir), raw_name), "wb") as handle:
                handle.write(content)
        except OSError as exc:
            pytest.skip(f"filesystem rejects non-UTF-8 file names: {exc}")

    return _write


@pytest.fixture(autouse=True)
def _reset_framegen_logger():
    yield
    logger = logging.getLogger("framegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def inflate() -> Callable[[bytes], bytes]:
    def _inflate(data: bytes) -> bytes:
        return zlib.decompress(data, -zlib.MAX_WBITS)

    return _inflate
