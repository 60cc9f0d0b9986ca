"""Manifest helpers for frame bundles."""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Sequence

from ..schemas.bundle import FrameBundleManifest
from .assembler import SEPARATOR
from .compressor import compression_parameters
from .loader import FrameEntry
from .writer import write_bundle


def build_manifest(
    frames: Sequence[FrameEntry],
    *,
    joined_size: int,
    compressed_size: int,
    sha256: str,
    built_at: datetime,
) -> FrameBundleManifest:
    """Describe a bundle so consumers can map segments to frame names."""

    payload = {
        "separator": SEPARATOR[0],
        "built_at": built_at,
        "frames": [
            {"index": index, "name": manifest_frame_name(frame.name), "size": frame.size}
            for index, frame in enumerate(frames)
        ],
        "joined_size": joined_size,
        "compressed_size": compressed_size,
        "compression": compression_parameters(),
        "checksum": {"sha256": sha256},
    }
    return FrameBundleManifest.model_validate(payload)


def load_manifest(path: Path) -> FrameBundleManifest:
    """Load a manifest from JSON."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    return FrameBundleManifest.model_validate(payload)


def dump_manifest(manifest: FrameBundleManifest, path: Path, *, atomic: bool = True) -> Path:
    """Write a manifest to disk."""

    return write_bundle(_render(manifest), path, atomic=atomic)


def manifest_frame_name(name: str) -> str:
    """Return ``name`` as valid UTF-8 text, escaping undecodable filename bytes."""

    return os.fsencode(name).decode("utf-8", "backslashreplace")


def _render(manifest: FrameBundleManifest) -> bytes:
    return (manifest.model_dump_json(indent=2) + "\n").encode("utf-8")
