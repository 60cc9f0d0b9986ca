"""Frame bundle build orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ..schemas.bundle import FrameBundleManifest
from .assembler import assemble_frames
from .compressor import compress_buffer
from .discovery import discover_frames
from .loader import load_frames
from .manifest import build_manifest, dump_manifest
from .utils import compute_sha256
from .writer import write_bundle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BundleConfig:
    """Configuration describing one bundle run."""

    frames_dir: Path
    output_path: Path
    manifest_path: Optional[Path] = None
    atomic_write: bool = True
    built_at: Optional[datetime] = None


@dataclass(slots=True)
class BundleResult:
    output_path: Path
    frame_names: List[str]
    frame_sizes: List[int]
    joined_size: int
    compressed_size: int
    sha256: str
    manifest_path: Optional[Path] = None
    logs: List[str] = field(default_factory=list)


class FrameBundleBuilder:
    """Runs discover, load, assemble, compress and write for one bundle."""

    def build(self, config: BundleConfig) -> BundleResult:
        """Build the bundle described by ``config`` and return its summary.

        Every stage raises a ``FrameBundleError`` subclass on failure, and
        nothing is written to ``config.output_path`` unless all earlier
        stages succeeded.
        """

        frames_dir = Path(config.frames_dir)
        output_path = Path(config.output_path)

        names = discover_frames(frames_dir)
        frames = load_frames(frames_dir, names)
        joined = assemble_frames(frames)
        compressed = compress_buffer(joined.data)
        sha = compute_sha256(compressed.data)

        manifest: Optional[FrameBundleManifest] = None
        if config.manifest_path is not None:
            manifest = build_manifest(
                frames,
                joined_size=joined.size,
                compressed_size=compressed.size,
                sha256=sha,
                built_at=config.built_at or datetime.now(timezone.utc),
            )

        write_bundle(compressed.data, output_path, atomic=config.atomic_write)
        logs = [f"Bundle written to {output_path}"]

        manifest_path: Optional[Path] = None
        if manifest is not None:
            manifest_path = dump_manifest(manifest, Path(config.manifest_path), atomic=config.atomic_write)
            logs.append(f"Manifest written to {manifest_path}")

        logger.debug("Bundle %s built from %d frame(s)", output_path, len(frames))
        return BundleResult(
            output_path=output_path,
            frame_names=[frame.name for frame in frames],
            frame_sizes=[frame.size for frame in frames],
            joined_size=joined.size,
            compressed_size=compressed.size,
            sha256=sha,
            manifest_path=manifest_path,
            logs=logs,
        )
