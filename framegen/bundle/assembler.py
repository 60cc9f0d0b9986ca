"""Join loaded frames into one separator-delimited buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..errors import AllocationError, AssemblyError, EmptyFrameSetError
from .loader import FrameEntry

logger = logging.getLogger(__name__)

SEPARATOR = b"\x01"


@dataclass(frozen=True, slots=True)
class JoinedBuffer:
    data: bytes
    frame_count: int

    @property
    def size(self) -> int:
        return len(self.data)


def expected_joined_size(frames: Sequence[FrameEntry]) -> int:
    """Sum of frame sizes plus one separator between each adjacent pair."""

    if not frames:
        return 0
    return sum(frame.size for frame in frames) + len(frames) - 1


def assemble_frames(frames: Sequence[FrameEntry]) -> JoinedBuffer:
    """Concatenate ``frames`` in order with a single separator between them.

    Separator bytes already present inside a frame are not escaped; such
    frames are reported with a warning because a consumer splitting on the
    separator will see extra segments.
    """

    if not frames:
        raise EmptyFrameSetError("Cannot assemble an empty frame set")

    colliding = [frame.name for frame in frames if SEPARATOR in frame.content]
    if colliding:
        logger.warning(
            "Frame(s) contain the separator byte 0x%02x and will split on decode: %s",
            SEPARATOR[0],
            ", ".join(colliding),
        )

    try:
        data = SEPARATOR.join(frame.content for frame in frames)
    except MemoryError as exc:
        raise AllocationError("Failed to allocate joined buffer") from exc

    expected = expected_joined_size(frames)
    if len(data) != expected:
        raise AssemblyError(f"Joined buffer is {len(data)} bytes, expected {expected}")

    logger.debug("Assembled %d frame(s) into %d byte(s)", len(frames), len(data))
    return JoinedBuffer(data=data, frame_count=len(frames))
