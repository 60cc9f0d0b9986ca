"""Pydantic models describing frame bundle metadata."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Checksum(BaseModel):
    sha256: str = Field(..., description="SHA-256 checksum for the bundle file.")

    model_config = ConfigDict(extra="forbid")


class CompressionInfo(BaseModel):
    level: int
    wbits: int
    mem_level: int
    strategy: int

    model_config = ConfigDict(extra="forbid")


class FrameRecord(BaseModel):
    index: int = Field(..., ge=0)
    name: str
    size: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid")


class FrameBundleManifest(BaseModel):
    format: Literal["raw-deflate"] = "raw-deflate"
    separator: int = Field(default=1, ge=0, le=255, description="Byte value placed between frames.")
    built_at: datetime
    frames: List[FrameRecord] = Field(..., min_length=1)
    joined_size: int = Field(..., ge=0)
    compressed_size: int = Field(..., ge=0)
    compression: CompressionInfo
    checksum: Checksum

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_layout(self) -> "FrameBundleManifest":
        indices = [frame.index for frame in self.frames]
        if indices != list(range(len(self.frames))):
            raise ValueError("Frame indices must be contiguous and start at 0")
        expected = sum(frame.size for frame in self.frames) + len(self.frames) - 1
        if self.joined_size != expected:
            raise ValueError(f"joined_size {self.joined_size} does not match frames (expected {expected})")
        return self
