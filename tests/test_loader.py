from __future__ import annotations

from pathlib import Path

import pytest

from framegen.bundle import loader
from framegen.bundle.loader import FrameEntry, load_frames, read_frame
from framegen.errors import FileReadError


def test_load_frames_preserves_bytes_and_order(make_frames) -> None:
    frames_dir = make_frames(
        {
            "a.txt": b"line one\r\nline two\n",
            "b.txt": b"",
            "c.txt": "café".encode("latin-1"),
        }
    )

    frames = load_frames(frames_dir, ["c.txt", "a.txt", "b.txt"])

    assert [frame.name for frame in frames] == ["c.txt", "a.txt", "b.txt"]
    assert frames[0].content == b"caf\xe9"
    assert frames[1].content == b"line one\r\nline two\n"
    assert frames[1].size == 19
    assert frames[2] == FrameEntry(name="b.txt", content=b"")
    assert frames[2].size == 0


def test_load_frames_missing_file_aborts(make_frames) -> None:
    frames_dir = make_frames({"a.txt": b"A"})

    with pytest.raises(FileReadError) as excinfo:
        load_frames(frames_dir, ["a.txt", "gone.txt"])

    assert excinfo.value.path == frames_dir / "gone.txt"


def test_read_frame_detects_short_read(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"abc")
    monkeypatch.setattr(loader, "_file_size", lambda handle: 10)

    with pytest.raises(FileReadError, match="expected 10 bytes, got 3"):
        read_frame(path)


def test_frame_entry_is_immutable() -> None:
    entry = FrameEntry(name="a.txt", content=b"A")

    with pytest.raises(AttributeError):
        entry.content = b"B"  # type: ignore[misc]
