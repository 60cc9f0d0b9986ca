from __future__ import annotations

import zlib

import pytest

from framegen.bundle import compressor
from framegen.bundle.compressor import compress_buffer, compression_parameters
from framegen.errors import CompressionInitError, CompressionStreamError


def test_compress_buffer_produces_raw_deflate(inflate) -> None:
    payload = b"AA\x01B" * 64

    bundle = compress_buffer(payload)

    assert inflate(bundle.data) == payload
    assert bundle.size == len(bundle.data)
    assert bundle.source_size == len(payload)


def test_compress_buffer_matches_zlib_body_without_container() -> None:
    payload = b"frame one\x01frame two\x01frame three"

    bundle = compress_buffer(payload)

    # zlib.compress wraps the same default stream in a 2-byte header and 4-byte adler32.
    assert bundle.data == zlib.compress(payload)[2:-4]
    with pytest.raises(zlib.error):
        zlib.decompress(bundle.data)


def test_compress_buffer_is_deterministic() -> None:
    payload = bytes(range(256)) * 32

    assert compress_buffer(payload).data == compress_buffer(payload).data


def test_compress_buffer_handles_empty_input(inflate) -> None:
    bundle = compress_buffer(b"")

    assert bundle.size > 0
    assert inflate(bundle.data) == b""


def test_compress_buffer_init_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(*args, **kwargs):
        raise zlib.error("Invalid initialization option")

    monkeypatch.setattr(compressor.zlib, "compressobj", _broken)

    with pytest.raises(CompressionInitError, match="deflate init failed"):
        compress_buffer(b"data")


def test_compress_buffer_stream_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    class _FailingEncoder:
        def compress(self, data: bytes) -> bytes:
            return b""

        def flush(self, mode: int) -> bytes:
            raise zlib.error("Error -2 while flushing")

    monkeypatch.setattr(compressor.zlib, "compressobj", lambda *args, **kwargs: _FailingEncoder())

    with pytest.raises(CompressionStreamError, match="deflate failed"):
        compress_buffer(b"data")


def test_compression_parameters_are_library_defaults() -> None:
    assert compression_parameters() == {
        "level": zlib.Z_DEFAULT_COMPRESSION,
        "wbits": -15,
        "mem_level": 8,
        "strategy": zlib.Z_DEFAULT_STRATEGY,
    }
