"""Compressing and decompressing with zlib, raw deflate or gzip framing."""

from __future__ import annotations

import zlib
from enum import IntEnum


class Mode(IntEnum):
    """Framing around deflate data."""

    DEFLATE = 0
    RAW = 1
    GZIP = 2


class CompressionError(ValueError):
    """Raised when data cannot be compressed or decompressed."""


_WBITS = {
    Mode.DEFLATE: zlib.MAX_WBITS,
    Mode.RAW: -zlib.MAX_WBITS,
    Mode.GZIP: 16 + zlib.MAX_WBITS,
}


def _wbits(mode: int) -> int:
    try:
        return _WBITS[Mode(mode)]
    except ValueError:
        # Unknown modes fall back to zlib framing.
        return zlib.MAX_WBITS


def decode(data: bytes, mode: int = Mode.DEFLATE) -> bytes:
    """Decompress a complete stream; empty input gives empty output."""
    if not data:
        return b""
    decompressor = zlib.decompressobj(_wbits(mode))
    try:
        result = decompressor.decompress(data)
    except zlib.error as exc:
        raise CompressionError(str(exc)) from exc
    if not decompressor.eof:
        raise CompressionError("compressed stream is incomplete")
    return result


def encode(data: bytes, level: int = zlib.Z_DEFAULT_COMPRESSION, mode: int = Mode.DEFLATE) -> bytes:
    """Compress data in one pass at the given level."""
    try:
        compressor = zlib.compressobj(
            level, zlib.DEFLATED, _wbits(mode), 9, zlib.Z_DEFAULT_STRATEGY
        )
        return compressor.compress(data) + compressor.flush(zlib.Z_FINISH)
    except (zlib.error, ValueError) as exc:
        raise CompressionError(str(exc)) from exc