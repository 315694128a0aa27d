import gzip
import zlib

import pytest

from podrum.compression import CompressionError, Mode, decode, encode

SAMPLE = b"the quick brown fox jumps over the lazy dog " * 50


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("level", [0, 1, 6, 9])
def test_roundtrip(mode, level):
    assert decode(encode(SAMPLE, level, mode), mode) == SAMPLE


def test_gzip_output_is_standard_gzip():
    compressed = encode(SAMPLE, 6, Mode.GZIP)
    assert compressed[:2] == b"\x1f\x8b"
    assert gzip.decompress(compressed) == SAMPLE


def test_deflate_output_is_zlib_stream():
    compressed = encode(SAMPLE, 9, Mode.DEFLATE)
    assert zlib.decompress(compressed) == SAMPLE


def test_raw_output_has_no_header():
    compressed = encode(SAMPLE, 9, Mode.RAW)
    assert zlib.decompress(compressed, -zlib.MAX_WBITS) == SAMPLE
    with pytest.raises(CompressionError):
        decode(compressed, Mode.DEFLATE)


def test_decode_reads_foreign_streams():
    assert decode(zlib.compress(SAMPLE), Mode.DEFLATE) == SAMPLE
    assert decode(gzip.compress(SAMPLE), Mode.GZIP) == SAMPLE


def test_compression_shrinks_repetitive_data():
    assert len(encode(SAMPLE, 9, Mode.DEFLATE)) < len(SAMPLE)


def test_empty_input_decodes_to_empty():
    assert decode(b"", Mode.GZIP) == b""


def test_empty_input_roundtrip():
    assert decode(encode(b"", 6, Mode.DEFLATE), Mode.DEFLATE) == b""


def test_truncated_stream_raises():
    compressed = encode(SAMPLE, 6, Mode.DEFLATE)
    with pytest.raises(CompressionError):
        decode(compressed[: len(compressed) // 2], Mode.DEFLATE)


def test_garbage_raises():
    with pytest.raises(CompressionError):
        decode(b"not compressed at all", Mode.DEFLATE)


def test_invalid_level_raises():
    with pytest.raises(CompressionError):
        encode(SAMPLE, 42, Mode.DEFLATE)


def test_unknown_mode_uses_zlib_framing():
    compressed = encode(SAMPLE, 6, 17)
    assert zlib.decompress(compressed) == SAMPLE
    assert decode(compressed, 17) == SAMPLE