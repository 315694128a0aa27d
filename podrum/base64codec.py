"""Base64 encoding and a lenient base64 decoder."""

from __future__ import annotations

import base64

BASE64_TABLE = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def _index(ch: str) -> int:
    # Characters outside the alphabet count as zero.
    return max(BASE64_TABLE.find(ch), 0)


def b64_decode(text: str) -> bytes:
    """Decode base64 text.

    Missing padding is tolerated, a single trailing character is ignored,
    and characters outside the alphabet decode as zero bits. Decoding stops
    once more than two padding positions have been seen.
    """
    out = bytearray()
    padding = 0
    for start in range(0, len(text), 4):
        chunk = text[start:start + 4]
        if len(chunk) < 2:
            break
        indices = []
        for position in range(4):
            if position < len(chunk) and chunk[position] != "=":
                indices.append(_index(chunk[position]))
            else:
                padding += 1
                indices.append(0)
        if padding > 2:
            break
        bits = (indices[0] << 18) | (indices[1] << 12) | (indices[2] << 6) | indices[3]
        out.append((bits >> 16) & 0xFF)
        if padding < 2:
            out.append((bits >> 8) & 0xFF)
        if padding < 1:
            out.append(bits & 0xFF)
    return bytes(out)


def b64_encode(data: bytes) -> str:
    """Encode bytes as padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")