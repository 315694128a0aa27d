"""Decoding the payload of a JSON Web Token without verifying it."""

from __future__ import annotations

from typing import Optional

from podrum.base64codec import b64_decode
from podrum.jsonparser import parse

_URLSAFE = str.maketrans("-_", "+/")


def jwt_decode(token: str) -> Optional[dict | list]:
    """Return the parsed payload (the second dot-separated part) of a token."""
    parts = token.split(".")
    payload = parts[1] if len(parts) > 1 else ""
    raw = b64_decode(payload.translate(_URLSAFE))
    # The payload is treated as text ending at the first NUL byte.
    text = raw.split(b"\x00", 1)[0].decode("utf-8", errors="replace")
    return parse(text)