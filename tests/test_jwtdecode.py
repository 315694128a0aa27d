import base64
import json

import pytest

from podrum.jwtdecode import jwt_decode


def _segment(data) -> str:
    raw = json.dumps(data).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _token(payload) -> str:
    return f"{_segment({'alg': 'none'})}.{_segment(payload)}.signature"


def test_decodes_payload_object():
    payload = {"sub": "user", "admin": True, "level": 3}
    assert jwt_decode(_token(payload)) == payload


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 6])
def test_decodes_payload_regardless_of_padding(length):
    payload = {"s": "x" * length}
    assert jwt_decode(_token(payload)) == payload


def test_signature_part_is_ignored():
    payload = {"a": [1, 2]}
    token = _token(payload)
    assert jwt_decode(token + ".extra.parts") == payload
    assert jwt_decode(token.rsplit(".", 1)[0]) == payload


def test_token_without_payload_is_empty():
    assert jwt_decode("onlyheader") is None
    assert jwt_decode("") is None


def test_array_payload():
    payload = [{"k": "v"}, None]
    assert jwt_decode(_token(payload)) == payload