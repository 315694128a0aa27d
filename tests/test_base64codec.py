import base64

import pytest

from podrum.base64codec import b64_decode, b64_encode


def test_decode_known_value():
    assert b64_decode("TWFu") == b"Man"


def test_encode_known_value():
    assert b64_encode(b"Man") == "TWFu"


@pytest.mark.parametrize(
    "data",
    [b"", b"a", b"ab", b"abc", b"abcd", bytes(range(256)), b"\xff\xfe\x00"],
)
def test_round_trip(data):
    assert b64_decode(b64_encode(data)) == data


@pytest.mark.parametrize("data", [b"x", b"xy", b"xyz", b"hello world"])
def test_encode_matches_standard(data):
    assert b64_encode(data) == base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize("data", [b"x", b"xy", b"hello world!!"])
def test_decode_tolerates_missing_padding(data):
    encoded = b64_encode(data)
    assert b64_decode(encoded.rstrip("=")) == data


def test_single_trailing_character_is_ignored():
    assert b64_decode("TWFuT") == b64_decode("TWFu")


def test_characters_outside_alphabet_decode_as_zero():
    assert b64_decode("!!!!") == b"\x00\x00\x00"


def test_empty_input():
    assert b64_decode("") == b""
    assert b64_encode(b"") == ""


def test_encoded_length_is_multiple_of_four():
    for size in range(10):
        assert len(b64_encode(b"q" * size)) % 4 == 0