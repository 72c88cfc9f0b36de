import hashlib

import pytest

from ssldigest.md5 import MD5, md5_hex


def test_empty_message():
    assert md5_hex(b"") == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc():
    assert md5_hex("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_quick_brown_fox():
    text = "The quick brown fox jumps over the lazy dog"
    assert md5_hex(text) == "9e107d9d372bb6826bd81d3542a419d6"


@pytest.mark.parametrize(
    "length", [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000]
)
def test_matches_reference_at_block_boundaries(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert md5_hex(data) == hashlib.md5(data).hexdigest()


def test_str_is_encoded_as_utf8():
    text = "héllo wörld"
    assert md5_hex(text) == md5_hex(text.encode("utf-8"))


def test_incremental_update_matches_one_shot():
    data = b"Testing" * 50
    hasher = MD5()
    for start in range(0, len(data), 13):
        hasher.update(data[start:start + 13])
    assert hasher.hexdigest() == md5_hex(data)


def test_digest_does_not_finalize_state():
    hasher = MD5(b"first part ")
    before = hasher.hexdigest()
    assert hasher.hexdigest() == before
    hasher.update(b"second part")
    assert hasher.hexdigest() == md5_hex(b"first part second part")


def test_digest_and_hexdigest_agree():
    hasher = MD5(b"some message")
    raw = hasher.digest()
    assert len(raw) == 16
    assert raw.hex() == hasher.hexdigest()


def test_copy_is_independent():
    original = MD5(b"shared prefix")
    clone = original.copy()
    clone.update(b" extra")
    assert original.hexdigest() == md5_hex(b"shared prefix")
    assert clone.hexdigest() == md5_hex(b"shared prefix extra")


def test_bytes_like_inputs():
    data = b"bytes-like input"
    assert md5_hex(bytearray(data)) == md5_hex(data)
    assert md5_hex(memoryview(data)) == md5_hex(data)


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        md5_hex(12345)


def test_hexdigest_format():
    result = md5_hex(b"format check")
    assert len(result) == 32
    assert set(result) <= set("0123456789abcdef")