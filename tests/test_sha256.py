import hashlib

import pytest

from ssldigest.sha256 import SHA224, SHA256, sha224_hex, sha256_hex

SAMPLES = [
    b"",
    b"a",
    b"abc",
    b"Testing",
    b"x" * 55,
    b"y" * 56,
    b"z" * 63,
    b"q" * 64,
    b"r" * 65,
    b"s" * 119,
    b"t" * 120,
    bytes(range(256)) * 5,
]


def test_sha256_abc_vector():
    assert sha256_hex("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha256_empty_vector():
    assert sha256_hex(b"") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha224_abc_vector():
    assert sha224_hex(b"abc") == (
        "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7"
    )


@pytest.mark.parametrize("data", SAMPLES)
def test_sha256_matches_hashlib(data):
    assert sha256_hex(data) == hashlib.sha256(data).hexdigest()


@pytest.mark.parametrize("data", SAMPLES)
def test_sha224_matches_hashlib(data):
    assert sha224_hex(data) == hashlib.sha224(data).hexdigest()


def test_digest_lengths():
    assert len(SHA256(b"abc").digest()) == 32
    assert len(SHA224(b"abc").digest()) == 28
    assert len(sha256_hex(b"abc")) == 64
    assert len(sha224_hex(b"abc")) == 56


@pytest.mark.parametrize("cls", [SHA256, SHA224])
def test_incremental_update_equals_one_shot(cls):
    data = bytes(range(200)) * 3
    hasher = cls()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.hexdigest() == cls(data).hexdigest()


@pytest.mark.parametrize("cls", [SHA256, SHA224])
def test_digest_does_not_finalize(cls):
    hasher = cls(b"hello")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" world")
    assert hasher.digest() == cls(b"hello world").digest()


def test_hexdigest_is_hex_of_digest():
    hasher = SHA256(b"some data")
    assert hasher.hexdigest() == hasher.digest().hex()


def test_text_is_encoded_as_utf8():
    assert sha256_hex("héllo") == sha256_hex("héllo".encode("utf-8"))


def test_copy_is_independent():
    original = SHA224(b"prefix")
    clone = original.copy()
    clone.update(b"-suffix")
    assert original.hexdigest() == sha224_hex(b"prefix")
    assert clone.hexdigest() == sha224_hex(b"prefix-suffix")


def test_sha224_differs_from_truncated_sha256():
    assert sha224_hex(b"abc") != sha256_hex(b"abc")[:56]


def test_bytearray_and_memoryview_accepted():
    data = b"buffer contents"
    assert sha256_hex(bytearray(data)) == sha256_hex(data)
    assert sha256_hex(memoryview(data)) == sha256_hex(data)


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        SHA256(12345)