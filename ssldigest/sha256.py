"""SHA-256 and SHA-224 message digests (FIPS 180-4)."""

from __future__ import annotations

import struct

from .md5 import BytesLike, _as_bytes

BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_SHA256_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_SHA224_INITIAL = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)


def _rotate_right(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _schedule(block: bytes) -> list[int]:
    """Expand one 64-byte block into the 64-word message schedule."""
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x, y = w[i - 15], w[i - 2]
        s0 = _rotate_right(x, 7) ^ _rotate_right(x, 18) ^ (x >> 3)
        s1 = _rotate_right(y, 17) ^ _rotate_right(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)
    return w


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Run the 64 compression rounds over one block."""
    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, _schedule(block)):
        s1 = _rotate_right(e, 6) ^ _rotate_right(e, 11) ^ _rotate_right(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + s1 + ch + k + word) & _MASK
        s0 = _rotate_right(a, 2) ^ _rotate_right(a, 13) ^ _rotate_right(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (s0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + temp1) & _MASK, c, b, a, (temp1 + temp2) & _MASK
    return tuple(
        (old + new) & _MASK for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


class SHA256:
    """Incremental SHA-256 hasher with a hashlib-like interface."""

    name = "sha256"
    digest_size = 32
    block_size = BLOCK_SIZE
    _initial_state = _SHA256_INITIAL

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = self._initial_state
        self._pending = b""
        self._length = 0
        self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more message bytes into the hash."""
        chunk = _as_bytes(data)
        self._length += len(chunk)
        buffer = self._pending + chunk
        full = len(buffer) - len(buffer) % BLOCK_SIZE
        for start in range(0, full, BLOCK_SIZE):
            self._state = _compress(self._state, buffer[start:start + BLOCK_SIZE])
        self._pending = buffer[full:]

    def copy(self) -> "SHA256":
        """Return an independent hasher with the same state."""
        clone = type(self)()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding_len = (55 - self._length) % BLOCK_SIZE
        tail = self._pending + b"\x80" + b"\x00" * padding_len + struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">8I", *state)[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal characters."""
        return self.digest().hex()


class SHA224(SHA256):
    """SHA-224: SHA-256 with its own initial state, truncated to 28 bytes."""

    name = "sha224"
    digest_size = 28
    _initial_state = _SHA224_INITIAL


def sha256_hex(data: BytesLike) -> str:
    """Return the SHA-256 hex digest of ``data``."""
    return SHA256(data).hexdigest()


def sha224_hex(data: BytesLike) -> str:
    """Return the SHA-224 hex digest of ``data``."""
    return SHA224(data).hexdigest()