"""MD5 message digest (RFC 1321)."""

from __future__ import annotations

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

BLOCK_SIZE = 64
DIGEST_SIZE = 16

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_S = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)


def _as_bytes(data: BytesLike) -> bytes:
    """Accept text (encoded as UTF-8) or any bytes-like object."""
    if isinstance(data, str):
        return data.encode("utf-8")
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"expected str or a bytes-like object, not {type(data).__name__}"
        ) from None


def _rotate_left(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Run the 64 MD5 rounds over one 64-byte block."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, (k, shift) in enumerate(zip(_K, _S)):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (b & d) | (c & ~d)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | ~d)
            g = (7 * i) % 16
        f = ((f & _MASK) + a + k + words[g]) & _MASK
        a, d, c, b = d, c, b, (b + _rotate_left(f, shift)) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hasher with a hashlib-like interface."""

    name = "md5"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _INITIAL_STATE
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

    def copy(self) -> "MD5":
        """Return an independent hasher with the same state."""
        clone = MD5()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding_len = (55 - self._length) % BLOCK_SIZE
        tail = self._pending + b"\x80" + b"\x00" * padding_len + struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lowercase hexadecimal characters."""
        return self.digest().hex()


def md5_hex(data: BytesLike) -> str:
    """Return the MD5 hex digest of ``data``."""
    return MD5(data).hexdigest()