"""The ChaCha20 stream cipher with a 96-bit nonce and 32-bit counter."""

from __future__ import annotations

import struct

KEY_SIZE = 32
NONCE_SIZE = 12
BLOCK_SIZE = 64
_M32 = 0xFFFFFFFF
_CONSTANTS = struct.unpack("<4I", b"expand 32-byte k")

_ROUND_INDICES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _M32


def _quarter_round(state: list[int], a: int, b: int, c: int, d: int) -> None:
    state[a] = (state[a] + state[b]) & _M32
    state[d] = _rotl(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _M32
    state[b] = _rotl(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b]) & _M32
    state[d] = _rotl(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _M32
    state[b] = _rotl(state[b] ^ state[c], 7)


def _check(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"ChaCha20 key must be {KEY_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"ChaCha20 nonce must be {NONCE_SIZE} bytes")


def chacha20_block(key: bytes, counter: int, nonce: bytes) -> bytes:
    """Return the 64-byte keystream block for ``counter``."""
    _check(key, nonce)
    initial = [
        *_CONSTANTS,
        *struct.unpack("<8I", bytes(key)),
        counter & _M32,
        *struct.unpack("<3I", bytes(nonce)),
    ]
    working = list(initial)
    for _ in range(10):
        for indices in _ROUND_INDICES:
            _quarter_round(working, *indices)
    return struct.pack("<16I", *((w + s) & _M32 for w, s in zip(working, initial)))


def chacha20_crypt(data: bytes, key: bytes, nonce: bytes) -> bytes:
    """Encrypt or decrypt ``data``; the keystream starts at counter 1."""
    _check(key, nonce)
    data = bytes(data)
    out = bytearray()
    counter = 1
    for offset in range(0, len(data), BLOCK_SIZE):
        chunk = data[offset:offset + BLOCK_SIZE]
        stream = chacha20_block(key, counter, nonce)[: len(chunk)]
        out += bytes(x ^ y for x, y in zip(chunk, stream))
        counter = (counter + 1) & _M32
    return bytes(out)