"""The Tiny Encryption Algorithm on single 8-byte blocks."""

from __future__ import annotations

import struct

BLOCK_SIZE = 8
KEY_SIZE = 16
DELTA = 0x9E3779B9
ROUNDS = 32
_M32 = 0xFFFFFFFF
_DECRYPT_SUM = 0xC6EF3720


def _unpack(block: bytes, key: bytes) -> tuple[int, int, tuple[int, ...]]:
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"TEA block must be {BLOCK_SIZE} bytes")
    if len(key) != KEY_SIZE:
        raise ValueError(f"TEA key must be {KEY_SIZE} bytes")
    v0, v1 = struct.unpack("<2I", bytes(block))
    return v0, v1, struct.unpack("<4I", bytes(key))


def encrypt_block(block: bytes, key: bytes) -> bytes:
    """Encrypt one 8-byte block with a 16-byte key."""
    v0, v1, (k0, k1, k2, k3) = _unpack(block, key)
    total = 0
    for _ in range(ROUNDS):
        total = (total + DELTA) & _M32
        v0 = (v0 + ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & _M32)) & _M32
        v1 = (v1 + ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & _M32)) & _M32
    return struct.pack("<2I", v0, v1)


def decrypt_block(block: bytes, key: bytes) -> bytes:
    """Decrypt one 8-byte block with a 16-byte key."""
    v0, v1, (k0, k1, k2, k3) = _unpack(block, key)
    total = _DECRYPT_SUM
    for _ in range(ROUNDS):
        v1 = (v1 - ((((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3)) & _M32)) & _M32
        v0 = (v0 - ((((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1)) & _M32)) & _M32
        total = (total - DELTA) & _M32
    return struct.pack("<2I", v0, v1)