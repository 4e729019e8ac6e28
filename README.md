# filecrypt

A small pure-Python library of cipher building blocks:

- `filecrypt.tea`: the Tiny Encryption Algorithm on single 8-byte blocks with
  a 16-byte key (32 rounds).
- `filecrypt.chacha20`: the ChaCha20 stream cipher with a 32-byte key, a
  12-byte nonce and a 32-bit block counter.
- `filecrypt.bignum`: fixed-width (1152-bit) unsigned integer helpers:
  big-endian byte conversion and modular exponentiation.

These are teaching-grade implementations. Do not use them to protect real data.

## Installation

```
pip install .
```

## Usage

```python
from filecrypt.tea import encrypt_block, decrypt_block
from filecrypt.chacha20 import chacha20_block, chacha20_crypt
from filecrypt.bignum import from_bytes, to_bytes, mod_exp

key = bytes(32)
nonce = bytes(12)
ciphertext = chacha20_crypt(b"hello", key, nonce)
assert chacha20_crypt(ciphertext, key, nonce) == b"hello"

block = encrypt_block(b"8 bytes!", bytes(16))
assert decrypt_block(block, bytes(16)) == b"8 bytes!"

n = from_bytes(b"\x01\x00")          # 256
assert to_bytes(mod_exp(n, 3, 1000), 2) == (216).to_bytes(2, "big")
```

### `filecrypt.tea`

- `encrypt_block(block, key)` / `decrypt_block(block, key)`: encrypt or
  decrypt one 8-byte block. Both halves of the block and the four key words
  are read as little-endian 32-bit integers. A block that is not 8 bytes or a
  key that is not 16 bytes raises `ValueError`.

### `filecrypt.chacha20`

- `chacha20_block(key, counter, nonce)`: the 64-byte keystream block for the
  given counter.
- `chacha20_crypt(data, key, nonce)`: XOR `data` with the keystream, starting
  at counter 1. The same call encrypts and decrypts.

A key that is not 32 bytes or a nonce that is not 12 bytes raises `ValueError`.

### `filecrypt.bignum`

- `from_bytes(data)`: read a big-endian byte string, keeping only its low
  144 bytes.
- `to_bytes(value, length)`: write the low `length` bytes of a value in
  big-endian order; a negative length raises `ValueError`.
- `mod_exp(base, exponent, modulus)`: `base ** exponent` reduced by
  `modulus`, with all operands and intermediate sums held to 1152 bits. A zero
  exponent always gives 1.

## What this package does not do

There is no command-line tool and no file handling: the package does not
write IVs or nonces, does not pad data or chain TEA blocks, and has no RSA
encryption or key-file format. It offers the primitives above only.

## Running the tests

```
pip install ".[test]"
pytest
```