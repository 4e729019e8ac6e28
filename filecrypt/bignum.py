"""Fixed-width unsigned big integers with modular exponentiation.

Values are held to ``WORDS`` 32-bit words (1152 bits). Arithmetic wraps at
that width, and modular reduction subtracts the modulus at most once per
addition, just as a fixed-size word array would behave.
"""

from __future__ import annotations

WORDS = 36
WORD_BITS = 32
BITS = WORDS * WORD_BITS
BYTES = BITS // 8
MASK = (1 << BITS) - 1


def from_bytes(data: bytes) -> int:
    """Read a big-endian byte string, keeping only the low ``BYTES`` bytes."""
    return int.from_bytes(bytes(data)[-BYTES:], "big") if data else 0


def to_bytes(value: int, length: int) -> bytes:
    """Write the low ``length`` bytes of ``value`` in big-endian order."""
    if length < 0:
        raise ValueError("length must not be negative")
    value &= MASK
    if length == 0:
        return b""
    return (value & ((1 << (8 * length)) - 1)).to_bytes(length, "big")


def _mod_add(a: int, b: int, modulus: int) -> int:
    total = (a + b) & MASK
    if total >= modulus:
        total = (total - modulus) & MASK
    return total


def _mod_mul(a: int, b: int, modulus: int) -> int:
    result = 0
    for bit in range(b.bit_length()):
        if (b >> bit) & 1:
            result = _mod_add(result, a, modulus)
        a = _mod_add(a, a, modulus)
    return result


def _fixed_width_mod_exp(base: int, exponent: int, modulus: int) -> int:
    result = 1
    power = base
    while exponent:
        if exponent & 1:
            result = _mod_mul(result, power, modulus)
        power = _mod_mul(power, power, modulus)
        exponent >>= 1
    return result


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced by ``modulus`` at fixed width.

    The result starts at one, so a zero exponent always gives one.
    """
    base &= MASK
    exponent &= MASK
    modulus &= MASK
    # With reduced operands and no risk of overflow the fixed-width
    # algorithm gives exactly the mathematical result.
    if 1 < modulus <= (1 << (BITS - 1)) and base < modulus:
        return pow(base, exponent, modulus)
    return _fixed_width_mod_exp(base, exponent, modulus)