import pytest

from filecrypt import bignum


def test_from_bytes_big_endian():
    assert bignum.from_bytes(b"\x01\x02") == 0x0102


def test_from_bytes_empty_is_zero():
    assert bignum.from_bytes(b"") == 0


def test_from_bytes_keeps_low_bytes_only():
    data = b"\xff" + b"\x00" * (bignum.BYTES - 1) + b"\x07"
    assert len(data) == bignum.BYTES + 1
    assert bignum.from_bytes(data) == (1 << (8 * (bignum.BYTES - 1))) * 0 + 7


def test_to_bytes_pads_with_zeros():
    assert bignum.to_bytes(0x0102, 4) == b"\x00\x00\x01\x02"


def test_to_bytes_truncates_high_bytes():
    assert bignum.to_bytes(0x010203, 2) == b"\x02\x03"


def test_to_bytes_negative_length_raises():
    with pytest.raises(ValueError):
        bignum.to_bytes(1, -1)


@pytest.mark.parametrize("value", [0, 1, 255, 2**64 + 5, 2**1023 + 12345])
def test_round_trip(value):
    assert bignum.from_bytes(bignum.to_bytes(value, 128)) == value


@pytest.mark.parametrize(
    "base,exponent,modulus",
    [(4, 13, 497), (2, 100, 1000003), (7, 0, 11), (123456789, 65537, 2**521 - 1)],
)
def test_mod_exp_matches_pow(base, exponent, modulus):
    assert bignum.mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_exp_zero_exponent_gives_one_even_for_modulus_one():
    assert bignum.mod_exp(5, 0, 1) == 1


def test_mod_exp_base_above_modulus_exponent_one():
    assert bignum.mod_exp(10, 1, 7) == pow(10, 1, 7)


def test_mod_exp_zero_modulus_wraps_at_width():
    assert bignum.mod_exp(3, 5, 0) == pow(3, 5, 2**bignum.BITS)
    assert bignum.mod_exp(2, bignum.BITS, 0) == 0


def test_mod_exp_fermat_invariant():
    p = 2**127 - 1
    assert bignum.mod_exp(3, p - 1, p) == 1