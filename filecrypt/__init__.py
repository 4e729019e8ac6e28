"""TEA block encryption, the ChaCha20 stream cipher and fixed-width bignum helpers."""

__version__ = "0.1.0"
__all__ = ["bignum", "tea", "chacha20"]