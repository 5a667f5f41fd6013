"""Hash dispatch for the Digest ``algorithm`` families."""

from __future__ import annotations

import hashlib

from ._models import HashAlgorithm


def _sha512_256_hex(data: bytes) -> str:
    # Truncated SHA-512, not the distinct-IV SHA-512/256 (matches RFC 7616 §3.9.2)
    return hashlib.sha512(data).hexdigest()[:64]


def _md5_hex(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


_HASHERS = {
    HashAlgorithm.MD5: _md5_hex,
    HashAlgorithm.SHA256: _sha256_hex,
    HashAlgorithm.SHA512_256: _sha512_256_hex,
}


def hash_value(algorithm: HashAlgorithm, data: bytes | str) -> str:
    """
    Hash data with the primitive behind ``algorithm``.

    The ``-sess`` suffix does not change the primitive.

    Args:
        algorithm: Digest algorithm
        data: Bytes to hash; text is encoded as UTF-8

    Returns:
        Lowercase hexadecimal digest (32 characters for MD5, 64 otherwise)
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return _HASHERS[algorithm.family](data)


__all__ = ["hash_value"]
