"""
Response generation for HTTP Digest Authentication (RFC 2617/7616).

Computes the values defined in RFC 2617 section 3.2.2:
- A1 and H(A1), including the ``-sess`` session variants
- A2 and H(A2), including ``auth-int`` entity-body hashing
- KD(secret, data) and the final ``response`` digest
- The RFC 7616 userhash

All values are byte strings joined with a literal ':' and used raw.
"""

from __future__ import annotations

from ._exceptions import MissingClientNonceError, MissingQopFieldsError
from ._hashing import hash_value
from ._models import DigestValue, ExtendedUsername, HashAlgorithm, PlainUsername, Qop
from ._types import BodyTypes, UsernameTypes


def _to_bytes(value: UsernameTypes | BodyTypes) -> bytes:
    if isinstance(value, (PlainUsername, ExtendedUsername)):
        return value.raw
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _join(*values: UsernameTypes) -> bytes:
    return b":".join(_to_bytes(value) for value in values)


# ============================================================================
# Userhash (RFC 7616, Section 3.4.4)
# ============================================================================


def generate_userhash(algorithm: HashAlgorithm, username: UsernameTypes, realm: str) -> str:
    """
    Generate a userhash: H(username ":" realm).

    Args:
        algorithm: Digest algorithm of the credential
        username: Real (unhashed) username
        realm: Authentication realm

    Returns:
        Lowercase hexadecimal userhash
    """
    return hash_value(algorithm, _join(username, realm))


# ============================================================================
# A1 (RFC 2617, Section 3.2.2.2)
# ============================================================================


def _simple_a1(username: UsernameTypes, realm: str, password: str | bytes) -> bytes:
    return _join(username, realm, password)


def generate_simple_hashed_a1(
    algorithm: HashAlgorithm,
    username: UsernameTypes,
    realm: str,
    password: str | bytes,
) -> str:
    """
    Generate H(username ":" realm ":" password).

    This is the A1 of the non-session algorithms, as kept by htdigest-style
    secret stores.
    """
    return hash_value(algorithm, _simple_a1(username, realm, password))


def generate_a1(
    digest: DigestValue,
    password: str | bytes,
    username: UsernameTypes | None = None,
) -> bytes:
    """
    Generate the A1 value for a credential.

    Args:
        digest: Parsed credential
        password: Plain text password
        username: Real username; defaults to ``digest.username``

    Returns:
        A1 bytes

    Raises:
        MissingClientNonceError: If a session algorithm has no client nonce
    """
    if username is None:
        username = digest.username
    a1 = _simple_a1(username, digest.realm, password)
    if not digest.algorithm.is_session:
        return a1

    if digest.client_nonce is None:
        raise MissingClientNonceError(
            f"{digest.algorithm.value} requires a client nonce (cnonce)"
        )
    return _join(hash_value(digest.algorithm, a1), digest.nonce, digest.client_nonce)


def generate_hashed_a1(
    digest: DigestValue,
    password: str | bytes,
    username: UsernameTypes | None = None,
) -> str:
    """Generate H(A1) for a credential."""
    return hash_value(digest.algorithm, generate_a1(digest, password, username))


# ============================================================================
# A2 (RFC 2617, Section 3.2.2.3)
# ============================================================================


def generate_a2(digest: DigestValue, method: str, entity_body: BodyTypes = b"") -> bytes:
    """Generate A2: method ":" uri, plus ":" H(entity-body) for auth-int."""
    if digest.qop is Qop.AUTH_INT:
        body_hash = hash_value(digest.algorithm, _to_bytes(entity_body))
        return _join(method, digest.request_uri, body_hash)
    return _join(method, digest.request_uri)


def generate_hashed_a2(digest: DigestValue, method: str, entity_body: BodyTypes = b"") -> str:
    return hash_value(digest.algorithm, generate_a2(digest, method, entity_body))


# ============================================================================
# Response (RFC 2617, Section 3.2.2.1)
# ============================================================================


def generate_kd(algorithm: HashAlgorithm, secret: str, data: bytes) -> str:
    """KD(secret, data) = H(secret ":" data)."""
    return hash_value(algorithm, _join(secret, data))


def _response_data(digest: DigestValue, hashed_a2: str) -> bytes:
    if digest.qop is None:
        # RFC 2069 compatibility (no qop)
        return _join(digest.nonce, hashed_a2)

    if digest.nonce_count is None or digest.client_nonce is None:
        raise MissingQopFieldsError(f"qop={digest.qop.value} requires both nc and cnonce")
    return _join(
        digest.nonce,
        digest.nc,
        digest.client_nonce,
        digest.qop.value,
        hashed_a2,
    )


def generate_digest_using_hashed_a1(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    hashed_a1: str,
) -> str:
    """
    Generate the response digest from a precomputed H(A1).

    Intended for servers that only store hashed secrets.

    Args:
        digest: Parsed credential
        method: HTTP request method (e.g., "GET")
        entity_body: Request body, hashed only for auth-int
        hashed_a1: Hexadecimal H(A1)

    Returns:
        Lowercase hexadecimal response digest

    Raises:
        MissingQopFieldsError: If qop is set but nc or cnonce is missing
    """
    hashed_a2 = generate_hashed_a2(digest, method, entity_body)
    return generate_kd(digest.algorithm, hashed_a1, _response_data(digest, hashed_a2))


def generate_digest_using_username_and_password(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    username: UsernameTypes,
    password: str | bytes,
) -> str:
    """Generate the response digest with A1 built from an explicit username."""
    hashed_a1 = generate_hashed_a1(digest, password, username)
    return generate_digest_using_hashed_a1(digest, method, entity_body, hashed_a1)


def generate_digest_using_password(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    password: str | bytes,
) -> str:
    """
    Generate the response digest from a plain text password.

    Args:
        digest: Parsed credential
        method: HTTP request method (e.g., "GET")
        entity_body: Request body, hashed only for auth-int
        password: Plain text password

    Returns:
        Lowercase hexadecimal response digest

    Raises:
        MissingClientNonceError: If a session algorithm has no client nonce
        MissingQopFieldsError: If qop is set but nc or cnonce is missing
    """
    return generate_digest_using_username_and_password(
        digest, method, entity_body, digest.username, password
    )


__all__ = [
    "generate_a1",
    "generate_a2",
    "generate_digest_using_hashed_a1",
    "generate_digest_using_password",
    "generate_digest_using_username_and_password",
    "generate_hashed_a1",
    "generate_hashed_a2",
    "generate_kd",
    "generate_simple_hashed_a1",
    "generate_userhash",
]
