"""
Digest credential model (RFC 2617/7616).

Implements the structured form of an ``Authorization: Digest ...`` value:
- HashAlgorithm: the six ``algorithm`` tokens, with session variants
- Qop: quality of protection (auth, auth-int)
- Charset: the only charset RFC 7616 allows (UTF-8)
- Username: plain text/userhash or RFC 5987 extended value
- DigestValue: the complete, immutable credential

Values are never mutated after construction; use ``dataclasses.replace``
to derive a credential with different fields.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ============================================================================
# Enumerations
# ============================================================================


class HashAlgorithm(str, Enum):
    """Allowable values for the ``algorithm`` parameter."""

    MD5 = "MD5"
    MD5_SESS = "MD5-sess"
    SHA256 = "SHA-256"
    SHA256_SESS = "SHA-256-sess"
    SHA512_256 = "SHA-512-256"
    SHA512_256_SESS = "SHA-512-256-sess"

    @property
    def is_session(self) -> bool:
        """True for the ``-sess`` variants, which bind A1 to the nonces."""
        return self in _SESSION_FAMILIES

    @property
    def family(self) -> HashAlgorithm:
        """Non-session algorithm sharing this algorithm's hash primitive."""
        return _SESSION_FAMILIES.get(self, self)

    @classmethod
    def from_token(cls, token: str) -> HashAlgorithm:
        """
        Look up an algorithm by its wire token.

        Matching is case-sensitive, following RFC casing.

        Raises:
            ValueError: If the token is not a known algorithm
        """
        return cls(token)

    def __str__(self) -> str:
        return self.value


_SESSION_FAMILIES = {
    HashAlgorithm.MD5_SESS: HashAlgorithm.MD5,
    HashAlgorithm.SHA256_SESS: HashAlgorithm.SHA256,
    HashAlgorithm.SHA512_256_SESS: HashAlgorithm.SHA512_256,
}


class Qop(str, Enum):
    """Allowable values for the ``qop`` (quality of protection) parameter."""

    AUTH = "auth"
    AUTH_INT = "auth-int"

    def __str__(self) -> str:
        return self.value


class Charset(str, Enum):
    """Allowable values for the ``charset`` parameter."""

    UTF8 = "UTF-8"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Usernames
# ============================================================================


@dataclass(frozen=True)
class PlainUsername:
    """
    Username sent in the quoted ``username`` parameter.

    Holds either the percent-decoded username or, when the credential
    carries ``userhash=true``, the hexadecimal userhash.
    """

    value: str

    @property
    def raw(self) -> bytes:
        return self.value.encode("utf-8")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExtendedUsername:
    """
    Username sent in the RFC 5987 ``username*`` parameter.

    Attributes:
        charset: Canonical charset name (UTF-8 or ISO-8859-1)
        language: Language tag, possibly empty
        value: Undecoded username bytes in ``charset``
    """

    charset: str
    language: str
    value: bytes

    @property
    def raw(self) -> bytes:
        return self.value

    @property
    def text(self) -> str:
        return self.value.decode(self.charset)

    def __str__(self) -> str:
        return self.text


Username = typing.Union[PlainUsername, ExtendedUsername]


# ============================================================================
# Credential
# ============================================================================


@dataclass(frozen=True)
class DigestValue:
    """
    Parameters of the ``Authorization`` header when using the Digest scheme.

    Unless noted, each attribute maps to the wire parameter of the same name.

    Attributes:
        username: User name, userhash or extended username (``username``/``username*``)
        realm: Authentication realm
        nonce: Server-specified nonce
        nonce_count: Nonce count (``nc``); optional only in RFC 2069 mode
        response: Lowercase hexadecimal response digest
        request_uri: Absolute path or URI of the request (``uri``)
        algorithm: Hash algorithm used to compute ``response``
        qop: Quality of protection; ``None`` selects RFC 2069 mode
        client_nonce: Client nonce (``cnonce``); optional only in RFC 2069 mode
        opaque: Opaque string returned unchanged from the challenge
        charset: Character set used for the username and password
        userhash: Whether ``username`` is a userhash (RFC 7616)
    """

    username: Username
    realm: str
    nonce: str
    response: str
    request_uri: str
    nonce_count: Optional[int] = None
    algorithm: HashAlgorithm = HashAlgorithm.MD5
    qop: Optional[Qop] = None
    client_nonce: Optional[str] = None
    opaque: Optional[str] = None
    charset: Optional[Charset] = None
    userhash: bool = False

    def __post_init__(self) -> None:
        if self.nonce_count is not None and not 0 <= self.nonce_count <= 0xFFFFFFFF:
            raise ValueError(f"nonce_count out of range: {self.nonce_count}")
        if self.userhash and isinstance(self.username, ExtendedUsername):
            raise ValueError("userhash=true requires a plain username")

    @property
    def nc(self) -> Optional[str]:
        """Nonce count as the eight lowercase hex digits sent on the wire."""
        if self.nonce_count is None:
            return None
        return f"{self.nonce_count:08x}"


__all__ = [
    "Charset",
    "DigestValue",
    "ExtendedUsername",
    "HashAlgorithm",
    "PlainUsername",
    "Qop",
    "Username",
]
