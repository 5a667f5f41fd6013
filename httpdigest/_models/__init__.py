"""
Digest Models Package.

This package contains the credential model and its enumerations.
"""

from ._digest import (
    Charset,
    DigestValue,
    ExtendedUsername,
    HashAlgorithm,
    PlainUsername,
    Qop,
    Username,
)

__all__ = [
    # Credential
    "DigestValue",
    # Usernames
    "Username",
    "PlainUsername",
    "ExtendedUsername",
    # Enumerations
    "HashAlgorithm",
    "Qop",
    "Charset",
]
