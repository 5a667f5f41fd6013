"""
Validation of Digest credentials against a known secret.

Every validator answers with a bool. A credential that cannot be checked
(for example qop without cnonce) is reported as invalid rather than raising,
so callers that need to tell malformed input from a wrong secret should call
the generators directly.
"""

from __future__ import annotations

import hmac
from collections.abc import Callable
from typing import Optional

from ._exceptions import GenerationError
from ._generate import (
    generate_digest_using_hashed_a1,
    generate_digest_using_username_and_password,
    generate_userhash,
)
from ._models import DigestValue, PlainUsername
from ._types import BodyTypes, DigestConfig, UsernameTypes
from ._utils import logger


def _matches(expected: str, supplied: str, config: Optional[DigestConfig]) -> bool:
    if config is None:
        config = DigestConfig()
    if config.constant_time_compare:
        return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))
    return expected == supplied


def validate_userhash(
    digest: DigestValue,
    username: UsernameTypes,
    *,
    config: Optional[DigestConfig] = None,
) -> bool:
    """
    Validate ``digest.username`` as the userhash of a real username.

    Args:
        digest: Parsed credential
        username: Real (unhashed) username
        config: Comparison settings (optional)

    Returns:
        False if ``digest.userhash`` is false, otherwise whether the userhash matches
    """
    if not digest.userhash or not isinstance(digest.username, PlainUsername):
        return False
    expected = generate_userhash(digest.algorithm, username, digest.realm)
    return _matches(expected, digest.username.value, config)


def _validate_response(
    generate: Callable[..., str],
    digest: DigestValue,
    args: tuple,
    config: Optional[DigestConfig],
) -> bool:
    try:
        expected = generate(digest, *args)
    except GenerationError as exc:
        logger.debug(f"Digest credential cannot be validated: {exc}")
        return False
    valid = _matches(expected, digest.response, config)
    if not valid:
        logger.debug(f"Digest response mismatch for realm {digest.realm!r}")
    return valid


def validate_digest_using_password(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    password: str | bytes,
    *,
    config: Optional[DigestConfig] = None,
) -> bool:
    """Validate ``digest.response`` given the request and a plain text password."""
    return _validate_response(
        generate_digest_using_username_and_password,
        digest,
        (method, entity_body, digest.username, password),
        config,
    )


def validate_digest_using_hashed_a1(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    hashed_a1: str,
    *,
    config: Optional[DigestConfig] = None,
) -> bool:
    """
    Validate ``digest.response`` given the request and a hexadecimal H(A1).

    Intended for htdigest-style secret stores.
    """
    return _validate_response(
        generate_digest_using_hashed_a1,
        digest,
        (method, entity_body, hashed_a1),
        config,
    )


def validate_digest_using_userhash_and_password(
    digest: DigestValue,
    method: str,
    entity_body: BodyTypes,
    username: UsernameTypes,
    password: str | bytes,
    *,
    config: Optional[DigestConfig] = None,
) -> bool:
    """
    Validate a userhash credential: first the userhash, then the response.

    The response is recomputed with the real ``username`` in A1 and is not
    checked at all when the userhash does not match.

    Args:
        digest: Parsed credential with ``userhash=true``
        method: HTTP request method
        entity_body: Request body, hashed only for auth-int
        username: Real (unhashed) username
        password: Plain text password
        config: Comparison settings (optional)

    Returns:
        True if both the userhash and the response match
    """
    if not validate_userhash(digest, username, config=config):
        logger.debug(f"Digest userhash mismatch for realm {digest.realm!r}")
        return False
    return _validate_response(
        generate_digest_using_username_and_password,
        digest,
        (method, entity_body, username, password),
        config,
    )


__all__ = [
    "validate_digest_using_hashed_a1",
    "validate_digest_using_password",
    "validate_digest_using_userhash_and_password",
    "validate_userhash",
]
