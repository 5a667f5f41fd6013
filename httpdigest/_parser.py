"""
Parser for Digest credentials.

Builds a DigestValue from the parameter list of an ``Authorization`` header
(without the ``Digest`` scheme token), enforcing mandatory parameters and the
username/userhash rules of RFC 7616. Consistency between ``qop``, ``nc`` and
``cnonce`` is left to response generation so RFC 2069 credentials still parse.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from ._exceptions import (
    InvalidCharsetError,
    InvalidNonceCountError,
    InvalidUserhashFlagError,
    MissingFieldError,
    ParseError,
    UnknownAlgorithmError,
    UnknownQopError,
    UsernameConflictError,
)
from ._models import (
    Charset,
    DigestValue,
    ExtendedUsername,
    HashAlgorithm,
    PlainUsername,
    Qop,
    Username,
)
from ._params import decode_extended_value, parse_params_string
from ._utils import logger

_NONCE_COUNT = re.compile(r"[0-9A-Fa-f]{8}")


def _required(params: Mapping[str, str], name: str) -> str:
    value = params.get(name)
    if value is None:
        raise MissingFieldError(name)
    return value


def _parse_username(params: Mapping[str, str]) -> Username:
    plain = params.get("username")
    encoded = params.get("username*")

    if plain is not None:
        if encoded is not None:
            raise UsernameConflictError("Both username and username* are present")
        return PlainUsername(plain)

    if encoded is None:
        raise MissingFieldError("username")
    if params.get("userhash") == "true":
        raise UsernameConflictError("username* cannot be combined with userhash=true")
    charset, language, value = decode_extended_value(encoded)
    return ExtendedUsername(charset=charset, language=language, value=value)


def _parse_nonce_count(value: str) -> int:
    # Exactly four bytes of hex, big-endian
    if not _NONCE_COUNT.fullmatch(value):
        raise InvalidNonceCountError(f"nc must be 8 hexadecimal digits, got: {value[:20]}")
    return int(value, 16)


def _parse_algorithm(value: str | None) -> HashAlgorithm:
    if value is None:
        return HashAlgorithm.MD5
    try:
        return HashAlgorithm.from_token(value)
    except ValueError:
        raise UnknownAlgorithmError(f"Unknown Digest algorithm: {value}") from None


def _parse_qop(value: str | None) -> Qop | None:
    if value is None:
        return None
    try:
        return Qop(value)
    except ValueError:
        raise UnknownQopError(f"Unknown qop value: {value}") from None


def _parse_charset(value: str | None) -> Charset | None:
    if value is None:
        return None
    if value.lower() != "utf-8":
        raise InvalidCharsetError(f"Unsupported charset: {value}")
    return Charset.UTF8


def _parse_userhash(value: str | None) -> bool:
    if value is None or value == "false":
        return False
    if value == "true":
        return True
    raise InvalidUserhashFlagError(f"userhash must be 'true' or 'false', got: {value}")


def parse(params: str | Mapping[str, str]) -> DigestValue:
    """
    Parse Digest credential parameters.

    Args:
        params: Parameter string (e.g., 'username="Mufasa", realm="...", ...')
            or a mapping already produced by parse_params()

    Returns:
        DigestValue instance

    Raises:
        ParseError: A subclass naming the first rule the parameters break

    Example:
        >>> digest = parse('username="Mufasa", realm="testrealm@host.com", '
        ...                'nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093", uri="/dir/index.html", '
        ...                'response="1949323746fe6a43ef61f9606e7febea"')
        >>> digest.algorithm
        <HashAlgorithm.MD5: 'MD5'>
    """
    try:
        if isinstance(params, str):
            params = parse_params_string(params)
        else:
            params = {key.lower(): value for key, value in params.items()}

        username = _parse_username(params)
        realm = _required(params, "realm")
        nonce = _required(params, "nonce")
        nc = params.get("nc")
        nonce_count = _parse_nonce_count(nc) if nc is not None else None
        response = _required(params, "response")
        request_uri = _required(params, "uri")

        return DigestValue(
            username=username,
            realm=realm,
            nonce=nonce,
            nonce_count=nonce_count,
            response=response,
            request_uri=request_uri,
            algorithm=_parse_algorithm(params.get("algorithm")),
            qop=_parse_qop(params.get("qop")),
            client_nonce=params.get("cnonce"),
            opaque=params.get("opaque"),
            charset=_parse_charset(params.get("charset")),
            userhash=_parse_userhash(params.get("userhash")),
        )
    except ParseError as exc:
        logger.debug(f"Rejected Digest credential: {exc}")
        raise


__all__ = ["parse"]
