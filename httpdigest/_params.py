"""
Parameter codec for Digest header values.

Turns the comma-separated ``key=value`` list of an authentication header into
a case-insensitive mapping of decoded values, and wraps the RFC 5987
extended-value encoding used by ``username*``.
"""

from __future__ import annotations

import re
import urllib.parse
import urllib.request
from collections.abc import Iterable

from ._exceptions import InvalidExtendedValueError, MalformedParameterError
from ._utils import ATTR_CHARS, EXTENDED_CHARSETS, logger

_EXTENDED_VALUE_CHARS = re.compile(r"(?:[A-Za-z0-9" + re.escape(ATTR_CHARS) + r"]|%[0-9A-Fa-f]{2})*")


def split_params(params_string: str) -> list[str]:
    """
    Split a parameter string into raw ``key=value`` tokens.

    Commas inside quoted strings do not split, and backslash escapes inside
    quotes are resolved.

    Args:
        params_string: Parameter string (e.g., 'realm="atlanta.com", nonce="abc"')

    Returns:
        List of raw tokens, empty tokens removed
    """
    return [token for token in urllib.request.parse_http_list(params_string) if token]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_params(tokens: Iterable[str]) -> dict[str, str]:
    """
    Build a parameter mapping from raw tokens.

    Keys are lowercased so lookups are case-insensitive. Values are trimmed,
    stripped of one pair of surrounding quotes and percent-decoded as UTF-8;
    extended (``name*``) values are kept as sent. The last occurrence of a
    duplicate key wins.

    Args:
        tokens: Raw tokens as produced by split_params()

    Returns:
        Dictionary of parameters

    Raises:
        MalformedParameterError: If a token has no '=', an empty key, or
            percent-escapes that do not decode as UTF-8
    """
    params: dict[str, str] = {}
    for token in tokens:
        if not token.strip():
            continue
        key, sep, value = token.partition("=")
        if not sep:
            raise MalformedParameterError(f"Parameter without '=': {token.strip()[:40]}")
        key = key.strip().lower()
        if not key:
            raise MalformedParameterError(f"Parameter without a name: {token.strip()[:40]}")
        value = _unquote(value.strip())
        if not key.endswith("*"):
            try:
                value = urllib.parse.unquote(value, errors="strict")
            except UnicodeDecodeError as exc:
                raise MalformedParameterError(
                    f"Parameter {key} is not valid percent-encoded UTF-8"
                ) from exc
        if key in params:
            logger.debug(f"Duplicate Digest parameter {key}, keeping last value")
        params[key] = value
    return params


def parse_params_string(params_string: str) -> dict[str, str]:
    """Split and decode a parameter string in one step."""
    return parse_params(split_params(params_string))


# ============================================================================
# RFC 5987 extended values
# ============================================================================


def decode_extended_value(text: str) -> tuple[str, str, bytes]:
    """
    Decode an RFC 5987 ``charset'language'value`` string.

    Args:
        text: Extended value as sent (e.g., "UTF-8''J%C3%A4s%C3%B8n%20Doe")

    Returns:
        Tuple of (canonical charset, language tag, undecoded value bytes)

    Raises:
        InvalidExtendedValueError: If the layout, charset or escapes are invalid
    """
    parts = text.strip().split("'", 2)
    if len(parts) != 3:
        raise InvalidExtendedValueError(f"Not an extended value: {text[:40]}")
    charset, language, encoded = parts
    canonical = EXTENDED_CHARSETS.get(charset.lower())
    if canonical is None:
        raise InvalidExtendedValueError(f"Unsupported extended value charset: {charset}")
    if not _EXTENDED_VALUE_CHARS.fullmatch(encoded):
        raise InvalidExtendedValueError(f"Invalid characters in extended value: {encoded[:40]}")
    value = urllib.parse.unquote_to_bytes(encoded)
    try:
        value.decode(canonical)
    except UnicodeDecodeError as exc:
        raise InvalidExtendedValueError(f"Extended value is not valid {canonical}") from exc
    return canonical, language, value


def encode_extended_value(charset: str, language: str, value: bytes) -> str:
    """Encode bytes as an RFC 5987 ``charset'language'value`` string."""
    return f"{charset}'{language}'{urllib.parse.quote(value, safe=ATTR_CHARS)}"


__all__ = [
    "decode_extended_value",
    "encode_extended_value",
    "parse_params",
    "parse_params_string",
    "split_params",
]
