"""
Adapter between Digest credentials and HTTP header values.

Handles the ``Digest`` scheme token around the parameter list and looks up
credentials in a header mapping:
- Authorization (401 Unauthorized challenges)
- Proxy-Authorization (407 Proxy Authentication Required challenges)

The adapter works on plain strings and mappings, so any HTTP library can
call it from its own header type.
"""

from __future__ import annotations

from typing import Optional

from ._exceptions import SchemeMismatchError
from ._models import DigestValue
from ._parser import parse
from ._serializer import serialize
from ._types import DigestConfig, HeaderTypes
from ._utils import SCHEME, logger


def split_scheme(header_value: str) -> tuple[str, str]:
    """
    Split a header value into its scheme token and parameter list.

    Args:
        header_value: Header value (e.g., 'Digest username="Mufasa", ...')

    Returns:
        Tuple of (scheme, parameters); parameters may be empty
    """
    parts = header_value.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def parse_authorization(header_value: str) -> DigestValue:
    """
    Parse an Authorization or Proxy-Authorization header value.

    Args:
        header_value: Header value (e.g., 'Digest username="Mufasa", realm="..."')

    Returns:
        DigestValue instance

    Raises:
        SchemeMismatchError: If the value does not use the Digest scheme
        ParseError: If the parameters are malformed
    """
    scheme, params = split_scheme(header_value)
    if scheme.lower() != SCHEME.lower():
        raise SchemeMismatchError(f"Expected Digest credentials, got: {header_value.strip()[:20]}")
    return parse(params)


def format_authorization(digest: DigestValue) -> str:
    """
    Build an Authorization header value.

    Returns:
        Complete header value (e.g., 'Digest username="alice", ...')
    """
    return f"{SCHEME} {serialize(digest)}"


def _lookup(headers: HeaderTypes, name: str) -> Optional[str]:
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def parse_from_headers(
    headers: HeaderTypes,
    *,
    config: Optional[DigestConfig] = None,
) -> Optional[DigestValue]:
    """
    Extract and parse Digest credentials from request headers.

    Checks the headers named by ``config.header_names`` in order
    (Authorization, then Proxy-Authorization) and parses the first present.

    Args:
        headers: Headers mapping; names are matched case-insensitively
        config: Header lookup settings (optional)

    Returns:
        DigestValue if a credential header is present, None otherwise

    Raises:
        SchemeMismatchError: If the header uses another scheme
        ParseError: If the parameters are malformed

    Example:
        >>> digest = parse_from_headers(request.headers)
        >>> if digest and validate_digest_using_password(digest, "GET", b"", password):
        ...     ...
    """
    if config is None:
        config = DigestConfig()
    for name in config.header_names:
        value = _lookup(headers, name)
        if value is not None:
            logger.debug(f"Digest credentials found in {name}")
            return parse_authorization(value)
    return None


def get_auth_header_name(is_proxy: bool = False) -> str:
    """
    Get the header name carrying credentials.

    Returns:
        "Proxy-Authorization" for proxy challenges (407), "Authorization" otherwise
    """
    if is_proxy:
        return "Proxy-Authorization"
    return "Authorization"


__all__ = [
    "format_authorization",
    "get_auth_header_name",
    "parse_authorization",
    "parse_from_headers",
    "split_scheme",
]
