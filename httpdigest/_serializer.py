"""Serializer rendering a DigestValue as Digest header parameters."""

from __future__ import annotations

from ._models import DigestValue, ExtendedUsername
from ._params import encode_extended_value


def _quote(value: str) -> str:
    # parse_params percent-decodes quoted values
    escaped = value.replace("%", "%25").replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def serialize(digest: DigestValue) -> str:
    """
    Render a credential in canonical parameter order.

    Quoted-string parameters are escaped; ``userhash`` is only emitted when
    true and ``algorithm`` is always emitted.

    Args:
        digest: Credential to render

    Returns:
        Parameter list without the scheme token
        Example: 'username="Mufasa", realm="testrealm@host.com", ...'
    """
    if isinstance(digest.username, ExtendedUsername):
        username = digest.username
        parts = [
            "username*="
            + encode_extended_value(username.charset, username.language, username.value)
        ]
    else:
        parts = [f"username={_quote(digest.username.value)}"]

    parts.extend(
        [
            f"realm={_quote(digest.realm)}",
            f"nonce={_quote(digest.nonce)}",
        ]
    )
    if digest.nonce_count is not None:
        parts.append(f"nc={digest.nc}")
    parts.extend(
        [
            f"response={_quote(digest.response)}",
            f"uri={_quote(digest.request_uri)}",
            f"algorithm={digest.algorithm.value}",
        ]
    )
    if digest.qop is not None:
        parts.append(f"qop={digest.qop.value}")
    if digest.client_nonce is not None:
        parts.append(f"cnonce={_quote(digest.client_nonce)}")
    if digest.opaque is not None:
        parts.append(f"opaque={_quote(digest.opaque)}")
    if digest.charset is not None:
        parts.append(f"charset={digest.charset.value}")
    if digest.userhash:
        parts.append("userhash=true")

    return ", ".join(parts)


__all__ = ["serialize"]
