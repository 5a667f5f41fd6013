"""Shared console, logger and constants for the Digest codec."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Package logger; handlers are installed by configure_logging()
logger = logging.getLogger("httpdigest")

SCHEME = "Digest"

# Characters allowed unescaped in an RFC 5987 value (attr-char)
ATTR_CHARS = "!#$&+-.^_`|~"

# Extended-value charsets RFC 5987 requires recipients to support
EXTENDED_CHARSETS = {
    "utf-8": "UTF-8",
    "iso-8859-1": "ISO-8859-1",
}

# Canonical wire names of the credential parameters, in serialization order
PARAMETER_ORDER = (
    "username",
    "realm",
    "nonce",
    "nc",
    "response",
    "uri",
    "algorithm",
    "qop",
    "cnonce",
    "opaque",
    "charset",
    "userhash",
)


def configure_logging(level: str = "WARNING", debug: bool = False) -> None:
    """
    Route log records through a RichHandler.

    Intended for applications and the command line; the library itself only
    emits records on the ``httpdigest`` logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        debug: Shortcut for level=DEBUG
    """
    effective_level = "DEBUG" if debug else level
    logging.basicConfig(
        level=getattr(logging, effective_level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    if debug:
        logger.setLevel(logging.DEBUG)
