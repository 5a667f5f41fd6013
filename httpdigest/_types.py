"""
Type definitions and configuration for the Digest codec.

This module centralizes the type aliases accepted by the public functions
and the configuration dataclass shared by validators, the header adapter and
the command line.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass

from ._models import HashAlgorithm, Username


# =============================================================================
# Input Types
# =============================================================================

HeaderTypes = Mapping[str, str]

# Raw username accepted by userhash and A1 computations
UsernameTypes = typing.Union[Username, str, bytes]

# Entity body for auth-int
BodyTypes = typing.Union[bytes, str]


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class DigestConfig:
    """Configuration for validation and header handling."""

    # Algorithm used when the caller does not name one (CLI)
    default_algorithm: HashAlgorithm = HashAlgorithm.MD5

    # Compare digests with hmac.compare_digest
    constant_time_compare: bool = True

    # Header lookup order for parse_from_headers()
    header_names: tuple[str, ...] = ("Authorization", "Proxy-Authorization")

    # Logging level used by the command line
    log_level: str = "WARNING"

