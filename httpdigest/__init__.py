"""httpdigest - HTTP Digest authentication (RFC 2617/2069/7616) credentials for Python."""

from __future__ import annotations

# Models
from ._models import (
    Charset,
    DigestValue,
    ExtendedUsername,
    HashAlgorithm,
    PlainUsername,
    Qop,
    Username,
)

# Parameter codec
from ._params import (
    decode_extended_value,
    encode_extended_value,
    parse_params,
    split_params,
)

# Parsing and serialization
from ._parser import parse
from ._serializer import serialize

# Hashing and response generation
from ._hashing import hash_value
from ._generate import (
    generate_a1,
    generate_a2,
    generate_digest_using_hashed_a1,
    generate_digest_using_password,
    generate_digest_using_username_and_password,
    generate_hashed_a1,
    generate_hashed_a2,
    generate_kd,
    generate_simple_hashed_a1,
    generate_userhash,
)

# Validation
from ._validate import (
    validate_digest_using_hashed_a1,
    validate_digest_using_password,
    validate_digest_using_userhash_and_password,
    validate_userhash,
)

# Header adapter
from ._scheme import (
    format_authorization,
    get_auth_header_name,
    parse_authorization,
    parse_from_headers,
)

# Errors
from ._exceptions import (
    DigestError,
    GenerationError,
    InvalidCharsetError,
    InvalidExtendedValueError,
    InvalidNonceCountError,
    InvalidUserhashFlagError,
    MalformedParameterError,
    MissingClientNonceError,
    MissingFieldError,
    MissingQopFieldsError,
    ParseError,
    SchemeMismatchError,
    UnknownAlgorithmError,
    UnknownQopError,
    UsernameConflictError,
)

# Configuration and utilities
from ._types import DigestConfig
from ._utils import configure_logging, console, logger

__version__ = "0.1.0"

__all__ = [
    # Models
    "DigestValue",
    "Username",
    "PlainUsername",
    "ExtendedUsername",
    "HashAlgorithm",
    "Qop",
    "Charset",
    # Parameter codec
    "split_params",
    "parse_params",
    "decode_extended_value",
    "encode_extended_value",
    # Parsing and serialization
    "parse",
    "serialize",
    # Hashing and response generation
    "hash_value",
    "generate_a1",
    "generate_a2",
    "generate_hashed_a1",
    "generate_hashed_a2",
    "generate_kd",
    "generate_simple_hashed_a1",
    "generate_userhash",
    "generate_digest_using_password",
    "generate_digest_using_hashed_a1",
    "generate_digest_using_username_and_password",
    # Validation
    "validate_userhash",
    "validate_digest_using_password",
    "validate_digest_using_hashed_a1",
    "validate_digest_using_userhash_and_password",
    # Header adapter
    "parse_authorization",
    "format_authorization",
    "parse_from_headers",
    "get_auth_header_name",
    # Errors
    "DigestError",
    "ParseError",
    "MissingFieldError",
    "MalformedParameterError",
    "UsernameConflictError",
    "InvalidExtendedValueError",
    "InvalidNonceCountError",
    "UnknownAlgorithmError",
    "UnknownQopError",
    "InvalidCharsetError",
    "InvalidUserhashFlagError",
    "SchemeMismatchError",
    "GenerationError",
    "MissingClientNonceError",
    "MissingQopFieldsError",
    # Configuration and utilities
    "DigestConfig",
    "configure_logging",
    "console",
    "logger",
    "__version__",
]
