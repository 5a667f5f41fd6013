"""Error taxonomy for parsing and generating Digest credentials."""

from __future__ import annotations


class DigestError(ValueError):
    """Base class for every error raised by the Digest codec."""

    pass


# =============================================================================
# Parse-time errors
# =============================================================================


class ParseError(DigestError):
    """Raised when a Digest parameter string cannot be turned into a credential."""

    pass


class MissingFieldError(ParseError):
    """Raised when a mandatory parameter is absent."""

    def __init__(self, field: str):
        super().__init__(f"Digest credential missing required parameter: {field}")
        self.field = field


class MalformedParameterError(ParseError):
    """Raised when a parameter token is not a well-formed ``key=value`` pair."""

    pass


class UsernameConflictError(ParseError):
    """Raised when ``username`` and ``username*`` (or ``username*`` and ``userhash=true``) are combined."""

    pass


class InvalidExtendedValueError(ParseError):
    """Raised when an RFC 5987 extended value cannot be decoded."""

    pass


class InvalidNonceCountError(ParseError):
    """Raised when ``nc`` is not exactly eight hexadecimal digits."""

    pass


class UnknownAlgorithmError(ParseError):
    """Raised when ``algorithm`` is not one of the supported tokens."""

    pass


class UnknownQopError(ParseError):
    """Raised when ``qop`` is neither ``auth`` nor ``auth-int``."""

    pass


class InvalidCharsetError(ParseError):
    """Raised when ``charset`` is anything other than UTF-8."""

    pass


class InvalidUserhashFlagError(ParseError):
    """Raised when ``userhash`` is neither ``true`` nor ``false``."""

    pass


class SchemeMismatchError(ParseError):
    """Raised when a header value does not carry the Digest scheme."""

    pass


# =============================================================================
# Generation-time errors
# =============================================================================


class GenerationError(DigestError):
    """Raised when a response digest cannot be computed from a credential."""

    pass


class MissingClientNonceError(GenerationError):
    """Raised when a session algorithm is used without a client nonce."""

    pass


class MissingQopFieldsError(GenerationError):
    """Raised when qop is set but ``nc`` or ``cnonce`` is missing."""

    pass


__all__ = [
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
]
