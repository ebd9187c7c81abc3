"""Error types raised while preparing circuit inputs."""

from __future__ import annotations


class CircuitInputError(Exception):
    """Base class for failures caused by the caller's inputs."""


class OversizedInputError(CircuitInputError, ValueError):
    """Raised when a value does not fit its fixed-size circuit slot."""


class SubstringNotFoundError(CircuitInputError, LookupError):
    """Raised when the claimed body hash is absent from the signed header."""


class UnsupportedVariantError(CircuitInputError, ValueError):
    """Raised for an unknown circuit type selector."""


class VerificationFailedError(CircuitInputError):
    """Raised by a DKIM verifier that rejects an email."""


class MalformedDkimResultError(CircuitInputError, ValueError):
    """Raised when a stored DKIM result is missing fields or badly encoded."""


class UnsupportedKeyError(CircuitInputError, ValueError):
    """Raised when the DKIM public key is not a parseable RSA key."""


class MalformedPaddingError(RuntimeError):
    """Raised when SHA-256 padding breaks its own structural invariants."""
