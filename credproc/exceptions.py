"""
Credential Processor Exceptions
===============================
Exception classes raised by hashing and verification.
"""

from typing import Optional


class CredentialError(Exception):
    """Base exception for all credential processing errors."""

    def __init__(
        self,
        message: str,
        algorithm: str = "unknown",
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.algorithm = algorithm
        self.cause = cause
        super().__init__(f"[{algorithm}] {message}")


class RandomGenerationFailed(CredentialError):
    """Raised when the entropy source cannot produce a salt."""
    pass


class DerivationFailed(CredentialError):
    """Raised when the underlying KDF or hashing library fails."""
    pass


class MalformedRecord(CredentialError):
    """Raised when a stored hash cannot be decoded."""
    pass


class ConfigurationError(CredentialError):
    """Raised on invalid algorithm selection or unknown options."""
    pass
