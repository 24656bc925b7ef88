"""
PBKDF2 Processor
================
PBKDF2-HMAC via ``hashlib.pbkdf2_hmac``. The record's cost parameter slot
holds the iteration count.
"""

import hashlib

from credproc.models import PBKDF2Options
from credproc.processors.kdf import KDFProcessor


class PBKDF2Processor(KDFProcessor[PBKDF2Options]):
    """
    PBKDF2 credential processor.

    Verification uses this processor's configured ``digest``; a record hashed
    under another digest will not match.

    Example:
        >>> processor = PBKDF2Processor(iterations=100_000, digest="sha256")
        >>> stored = await processor.hash("correct horse")
        >>> await processor.compare("correct horse", stored)
        True
    """

    algorithm = "pbkdf2"
    options_type = PBKDF2Options

    def _derive(self, password, salt, options, cost_parameter, key_length):
        return hashlib.pbkdf2_hmac(
            options.digest,
            password,
            salt,
            cost_parameter,
            dklen=key_length,
        )

    def _cost_parameter(self, options: PBKDF2Options) -> int:
        return options.iterations

    def _key_length(self, options: PBKDF2Options) -> int:
        return options.hash_bytes
