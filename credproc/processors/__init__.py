"""
Credential Processors
=====================
One processor per hashing backend, all satisfying ``CredentialProcessor``.
"""

from .base import CredentialProcessor
from .kdf import KDFProcessor
from .pbkdf2 import PBKDF2Processor
from .scrypt import ScryptProcessor
from .bcrypt import BcryptProcessor
from .argon2 import Argon2Processor

__all__ = [
    "CredentialProcessor",
    "KDFProcessor",
    "PBKDF2Processor",
    "ScryptProcessor",
    "BcryptProcessor",
    "Argon2Processor",
]
