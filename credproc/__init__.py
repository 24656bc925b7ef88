"""
Credential Processor
====================
Uniform password hashing and verification over PBKDF2, scrypt, bcrypt and
Argon2, with one algorithm active per deployment.

Usage:
    from credproc import create_processor

    processor = create_processor({"pbkdf2": True})
    stored = await processor.hash("correct horse")
    assert await processor.compare("correct horse", stored)
"""

__version__ = "0.1.0"

# Codec
from credproc.codec import HashRecord, encode, decode

# Errors
from credproc.exceptions import (
    CredentialError,
    RandomGenerationFailed,
    DerivationFailed,
    MalformedRecord,
    ConfigurationError,
)

# Options
from credproc.models import (
    PBKDF2Options,
    ScryptOptions,
    BcryptOptions,
    Argon2Options,
    merge,
)

# Processors
from credproc.processors import (
    CredentialProcessor,
    PBKDF2Processor,
    ScryptProcessor,
    BcryptProcessor,
    Argon2Processor,
)

# Factory
from credproc.factory import create_processor, available_algorithms

__all__ = [
    "__version__",
    # Codec
    "HashRecord",
    "encode",
    "decode",
    # Errors
    "CredentialError",
    "RandomGenerationFailed",
    "DerivationFailed",
    "MalformedRecord",
    "ConfigurationError",
    # Options
    "PBKDF2Options",
    "ScryptOptions",
    "BcryptOptions",
    "Argon2Options",
    "merge",
    # Processors
    "CredentialProcessor",
    "PBKDF2Processor",
    "ScryptProcessor",
    "BcryptProcessor",
    "Argon2Processor",
    # Factory
    "create_processor",
    "available_algorithms",
]
