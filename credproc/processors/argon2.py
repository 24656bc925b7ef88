"""
Argon2 Processor
================
Pass-through to ``argon2-cffi``. Encoded hashes use the library's own
``$argon2id$v=19$m=...,t=...,p=...$salt$hash`` format.
"""

from concurrent.futures import Executor
from typing import Any, Mapping, Optional

import structlog
from argon2 import PasswordHasher, Type
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)
from argon2.low_level import hash_secret_raw

from credproc.exceptions import ConfigurationError, DerivationFailed, MalformedRecord
from credproc.models import Argon2Options, merge
from credproc.processors.base import generate_salt, run_blocking, to_bytes

logger = structlog.get_logger(__name__)

ARGON2_TYPES = {
    "d": Type.D,
    "i": Type.I,
    "id": Type.ID,
    "argon2d": Type.D,
    "argon2i": Type.I,
    "argon2id": Type.ID,
}


def resolve_type(value: Any) -> Type:
    """Map a variant name, ``Type`` or numeric id (0=d, 1=i, 2=id) to ``Type``."""
    if isinstance(value, Type):
        return value
    if isinstance(value, int):
        try:
            return Type(value)
        except ValueError:
            pass
    elif isinstance(value, str) and value.lower() in ARGON2_TYPES:
        return ARGON2_TYPES[value.lower()]
    raise ConfigurationError(f"Unknown Argon2 type {value!r}", algorithm="argon2")


def build_hasher(options: Argon2Options) -> PasswordHasher:
    return PasswordHasher(
        time_cost=options.time_cost,
        memory_cost=options.memory_cost,
        parallelism=options.parallelism,
        hash_len=options.hash_len,
        salt_len=options.salt_len,
        type=resolve_type(options.type),
    )


class Argon2Processor:
    """
    Argon2 credential processor.

    With ``raw=True``, :meth:`hash` returns the hex-encoded derived bytes
    instead of an encoded hash; such output cannot be passed to
    :meth:`compare`.
    """

    algorithm = "argon2"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        executor: Optional[Executor] = None,
        **overrides: Any,
    ):
        self.options = merge(merge(Argon2Options(), options), overrides)
        self.executor = executor
        self._hasher = build_hasher(self.options)
        logger.debug(
            "Credential processor created",
            algorithm=self.algorithm,
            time_cost=self.options.time_cost,
            memory_cost=self.options.memory_cost,
            parallelism=self.options.parallelism,
        )

    def hash_sync(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Hash a password with a fresh Argon2 salt."""
        effective = merge(self.options, options)
        hasher = self._hasher if effective is self.options else build_hasher(effective)

        try:
            if effective.raw:
                salt = generate_salt(effective.salt_len, self.algorithm)
                return hash_secret_raw(
                    secret=to_bytes(password),
                    salt=salt,
                    time_cost=effective.time_cost,
                    memory_cost=effective.memory_cost,
                    parallelism=effective.parallelism,
                    hash_len=effective.hash_len,
                    type=resolve_type(effective.type),
                ).hex()
            return hasher.hash(password)
        except (HashingError, ValueError, TypeError) as e:
            logger.error("Argon2 hashing failed", algorithm=self.algorithm, error=str(e))
            raise DerivationFailed(
                "Argon2 hashing failed", algorithm=self.algorithm, cause=e
            ) from e

    def compare_sync(self, incoming: str, stored: str) -> bool:
        """Verify a password against an Argon2 encoded hash."""
        try:
            return self._hasher.verify(stored, incoming)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, UnicodeError) as e:
            logger.warning("Malformed stored hash", algorithm=self.algorithm, error=str(e))
            raise MalformedRecord(
                "Not an Argon2 hash", algorithm=self.algorithm, cause=e
            ) from e
        except (VerificationError, TypeError) as e:
            # argon2 reports an unparsable encoded hash as a verification error
            if str(e) == "Decoding failed":
                logger.warning("Malformed stored hash", algorithm=self.algorithm, error=str(e))
                raise MalformedRecord(
                    "Not an Argon2 hash", algorithm=self.algorithm, cause=e
                ) from e
            logger.error("Argon2 verification failed", algorithm=self.algorithm, error=str(e))
            raise DerivationFailed(
                "Argon2 verification failed", algorithm=self.algorithm, cause=e
            ) from e

    async def hash(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        return await run_blocking(
            self.hash_sync, password, options, executor=self.executor
        )

    async def compare(self, incoming: str, stored: str) -> bool:
        return await run_blocking(
            self.compare_sync, incoming, stored, executor=self.executor
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"
