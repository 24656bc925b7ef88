"""
bcrypt Processor
================
Pass-through to the ``bcrypt`` library, which owns the modular-crypt
encoding of cost factor, salt and hash.
"""

import re
from concurrent.futures import Executor
from typing import Any, Mapping, Optional

import bcrypt
import structlog

from credproc.exceptions import DerivationFailed, MalformedRecord
from credproc.models import BcryptOptions, merge
from credproc.processors.base import run_blocking, to_bytes

logger = structlog.get_logger(__name__)

# $2b$<cost>$<22 chars salt><31 chars hash>
BCRYPT_HASH_PATTERN = re.compile(r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}")

# bcrypt only reads this many bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptProcessor:
    """bcrypt credential processor."""

    algorithm = "bcrypt"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        executor: Optional[Executor] = None,
        **overrides: Any,
    ):
        self.options = merge(merge(BcryptOptions(), options), overrides)
        self.executor = executor
        logger.debug(
            "Credential processor created",
            algorithm=self.algorithm,
            salt_rounds=self.options.salt_rounds,
        )

    def hash_sync(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Hash a password with a fresh bcrypt salt."""
        effective = merge(self.options, options)
        try:
            salt = bcrypt.gensalt(rounds=effective.salt_rounds)
            return bcrypt.hashpw(to_bytes(password), salt).decode("ascii")
        except (ValueError, TypeError) as e:
            logger.error("bcrypt hashing failed", algorithm=self.algorithm, error=str(e))
            raise DerivationFailed(
                "bcrypt hashing failed", algorithm=self.algorithm, cause=e
            ) from e

    def compare_sync(self, incoming: str, stored: str) -> bool:
        """Verify a password against a bcrypt hash string."""
        if not isinstance(stored, str) or not BCRYPT_HASH_PATTERN.fullmatch(stored):
            logger.warning("Malformed stored hash", algorithm=self.algorithm)
            raise MalformedRecord("Not a bcrypt hash", algorithm=self.algorithm)

        candidate = to_bytes(incoming)
        if len(candidate) > BCRYPT_MAX_PASSWORD_BYTES:
            # hash_sync never produces a hash for such a password
            return False

        try:
            return bcrypt.checkpw(candidate, stored.encode("ascii"))
        except (ValueError, TypeError) as e:
            logger.error("bcrypt verification failed", algorithm=self.algorithm, error=str(e))
            raise DerivationFailed(
                "bcrypt verification failed", algorithm=self.algorithm, cause=e
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
