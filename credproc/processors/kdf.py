"""
KDF Processor
=============
Salt generation, key derivation, record encoding and verification for the
key-derivation-function backends. Subclasses supply the primitive.
"""

import dataclasses
import hmac
import struct
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Any, Generic, Mapping, Optional

import structlog

from credproc import codec
from credproc.codec import HashRecord
from credproc.exceptions import DerivationFailed, MalformedRecord
from credproc.models import OptionsT, merge
from credproc.processors.base import generate_salt, run_blocking, to_bytes

logger = structlog.get_logger(__name__)


class KDFProcessor(ABC, Generic[OptionsT]):
    """
    Base for processors whose records use :mod:`credproc.codec`.

    Options are layered: built-in defaults, then constructor options, then
    per-call options given to :meth:`hash`.
    """

    algorithm: str
    options_type: type

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        executor: Optional[Executor] = None,
        **overrides: Any,
    ):
        merged = merge(self.options_type(), options)
        self.options: OptionsT = merge(merged, overrides)
        self.executor = executor
        logger.debug(
            "Credential processor created",
            algorithm=self.algorithm,
            options=self._loggable_options(),
        )

    @abstractmethod
    def _derive(
        self,
        password: bytes,
        salt: bytes,
        options: OptionsT,
        cost_parameter: int,
        key_length: int,
    ) -> bytes:
        """Run the KDF primitive."""

    @abstractmethod
    def _cost_parameter(self, options: OptionsT) -> int:
        """Value written into the record's cost parameter slot."""

    @abstractmethod
    def _key_length(self, options: OptionsT) -> int:
        """Length of the derived key produced by :meth:`hash`."""

    def _check_record(self, record: HashRecord) -> None:
        """Reject records this backend cannot have produced."""

    def _loggable_options(self) -> dict:
        return dataclasses.asdict(self.options)

    def _derive_checked(
        self,
        password: str,
        salt: bytes,
        options: OptionsT,
        cost_parameter: int,
        key_length: int,
    ) -> bytes:
        try:
            return self._derive(
                to_bytes(password), salt, options, cost_parameter, key_length
            )
        except (ValueError, TypeError, OverflowError) as e:
            logger.error(
                "Key derivation failed",
                algorithm=self.algorithm,
                error=str(e),
            )
            raise DerivationFailed(
                "Key derivation failed", algorithm=self.algorithm, cause=e
            ) from e

    def hash_sync(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Hash a password, blocking the calling thread.

        Args:
            password: Plain text password
            options: Per-call options overriding the constructor's

        Returns:
            Hex-encoded record of salt, cost parameter and derived key

        Raises:
            RandomGenerationFailed: If no salt could be generated
            DerivationFailed: If the KDF rejects the parameters
        """
        effective = merge(self.options, options)
        salt = generate_salt(effective.salt_bytes, self.algorithm)
        cost_parameter = self._cost_parameter(effective)
        derived = self._derive_checked(
            password, salt, effective, cost_parameter, self._key_length(effective)
        )
        try:
            return codec.encode(salt, cost_parameter, derived)
        except struct.error as e:
            logger.error(
                "Record encoding failed",
                algorithm=self.algorithm,
                error=str(e),
            )
            raise DerivationFailed(
                "Record encoding failed", algorithm=self.algorithm, cause=e
            ) from e

    def compare_sync(self, incoming: str, stored: str) -> bool:
        """
        Verify a password against a stored record, blocking the calling thread.

        Returns:
            True if the password matches, False otherwise

        Raises:
            MalformedRecord: If the stored value cannot be decoded
            DerivationFailed: If re-derivation fails
        """
        try:
            record = codec.decode(stored)
            self._check_record(record)
        except MalformedRecord as e:
            logger.warning(
                "Malformed stored hash",
                algorithm=self.algorithm,
                error=e.message,
            )
            raise MalformedRecord(
                e.message, algorithm=self.algorithm, cause=e.cause
            ) from e

        candidate = self._derive_checked(
            incoming,
            record.salt,
            self.options,
            record.cost_parameter,
            len(record.derived_key),
        )
        return hmac.compare_digest(candidate, record.derived_key)

    async def hash(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Hash a password in the executor. See :meth:`hash_sync`."""
        return await run_blocking(
            self.hash_sync, password, options, executor=self.executor
        )

    async def compare(self, incoming: str, stored: str) -> bool:
        """Verify a password in the executor. See :meth:`compare_sync`."""
        return await run_blocking(
            self.compare_sync, incoming, stored, executor=self.executor
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"
