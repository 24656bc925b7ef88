"""
Processor Interface
===================
The contract every credential processor satisfies, plus helpers shared by
the concrete backends.
"""

import asyncio
import secrets
from concurrent.futures import Executor
from typing import Any, Callable, Mapping, Optional, Protocol, TypeVar, runtime_checkable

import structlog

from credproc.exceptions import RandomGenerationFailed

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@runtime_checkable
class CredentialProcessor(Protocol):
    """Hashes a plaintext credential and verifies plaintexts against it."""

    algorithm: str

    async def hash(
        self, password: str, options: Optional[Mapping[str, Any]] = None
    ) -> str:
        ...

    async def compare(self, incoming: str, stored: str) -> bool:
        ...


async def run_blocking(
    func: Callable[..., T],
    *args: Any,
    executor: Optional[Executor] = None,
) -> T:
    """
    Run a CPU-bound call off the event loop.

    Args:
        func: Synchronous callable
        *args: Positional arguments for func
        executor: Executor to use; the loop's default when None

    Returns:
        Result of func
    """
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(executor, func, *args)


def generate_salt(size: int, algorithm: str) -> bytes:
    """
    Generate ``size`` cryptographically secure random bytes.

    Raises:
        RandomGenerationFailed: If the entropy source is unavailable
    """
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as e:
        logger.error(
            "Salt generation failed",
            algorithm=algorithm,
            salt_bytes=size,
            error=str(e),
        )
        raise RandomGenerationFailed(
            "Could not generate salt", algorithm=algorithm, cause=e
        ) from e


def to_bytes(password) -> bytes:
    """Encode a str password as UTF-8; bytes pass through."""
    if isinstance(password, bytes):
        return password
    return password.encode("utf-8")
