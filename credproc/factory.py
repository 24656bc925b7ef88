"""
Processor Factory
=================
Select the single enabled algorithm and build its processor.
"""

from concurrent.futures import Executor
from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

from credproc.exceptions import ConfigurationError
from credproc.processors import (
    Argon2Processor,
    BcryptProcessor,
    CredentialProcessor,
    PBKDF2Processor,
    ScryptProcessor,
)

logger = structlog.get_logger(__name__)

PROCESSORS: Dict[str, Callable[..., CredentialProcessor]] = {
    "pbkdf2": PBKDF2Processor,
    "scrypt": ScryptProcessor,
    "bcrypt": BcryptProcessor,
    "argon2": Argon2Processor,
}


def available_algorithms() -> List[str]:
    """Names accepted by :func:`create_processor`."""
    return sorted(PROCESSORS)


def select_algorithm(algorithms: Mapping[str, Any]) -> str:
    """
    Return the lower-cased name of the one enabled algorithm.

    Raises:
        ConfigurationError: If zero or several algorithms are enabled, or the
            enabled name is not supported
    """
    enabled = [name for name, flag in algorithms.items() if flag]

    if not enabled:
        raise ConfigurationError("No algorithm enabled")
    if len(enabled) > 1:
        raise ConfigurationError(
            f"More than one algorithm enabled: {', '.join(sorted(enabled))}"
        )

    name = str(enabled[0]).lower()
    if name not in PROCESSORS:
        raise ConfigurationError(f"Unknown algorithm '{enabled[0]}'", algorithm=name)
    return name


def create_processor(
    algorithms: Mapping[str, Any],
    options: Optional[Mapping[str, Any]] = None,
    *,
    executor: Optional[Executor] = None,
) -> CredentialProcessor:
    """
    Build the processor for the single enabled algorithm.

    Args:
        algorithms: Mapping of algorithm name to enablement flag,
            e.g. ``{"bcrypt": False, "Argon2": True}``
        options: Constructor options for the selected backend
        executor: Executor for the blocking hash work

    Returns:
        A processor exposing ``hash`` and ``compare``
    """
    try:
        name = select_algorithm(algorithms)
    except ConfigurationError as e:
        logger.error("Credential processor selection failed", error=e.message)
        raise

    logger.info("Credential processor selected", algorithm=name)
    return PROCESSORS[name](options, executor=executor)
