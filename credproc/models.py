"""
Processor Options
=================
Per-backend option sets and the shallow merge used to layer them.

Built-in defaults come from ``credproc.config``; constructor options are
merged over them, and per-call options are merged over the constructor's.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, TypeVar, Union

from credproc import config
from credproc.exceptions import ConfigurationError


def _require_positive(options: Any, *names: str) -> None:
    """Reject byte sizes that are not positive integers."""
    for name in names:
        value = getattr(options, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigurationError(
                f"Option '{name}' must be a positive integer, got {value!r}",
                algorithm=options.algorithm,
            )


@dataclass(frozen=True)
class PBKDF2Options:
    """Options for PBKDF2-HMAC."""
    algorithm: ClassVar[str] = "pbkdf2"

    hash_bytes: int = config.PBKDF2_HASH_BYTES
    salt_bytes: int = config.PBKDF2_SALT_BYTES
    digest: str = config.PBKDF2_DIGEST
    iterations: int = config.PBKDF2_ITERATIONS

    def __post_init__(self):
        _require_positive(self, "hash_bytes", "salt_bytes")


@dataclass(frozen=True)
class ScryptOptions:
    """Options for scrypt."""
    algorithm: ClassVar[str] = "scrypt"

    key_length: int = config.SCRYPT_KEY_LENGTH
    salt_bytes: int = config.SCRYPT_SALT_BYTES
    cost: int = config.SCRYPT_COST
    block_size: int = config.SCRYPT_BLOCK_SIZE
    parallelization: int = config.SCRYPT_PARALLELIZATION
    maxmem: int = config.SCRYPT_MAXMEM

    def __post_init__(self):
        _require_positive(self, "key_length", "salt_bytes")


@dataclass(frozen=True)
class BcryptOptions:
    """Options for bcrypt."""
    algorithm: ClassVar[str] = "bcrypt"

    salt_rounds: int = config.BCRYPT_SALT_ROUNDS


@dataclass(frozen=True)
class Argon2Options:
    """Options for Argon2. ``type`` is one of "id", "i" or "d"."""
    algorithm: ClassVar[str] = "argon2"

    time_cost: int = config.ARGON2_TIME_COST
    memory_cost: int = config.ARGON2_MEMORY_COST
    parallelism: int = config.ARGON2_PARALLELISM
    hash_len: int = config.ARGON2_HASH_LEN
    salt_len: int = config.ARGON2_SALT_LEN
    type: str = config.ARGON2_TYPE
    raw: bool = False

    def __post_init__(self):
        _require_positive(self, "hash_len", "salt_len")


OptionsT = TypeVar(
    "OptionsT", PBKDF2Options, ScryptOptions, BcryptOptions, Argon2Options
)

# camelCase names accepted for compatibility with existing option documents
_ALIASES: Dict[str, str] = {
    "hashBytes": "hash_bytes",
    "saltBytes": "salt_bytes",
    "keyLength": "key_length",
    "blockSize": "block_size",
    "saltRounds": "salt_rounds",
    "timeCost": "time_cost",
    "memoryCost": "memory_cost",
    "hashLength": "hash_len",
    "saltLength": "salt_len",
}


def normalize_options(
    options_type: type,
    override: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Map option names onto the fields of ``options_type``.

    Raises:
        ConfigurationError: If a key names no field of ``options_type``
    """
    names = {f.name for f in dataclasses.fields(options_type)}
    normalized: Dict[str, Any] = {}

    for key, value in override.items():
        name = _ALIASES.get(key, key)
        if name not in names:
            raise ConfigurationError(
                f"Unknown option '{key}'",
                algorithm=options_type.algorithm,
            )
        normalized[name] = value

    return normalized


def merge(
    base: OptionsT,
    override: Optional[Union[OptionsT, Mapping[str, Any]]] = None,
) -> OptionsT:
    """
    Return a copy of ``base`` with the fields present in ``override`` replaced.

    ``base`` is never modified. An options object of the same type as
    ``base`` replaces it whole.

    Args:
        base: Options to start from
        override: Mapping of option names to values, or an options object

    Returns:
        The merged options
    """
    if override is None:
        return base

    if isinstance(override, type(base)):
        return override

    if not isinstance(override, Mapping):
        raise ConfigurationError(
            f"Options must be a mapping, got {type(override).__name__}",
            algorithm=base.algorithm,
        )

    return dataclasses.replace(base, **normalize_options(type(base), override))
