"""
Encoded Hash Codec
==================
Binary layout shared by the KDF-backed processors.

Layout (rendered as lowercase hex)::

    uint32be(salt_length) || uint32be(cost_parameter) || salt || derived_key

The salt length is stored so verification can split salt from key. The cost
parameter slot holds the PBKDF2 iteration count, or the derived-key length
for scrypt. The digest is not stored.
"""

import struct
from dataclasses import dataclass

from credproc.exceptions import MalformedRecord

HEADER = struct.Struct(">II")
HEADER_SIZE = HEADER.size  # 8


@dataclass(frozen=True)
class HashRecord:
    """A decoded credential hash record."""
    salt: bytes
    cost_parameter: int
    derived_key: bytes

    @property
    def salt_length(self) -> int:
        return len(self.salt)


def encode(salt: bytes, cost_parameter: int, derived_key: bytes) -> str:
    """
    Pack salt, cost parameter and derived key into a hex string.

    Args:
        salt: Raw salt bytes
        cost_parameter: Unsigned 32-bit value stored at offset 4
        derived_key: Raw derived key bytes

    Returns:
        Lowercase hex encoding of the record
    """
    combined = HEADER.pack(len(salt), cost_parameter) + salt + derived_key
    return combined.hex()


def decode(encoded: str) -> HashRecord:
    """
    Unpack a hex string produced by :func:`encode`.

    Raises:
        MalformedRecord: If the value is not hex, is shorter than the header,
            or its salt length runs past the end of the buffer
    """
    if not isinstance(encoded, str):
        raise MalformedRecord(
            f"Stored hash must be a string, got {type(encoded).__name__}"
        )

    try:
        buffer = bytes.fromhex(encoded)
    except ValueError as e:
        raise MalformedRecord("Stored hash is not valid hex", cause=e) from e

    if len(buffer) < HEADER_SIZE:
        raise MalformedRecord(
            f"Stored hash is {len(buffer)} bytes, header needs {HEADER_SIZE}"
        )

    salt_length, cost_parameter = HEADER.unpack_from(buffer, 0)
    key_offset = HEADER_SIZE + salt_length

    if key_offset > len(buffer):
        raise MalformedRecord(
            f"Salt length {salt_length} exceeds record of {len(buffer)} bytes"
        )

    return HashRecord(
        salt=buffer[HEADER_SIZE:key_offset],
        cost_parameter=cost_parameter,
        derived_key=buffer[key_offset:],
    )
