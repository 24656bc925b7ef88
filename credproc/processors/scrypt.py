"""
scrypt Processor
================
scrypt via ``hashlib.scrypt``.

Records keep the historical layout in which the cost parameter slot holds
the derived-key length rather than the scrypt cost. Verification therefore
re-derives with this processor's configured ``cost``, ``block_size`` and
``parallelization``, and requires the slot to equal the stored key length.
"""

from hashlib import scrypt

from credproc.codec import HashRecord
from credproc.exceptions import MalformedRecord
from credproc.models import ScryptOptions
from credproc.processors.kdf import KDFProcessor


class ScryptProcessor(KDFProcessor[ScryptOptions]):
    """scrypt credential processor."""

    algorithm = "scrypt"
    options_type = ScryptOptions

    def _derive(self, password, salt, options, cost_parameter, key_length):
        return scrypt(
            password,
            salt=salt,
            n=options.cost,
            r=options.block_size,
            p=options.parallelization,
            maxmem=options.maxmem,
            dklen=key_length,
        )

    def _cost_parameter(self, options: ScryptOptions) -> int:
        return options.key_length

    def _key_length(self, options: ScryptOptions) -> int:
        return options.key_length

    def _check_record(self, record: HashRecord) -> None:
        if record.cost_parameter != len(record.derived_key):
            raise MalformedRecord(
                f"Key length slot {record.cost_parameter} does not match "
                f"derived key of {len(record.derived_key)} bytes"
            )
