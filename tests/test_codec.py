"""
Unit Tests for the Encoded Hash Codec
=====================================
"""

import pytest


class TestEncode:
    """Tests for record encoding."""

    def test_layout(self):
        """Header holds salt length then cost parameter, big-endian."""
        from credproc.codec import encode

        encoded = encode(b"\x01\x02", 1000, b"\xff")

        assert encoded == "00000002" + "000003e8" + "0102" + "ff"

    def test_lowercase_hex(self):
        """Output should be lowercase hex."""
        from credproc.codec import encode

        encoded = encode(b"\xab" * 4, 0xDEADBEEF, b"\xcd" * 4)

        assert encoded == encoded.lower()
        assert "deadbeef" in encoded

    def test_length(self):
        """Encoded length is twice the 8-byte header plus salt and key."""
        from credproc.codec import encode

        assert len(encode(b"s" * 16, 1, b"k" * 32)) == 2 * (8 + 16 + 32)


class TestDecode:
    """Tests for record decoding."""

    def test_round_trip(self):
        """Decoding an encoded record recovers every field."""
        from credproc.codec import encode, decode

        salt = bytes(range(64))
        key = bytes(range(128))

        record = decode(encode(salt, 777777, key))

        assert record.salt == salt
        assert record.salt_length == 64
        assert record.cost_parameter == 777777
        assert record.derived_key == key

    def test_round_trip_extremes(self):
        """Cost parameter limits and one-byte salt/key survive a round trip."""
        from credproc.codec import encode, decode

        for cost in (0, 2**32 - 1):
            record = decode(encode(b"\x00", cost, b"\x01"))
            assert (record.salt, record.cost_parameter, record.derived_key) == (
                b"\x00", cost, b"\x01"
            )

    def test_empty_key(self):
        """A record whose salt fills the buffer decodes to an empty key."""
        from credproc.codec import decode

        record = decode("00000002" "00000001" "abcd")

        assert record.salt == b"\xab\xcd"
        assert record.derived_key == b""

    def test_invalid_hex(self):
        """Non-hex characters should raise MalformedRecord."""
        from credproc.codec import decode
        from credproc.exceptions import MalformedRecord

        with pytest.raises(MalformedRecord):
            decode("00000010zz")

    def test_odd_length_hex(self):
        """Odd-length strings are not valid hex."""
        from credproc.codec import decode
        from credproc.exceptions import MalformedRecord

        with pytest.raises(MalformedRecord):
            decode("000")

    def test_shorter_than_header(self):
        """Buffers under 8 bytes should raise MalformedRecord."""
        from credproc.codec import decode
        from credproc.exceptions import MalformedRecord

        with pytest.raises(MalformedRecord):
            decode("00000010000003")

        with pytest.raises(MalformedRecord):
            decode("")

    def test_salt_length_past_end(self):
        """A salt length larger than the buffer is a truncated record."""
        from credproc.codec import decode
        from credproc.exceptions import MalformedRecord

        with pytest.raises(MalformedRecord):
            decode("00000010" "000003e8" "0102")

    def test_truncated_record(self):
        """Truncating a real record into its salt should be rejected."""
        from credproc.codec import encode, decode
        from credproc.exceptions import MalformedRecord

        encoded = encode(b"s" * 16, 1000, b"k" * 32)

        with pytest.raises(MalformedRecord):
            decode(encoded[: 2 * (8 + 10)])

    def test_non_string(self):
        """Non-string input should raise MalformedRecord."""
        from credproc.codec import decode
        from credproc.exceptions import MalformedRecord

        with pytest.raises(MalformedRecord):
            decode(None)
