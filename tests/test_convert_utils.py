"""
Tests for display conversion utilities used by the CLI text output.
"""
from fcompare.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    def test_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0.00B"
        assert ConvertUtils.bytes_to_human(1023) == "1023.00B"

    def test_binary_units(self):
        assert ConvertUtils.bytes_to_human(1024) == "1.00KB"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(16 * 1024 * 1024) == "16.00MB"
        assert ConvertUtils.bytes_to_human(3 * 1024 ** 3) == "3.00GB"

    def test_negative(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"


class TestTimestampToHuman:
    def test_utc(self):
        assert ConvertUtils.timestamp_to_human(946684800, utc=True) == "2000-01-01 00:00:00"

    def test_custom_format(self):
        assert ConvertUtils.timestamp_to_human(946684800, fmt="%Y", utc=True) == "2000"

    def test_invalid(self):
        assert ConvertUtils.timestamp_to_human(1e20) == "Invalid timestamp"
