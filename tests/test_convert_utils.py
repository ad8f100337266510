"""
Tests for ConvertUtils formatting helpers.
"""
import pytest

from reclaimer.utils.convert_utils import ConvertUtils, format_bytes


class TestFormatBytes:

    @pytest.mark.parametrize("size, expected", [
        (0, "0 Bytes"),
        (-10, "0 Bytes"),
        (1, "1 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2048000, "1.95 MB"),
        (1024 ** 3, "1 GB"),
        (15679234567, "14.6 GB"),
        (1024 ** 4, "1 TB"),
        (1024 ** 5, "1024 TB"),
    ])
    def test_examples(self, size, expected):
        assert ConvertUtils.format_bytes(size) == expected

    def test_module_level_alias(self):
        assert format_bytes(1536) == ConvertUtils.format_bytes(1536)


class TestTimestampToHuman:

    def test_custom_format(self):
        assert ConvertUtils.timestamp_to_human(1700000000, "%Y") == "2023"

    def test_invalid_timestamp(self):
        assert ConvertUtils.timestamp_to_human(1e20) == "Invalid timestamp"
