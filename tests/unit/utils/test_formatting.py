"""Unit tests for utils/formatting.py."""

import pytest
from recsort.utils.formatting import format_size


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (100, "100 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (20480, "20.0 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
        ],
    )
    def test_format_size(self, size: int | None, expected: str) -> None:
        """Byte counts render with the largest fitting unit."""
        assert format_size(size) == expected
