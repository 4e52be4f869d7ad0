"""Unit tests for duration parsing."""

import pytest

from metasearch.utils.duration import parse_duration


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("value", "seconds"),
        [
            ("10ms", 0.01),
            ("800ms", 0.8),
            ("1.5s", 1.5),
            ("2s", 2.0),
            ("1m30s", 90.0),
            ("2h", 7200.0),
            ("1h2m3.5s", 3723.5),
            ("250us", 0.00025),
            ("250µs", 0.00025),
            ("500ns", 5e-7),
            (".5s", 0.5),
            ("+3s", 3.0),
            (" 5s ", 5.0),
        ],
    )
    def test_valid_durations(self, value: str, seconds: float):
        """Test well-formed durations convert to seconds."""
        assert parse_duration(value) == pytest.approx(seconds)

    def test_bare_zero(self):
        """Test a unitless zero is accepted."""
        assert parse_duration("0") == 0.0

    @pytest.mark.parametrize("value", ["abc", "10", "ms", "1x", "1s2", "5 s", "1..5s", "s10"])
    def test_malformed_durations(self, value: str):
        """Test malformed strings are rejected."""
        with pytest.raises(ValueError, match="invalid duration"):
            parse_duration(value)

    def test_empty_duration(self):
        """Test empty input is rejected."""
        with pytest.raises(ValueError, match="empty duration"):
            parse_duration("   ")

    def test_negative_duration(self):
        """Test negative durations are rejected."""
        with pytest.raises(ValueError, match="negative duration"):
            parse_duration("-1s")
