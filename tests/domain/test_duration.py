"""Tests for Duration value object."""

from __future__ import annotations

import pytest

from file_age_check.domain.exceptions import InvalidDurationError
from file_age_check.domain.value_objects import Duration
from file_age_check.domain.value_objects.duration import HOUR, MILLISECOND, MINUTE, SECOND


class TestDurationParse:
    """Tests for parsing duration strings."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("24h", 24 * HOUR),
            ("48h", 48 * HOUR),
            ("90m", 90 * MINUTE),
            ("1h30m", HOUR + 30 * MINUTE),
            ("1.5h", HOUR + 30 * MINUTE),
            (".5s", 500 * MILLISECOND),
            ("300ms", 300 * MILLISECOND),
            ("2us", 2_000),
            ("2µs", 2_000),
            ("7ns", 7),
            ("+5s", 5 * SECOND),
            ("0", 0),
            ("0s", 0),
        ],
    )
    def test_valid_strings(self, text: str, expected: int) -> None:
        """Compact unit strings should parse to nanoseconds."""
        assert Duration.parse(text).nanoseconds == expected

    @pytest.mark.parametrize("text", ["", "abc", "24", "10d", "h", "1h 30m", "1..5s", "."])
    def test_malformed_strings_rejected(self, text: str) -> None:
        """Strings outside the grammar should be rejected."""
        with pytest.raises(InvalidDurationError, match="invalid duration"):
            Duration.parse(text)

    def test_negative_rejected(self) -> None:
        """Negative spans are not valid thresholds."""
        with pytest.raises(InvalidDurationError, match="negative"):
            Duration.parse("-1h")

    def test_overflow_rejected(self) -> None:
        """Spans beyond a signed 64-bit nanosecond count are rejected."""
        with pytest.raises(InvalidDurationError, match="out of range"):
            Duration.parse("3000000h")

    def test_error_is_value_error(self) -> None:
        """Parse errors should be catchable as ValueError."""
        with pytest.raises(ValueError):
            Duration.parse("abc")


class TestDurationFormat:
    """Tests for the normalised string form."""

    @pytest.mark.parametrize(
        ("text", "rendered"),
        [
            ("24h", "24h0m0s"),
            ("90m", "1h30m0s"),
            ("90s", "1m30s"),
            ("1.5s", "1.5s"),
            ("500ms", "500ms"),
            ("1500us", "1.5ms"),
            ("1500ns", "1.5µs"),
            ("7ns", "7ns"),
            ("0", "0s"),
            ("2h45m30.25s", "2h45m30.25s"),
        ],
    )
    def test_str(self, text: str, rendered: str) -> None:
        """Durations should render in normalised form."""
        assert str(Duration.parse(text)) == rendered


class TestDurationValue:
    """Tests for comparison and construction."""

    def test_ordering(self) -> None:
        """Durations compare by length."""
        assert Duration.parse("24h") < Duration.parse("48h")
        assert Duration.parse("60m") == Duration.parse("1h")

    def test_negative_constructor_rejected(self) -> None:
        """Direct construction also refuses negative spans."""
        with pytest.raises(InvalidDurationError):
            Duration(-1)

    def test_is_frozen(self) -> None:
        """Durations should be immutable."""
        duration = Duration.parse("1h")
        with pytest.raises(AttributeError):
            duration.nanoseconds = 5  # type: ignore[misc]
