"""Tests for coerce_instant - caller values to datetimes.

Python 3.13+.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest
from hypothesis import given

from smartrange import InstantParseError, coerce_instant
from smartrange.diagnostics import DiagnosticCode
from tests.strategies import plain_datetimes

BERLIN = ZoneInfo("Europe/Berlin")


class TestCoerceTypes:
    """Every supported input type."""

    def test_datetime_passes_through(self) -> None:
        """datetime is returned unchanged."""
        value = datetime(2024, 1, 5, 14, 30)
        assert coerce_instant(value) is value

    def test_date_becomes_midnight(self) -> None:
        """date is taken as 00:00."""
        assert coerce_instant(date(2024, 1, 5)) == datetime(2024, 1, 5, 0, 0)

    def test_iso_date_string(self) -> None:
        """Plain ISO date."""
        assert coerce_instant("2024-01-05") == datetime(2024, 1, 5)

    def test_iso_datetime_string_with_offset(self) -> None:
        """Offsets are kept."""
        result = coerce_instant("2024-01-05T14:30:00+01:00")
        assert result == datetime(2024, 1, 5, 14, 30, tzinfo=timezone(timedelta(hours=1)))
        assert result.utcoffset() == timedelta(hours=1)

    def test_surrounding_whitespace_ignored(self) -> None:
        """Strings are stripped."""
        assert coerce_instant("  2024-01-05\n") == datetime(2024, 1, 5)

    def test_int_timestamp(self) -> None:
        """POSIX timestamps are UTC-aware."""
        assert coerce_instant(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_float_timestamp(self) -> None:
        """Fractions are kept."""
        assert coerce_instant(1.5) == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=UTC)


class TestCoerceErrors:
    """Rejected inputs raise InstantParseError with a diagnostic."""

    def test_invalid_string(self) -> None:
        """Non-ISO text."""
        with pytest.raises(InstantParseError) as exc_info:
            coerce_instant("05/01/2024")

        error = exc_info.value
        assert error.input_value == "'05/01/2024'"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.INSTANT_INVALID

    def test_empty_string(self) -> None:
        """Empty text is not a date."""
        with pytest.raises(InstantParseError):
            coerce_instant("   ")

    @pytest.mark.parametrize("value", [True, False, None, Decimal("1.5"), [2024, 1, 5]])
    def test_unsupported_types(self, value: object) -> None:
        """bool, None and containers are rejected."""
        with pytest.raises(InstantParseError) as exc_info:
            coerce_instant(value)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INSTANT_TYPE_INVALID

    def test_timestamp_out_of_range(self) -> None:
        """Timestamps beyond datetime's range."""
        with pytest.raises(InstantParseError) as exc_info:
            coerce_instant(1e20)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INSTANT_INVALID

    def test_error_chains_cause(self) -> None:
        """The original ValueError is kept as __cause__."""
        with pytest.raises(InstantParseError) as exc_info:
            coerce_instant("not a date")
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestCoerceTimezone:
    """The tzinfo option."""

    def test_naive_gets_zone_attached(self) -> None:
        """Wall-clock time is kept."""
        result = coerce_instant(datetime(2024, 1, 5, 14, 30), tzinfo=BERLIN)
        assert result.tzinfo is BERLIN
        assert (result.hour, result.minute) == (14, 30)

    def test_aware_is_converted(self) -> None:
        """The absolute instant is kept."""
        result = coerce_instant(datetime(2024, 1, 5, 13, 30, tzinfo=UTC), tzinfo=BERLIN)
        assert result.hour == 14
        assert result == datetime(2024, 1, 5, 13, 30, tzinfo=UTC)

    def test_timestamp_is_converted(self) -> None:
        """UTC timestamps move to the target zone."""
        result = coerce_instant(0, tzinfo=BERLIN)
        assert result.hour == 1

    def test_date_in_zone(self) -> None:
        """Dates become local midnight."""
        result = coerce_instant(date(2024, 7, 1), tzinfo=BERLIN)
        assert result.utcoffset() == timedelta(hours=2)
        assert result.hour == 0


class TestCoerceProperties:
    """Round trips over generated datetimes."""

    @given(value=plain_datetimes)
    def test_isoformat_round_trip(self, value: datetime) -> None:
        """coerce_instant(dt.isoformat()) == dt."""
        assert coerce_instant(value.isoformat()) == value
