"""Tests for request time extraction."""

from datetime import datetime, timedelta, timezone

import pytest

from apache2metric.errors import MalformedLineError, TimestampParseError
from apache2metric.extractor import extract_request_time, parse_request_time

LINE = '127.0.0.1 - - [10/Oct/2000:13:55:36 -0700] "GET / HTTP/1.0" 200 232'


class TestExtractRequestTime:
    """Tests for extract_request_time()."""

    def test_extracts_time_from_common_log_line(self) -> None:
        """The bracketed request time is parsed with its zone offset."""
        ts = extract_request_time(LINE)
        assert ts == datetime(2000, 10, 10, 20, 55, 36, tzinfo=timezone.utc)

    def test_keeps_zone_offset(self) -> None:
        """The returned datetime carries the offset from the log."""
        ts = extract_request_time(LINE)
        assert ts.utcoffset() == timedelta(hours=-7)

    def test_same_instant_in_different_zones_compares_equal(self) -> None:
        """Offsets are honored when comparing instants."""
        a = extract_request_time("[10/Oct/2000:13:55:36 -0700]")
        b = extract_request_time("[10/Oct/2000:20:55:36 +0000]")
        assert a == b

    def test_uses_first_bracket_pair(self) -> None:
        """Only the first [ and the first ] are considered."""
        ts = extract_request_time('[01/Jan/2020:00:00:00 +0000] "GET /[x] HTTP/1.1"')
        assert ts == datetime(2020, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "no timestamp here",
            "127.0.0.1 - - [10/Oct/2000:13:55:36 -0700",
            "127.0.0.1 - - 10/Oct/2000:13:55:36 -0700]",
            "] before [10/Oct/2000:13:55:36 -0700]",
        ],
    )
    def test_malformed_line_raises(self, line: str) -> None:
        """Missing or reversed brackets are a MalformedLineError."""
        with pytest.raises(MalformedLineError):
            extract_request_time(line)

    def test_malformed_line_error_names_the_line(self) -> None:
        """The error message includes the offending line."""
        with pytest.raises(MalformedLineError, match="brace-enclosed timestamp: oops"):
            extract_request_time("oops")

    def test_bad_timestamp_wraps_cause(self) -> None:
        """A bad timestamp raises TimestampParseError chained to a ValueError."""
        with pytest.raises(TimestampParseError) as excinfo:
            extract_request_time("[yesterday]")
        assert isinstance(excinfo.value.cause, ValueError)
        assert excinfo.value.__cause__ is excinfo.value.cause
        assert excinfo.value.text == "yesterday"

    def test_non_ascii_digits_are_rejected(self) -> None:
        """Only ASCII digits count, other Unicode digits fail closed."""
        with pytest.raises(TimestampParseError):
            extract_request_time('127.0.0.1 - - [١٠/Oct/2000:13:55:36 -0700] "GET /"')


class TestParseRequestTime:
    """Tests for the strict request time parser."""

    @pytest.mark.parametrize(
        "text",
        [
            "1/Oct/2000:13:55:36 -0700",
            "10/10/2000:13:55:36 -0700",
            "10/oct/2000:13:55:36 -0700",
            "10/Okt/2000:13:55:36 -0700",
            "10/Oct/00:13:55:36 -0700",
            "10/Oct/2000 13:55:36 -0700",
            "10/Oct/2000:13:55:36",
            "10/Oct/2000:13:55:36 -07:00",
            "10/Oct/2000:13:55:36 Z",
            "10/Oct/2000:13:55:36 -0700 ",
            "10/Oct/2000:13:55:36.123 -0700",
            "31/Feb/2000:13:55:36 -0700",
            "10/Oct/2000:24:00:00 -0700",
            "10/Oct/2000:13:60:00 -0700",
            "10/Oct/2000:13:55:36 +2400",
            "10/Oct/2000:13:55:36 +0160",
            "١٠/Oct/2000:13:55:36 -0700",
            "10/Oct/2000:１３:55:36 -0700",
        ],
    )
    def test_rejects_deviations(self, text: str) -> None:
        """Anything other than DD/Mon/YYYY:HH:MM:SS +HHMM fails."""
        with pytest.raises(ValueError):
            parse_request_time(text)

    def test_accepts_positive_offset(self) -> None:
        """Positive offsets are subtracted to get UTC."""
        ts = parse_request_time("29/Feb/2012:01:30:00 +0530")
        assert ts.astimezone(timezone.utc) == datetime(2012, 2, 28, 20, 0, tzinfo=timezone.utc)
