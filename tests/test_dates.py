"""Tests for date parsing and git date formatting."""

import time
from datetime import datetime, timedelta, timezone

import pytest

from gitcommit.core.dates import format_for_git, format_input, parse_date
from gitcommit.core.exceptions import (
    DateParseError,
    InvalidCalendarDateError,
    MalformedFormatError,
)


@pytest.fixture
def paris_tz(monkeypatch):
    """Switch the process local time zone to Europe/Paris."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    monkeypatch.setenv("TZ", "Europe/Paris")
    time.tzset()
    if time.tzname[0] != "CET":
        monkeypatch.undo()
        time.tzset()
        pytest.skip("Europe/Paris zone data is not installed")

    yield

    monkeypatch.undo()
    time.tzset()


@pytest.mark.parametrize(
    "date_str",
    [
        "2025-02-05 20:19:19",
        "2025-01-01 00:00:00",
        "2025-12-31 23:59:59",
        "2024-02-29 12:00:00",
        "2000-02-29 06:30:00",
        "2020-01-01 00:00:00",
    ],
)
def test_parse_valid_dates_round_trip(date_str):
    """Test that valid dates parse and render back to the same string."""
    parsed = parse_date(date_str)

    assert parsed.tzinfo is not None
    assert format_input(parsed) == date_str


def test_parse_keeps_wall_clock_fields():
    parsed = parse_date("2025-02-05 20:19:19")

    assert (parsed.year, parsed.month, parsed.day) == (2025, 2, 5)
    assert (parsed.hour, parsed.minute, parsed.second) == (20, 19, 19)
    assert parsed == datetime(2025, 2, 5, 20, 19, 19).astimezone()


@pytest.mark.parametrize(
    "date_str",
    [
        "",
        "2025-02-05",
        "20:19:19",
        "2025/02/05 20:19:19",
        "2025-02-05T20:19:19",
        "2025-02-05  20:19:19",
        "2025-2-5 20:19:19",
        "25-02-05 20:19:19",
        "2025-02-05 20:19",
        "2025-02-05 20:19:19 ",
        " 2025-02-05 20:19:19",
        "2025-02-05 20:19:19+01:00",
        "abcd-ef-gh ij:kl:mn",
        "2025-02-05 20:19:19\n",
        "２０２５-02-05 20:19:19",
    ],
)
def test_parse_malformed_format(date_str):
    """Test that strings not matching the layout are rejected."""
    with pytest.raises(MalformedFormatError):
        parse_date(date_str)


@pytest.mark.parametrize(
    "date_str",
    [
        "2025-02-30 00:00:00",
        "2025-02-29 00:00:00",
        "2025-02-29 12:00:00",
        "2025-04-31 10:00:00",
        "2025-13-01 00:00:00",
        "2025-00-10 00:00:00",
        "2025-01-00 00:00:00",
        "2025-01-01 24:00:00",
        "2025-01-01 12:60:00",
        "2025-01-01 12:00:60",
        "1900-02-29 00:00:00",
    ],
)
def test_parse_invalid_calendar_dates(date_str):
    """Test that dates which do not exist are rejected."""
    with pytest.raises(InvalidCalendarDateError) as exc_info:
        parse_date(date_str)

    assert exc_info.value.date_str == date_str
    assert exc_info.value.reason


def test_leap_day_depends_on_year():
    assert parse_date("2024-02-29 12:00:00").day == 29

    with pytest.raises(InvalidCalendarDateError):
        parse_date("2025-02-29 12:00:00")


def test_parse_errors_share_base_class():
    with pytest.raises(DateParseError):
        parse_date("not a date")
    with pytest.raises(DateParseError):
        parse_date("2025-02-30 00:00:00")


def test_format_for_git_layout():
    """Test the Dow D Mon YYYY HH:MM:SS TZ layout in the local zone."""
    parsed = parse_date("2025-02-05 20:19:19")
    rendered = format_for_git(parsed)

    fields = rendered.split(" ")
    assert len(fields) == 6
    assert fields[0] == "Wed"
    assert "5 Feb 2025 20:19:19" in rendered
    assert fields[-1] == parsed.tzname()
    assert fields[-1]


def test_format_for_git_does_not_pad_day():
    rendered = format_for_git(parse_date("2025-03-01 08:05:09"))

    assert rendered.startswith("Sat 1 Mar 2025 08:05:09 ")


def test_parse_uses_offset_of_the_date(paris_tz):
    """Test that DST is resolved for the given date, not for today."""
    winter = parse_date("2025-02-05 20:19:19")
    summer = parse_date("2025-07-05 08:00:00")

    assert winter.utcoffset() == timedelta(hours=1)
    assert summer.utcoffset() == timedelta(hours=2)


def test_format_for_git_zone_abbreviation(paris_tz):
    assert format_for_git(parse_date("2025-02-05 20:19:19")) == (
        "Wed 5 Feb 2025 20:19:19 CET"
    )
    assert format_for_git(parse_date("2025-07-05 08:00:00")) == (
        "Sat 5 Jul 2025 08:00:00 CEST"
    )


def test_format_for_git_converts_to_local_zone(paris_tz):
    utc_time = datetime(2025, 2, 5, 19, 19, 19, tzinfo=timezone.utc)

    assert format_for_git(utc_time) == "Wed 5 Feb 2025 20:19:19 CET"


def test_parse_rejects_time_skipped_by_dst(paris_tz):
    """Clocks jump from 02:00 to 03:00 on 2025-03-30 in Paris."""
    with pytest.raises(InvalidCalendarDateError):
        parse_date("2025-03-30 02:30:00")

    assert parse_date("2025-03-30 03:30:00").utcoffset() == timedelta(hours=2)
