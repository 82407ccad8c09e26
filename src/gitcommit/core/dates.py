"""Parsing user dates and rendering them the way git expects.

Two layouts matter here:

- the input layout users type on the command line, ``2025-02-05 20:19:19``
- the git layout assigned to ``GIT_AUTHOR_DATE`` and ``GIT_COMMITTER_DATE``,
  ``Wed 5 Feb 2025 20:19:19 CET``

Both are interpreted in the host's local time zone.
"""

import re
from datetime import datetime

from gitcommit.core.exceptions import InvalidCalendarDateError, MalformedFormatError

INPUT_DATE_LAYOUT = "%Y-%m-%d %H:%M:%S"
INPUT_DATE_EXAMPLE = "2025-02-05 20:19:19"

_INPUT_DATE_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})",
    re.ASCII,
)

# Git only understands English names, so avoid locale-dependent %a / %b.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_date(date_str: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` into an aware datetime in local time.

    The UTC offset attached to the result is the one in effect on that date,
    so a summer date gets the daylight-saving offset even in winter.

    Raises:
        MalformedFormatError: the string does not match the layout.
        InvalidCalendarDateError: the layout matches but the date does not
            exist, e.g. February 30th or a time skipped by a DST change.
    """
    match = _INPUT_DATE_PATTERN.fullmatch(date_str)
    if match is None:
        raise MalformedFormatError(
            date_str, "expected format YYYY-MM-DD HH:MM:SS"
        )

    fields = {name: int(value) for name, value in match.groupdict().items()}
    try:
        naive = datetime(**fields)
    except ValueError as e:
        raise InvalidCalendarDateError(date_str, str(e)) from e

    try:
        parsed = naive.astimezone()
    except (OverflowError, OSError) as e:
        raise InvalidCalendarDateError(
            date_str, "the date is outside the supported range"
        ) from e

    # Anything the calendar or the local zone shifted around shows up here.
    if format_input(parsed) != date_str:
        raise InvalidCalendarDateError(
            date_str, "the time does not exist in the local time zone"
        )

    return parsed


def format_input(timestamp: datetime) -> str:
    """Render a timestamp back into the input layout, in local time."""
    return _to_local(timestamp).strftime(INPUT_DATE_LAYOUT)


def format_for_git(timestamp: datetime) -> str:
    """Format a timestamp for GIT_AUTHOR_DATE and GIT_COMMITTER_DATE.

    Format: ``Dow D Mon YYYY HH:MM:SS TZ``, e.g. ``Wed 5 Feb 2025 20:19:19 CET``.
    The time zone is the host's local zone at that instant.
    """
    local = _to_local(timestamp)
    return (
        f"{_WEEKDAYS[local.weekday()]} {local.day} {_MONTHS[local.month - 1]} "
        f"{local.year:04d} {local:%H:%M:%S} {local.tzname()}"
    )


def _to_local(timestamp: datetime) -> datetime:
    # Naive values are already local wall-clock time.
    return timestamp.astimezone()
