"""Chronological ordering checks for commit dates."""

from datetime import datetime
from typing import Optional

from gitcommit.core.dates import parse_date
from gitcommit.core.exceptions import InvalidCalendarDateError, MalformedFormatError
from gitcommit.models.validation import ValidationReason, ValidationResult


def validate_chronology(
    commit_date: datetime, last_commit_date: Optional[datetime]
) -> ValidationResult:
    """Check that a commit date comes strictly after the last commit.

    Dates are compared as absolute instants, so the same moment expressed in
    two different UTC offsets counts as equal. Without a last commit any date
    is accepted.
    """
    result = ValidationResult(
        provided_date=commit_date, last_commit_date=last_commit_date
    )

    if last_commit_date is None:
        return result

    if commit_date == last_commit_date:
        result.reason = ValidationReason.EQUAL_TO_LAST
        result.message = "Commit date must be after the last commit (dates are equal)"
    elif commit_date < last_commit_date:
        result.reason = ValidationReason.BEFORE_LAST
        result.message = "Commit date must be after the last commit"

    return result


def validate_date(
    date_str: str, last_commit_date: Optional[datetime]
) -> ValidationResult:
    """Parse a date string and check its chronology in one step.

    Parsing problems are reported in the result instead of being raised.
    """
    try:
        commit_date = parse_date(date_str)
    except MalformedFormatError:
        return ValidationResult(
            reason=ValidationReason.MALFORMED_FORMAT,
            message="Invalid date format. Expected: YYYY-MM-DD HH:MM:SS",
            last_commit_date=last_commit_date,
        )
    except InvalidCalendarDateError as e:
        return ValidationResult(
            reason=ValidationReason.INVALID_VALUE,
            message=f"Invalid calendar date: {e.reason}",
            last_commit_date=last_commit_date,
        )

    return validate_chronology(commit_date, last_commit_date)
