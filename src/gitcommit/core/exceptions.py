"""Exceptions raised by the date and repository layers."""


class DateParseError(ValueError):
    """Base class for dates that cannot be turned into a timestamp."""

    def __init__(self, date_str: str, reason: str = ""):
        self.date_str = date_str
        self.reason = reason
        message = f"cannot parse date {date_str!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedFormatError(DateParseError):
    """The date does not match the YYYY-MM-DD HH:MM:SS layout."""


class InvalidCalendarDateError(DateParseError):
    """The date matches the layout but does not exist in the calendar."""


class RepositoryError(Exception):
    """A base exception class for errors coming from git."""


class NoCommitsError(RepositoryError):
    """The repository has no commits yet."""


class LookupFailedError(RepositoryError):
    """The last commit date could not be read from git."""


class CommitFailedError(RepositoryError):
    """`git commit` exited with a nonzero status."""

    exit_code: int
    output: str

    def __init__(self, exit_code: int, output: str = ""):
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"git commit failed with exit code {exit_code}")
