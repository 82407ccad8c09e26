"""User-facing errors with explanations and hints."""

from gitcommit.core.dates import INPUT_DATE_EXAMPLE

EXIT_SUCCESS = 0
EXIT_ERROR = 1


class UserError(Exception):
    """An error with a message a user can act on."""

    error_type = "UserError"

    def __init__(self, message: str, details: str = "", hint: str = ""):
        self.message = message
        self.details = details
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(self.details)
        if self.hint:
            parts.append(self.hint)
        return "\n\n".join(parts)


class InvalidDateFormatError(UserError):
    error_type = "InvalidDateFormat"

    def __init__(self, provided: str):
        super().__init__(
            "Invalid date format",
            details=(
                "Expected format: YYYY-MM-DD HH:MM:SS\n"
                f"Example:         {INPUT_DATE_EXAMPLE}\n\n"
                f"You provided:    {provided}"
            ),
        )


class InvalidDateValueError(UserError):
    error_type = "InvalidDateValue"

    def __init__(self, date: str, reason: str):
        super().__init__(
            "Invalid calendar date",
            details=f'The date "{date}" does not exist.\n{reason}',
        )


class NoRepositoryError(UserError):
    error_type = "NoRepository"

    def __init__(self):
        super().__init__(
            "Not a Git repository",
            details="The current directory is not inside a Git repository.",
            hint=(
                "To fix this:\n"
                "  - Navigate to a Git repository: cd /path/to/repo\n"
                "  - Or initialize a new repository: git init"
            ),
        )


class ChronologyViolationError(UserError):
    error_type = "ChronologyViolation"

    def __init__(self, provided_date: str, last_commit_date: str, equal: bool):
        self.equal = equal
        if equal:
            hint = (
                "Commits must be dated AFTER the last commit (not equal).\n"
                "Suggestion: Try adding 1 second to your date."
            )
        else:
            hint = (
                "Commits must be dated after the last commit "
                "to maintain chronological order."
            )
        super().__init__(
            "Chronology violation",
            details=(
                f"Your date:        {provided_date}\n"
                f"Last commit date: {last_commit_date}"
            ),
            hint=hint,
        )


class GitCommitError(UserError):
    error_type = "GitCommandError"

    def __init__(self, git_error: str):
        super().__init__(
            "Git commit failed",
            details=f"Git error: {git_error}",
            hint=(
                "Possible solutions:\n"
                "  - Stage your changes: git add <files>\n"
                "  - Check if changes exist: git status"
            ),
        )


class MissingArgumentsError(UserError):
    error_type = "MissingArguments"

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            "Missing required arguments",
            details=(
                "Usage: gitcommit <date> <message>\n\n"
                f"Expected: {expected} arguments\n"
                f"Received: {received} argument(s)"
            ),
            hint=(
                "Examples:\n"
                '  gitcommit "2025-02-05 20:19:19" "Add new feature"\n'
                '  gitcommit "2025-12-31 23:59:59" "End of year commit"\n\n'
                "Run 'gitcommit --help' for more information."
            ),
        )
