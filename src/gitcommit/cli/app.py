"""Orchestration of a dated commit."""

import logging
from datetime import datetime
from typing import Optional

from gitcommit.cli.config import Config
from gitcommit.cli.errors import (
    ChronologyViolationError,
    GitCommitError,
    InvalidDateFormatError,
    InvalidDateValueError,
    NoRepositoryError,
)
from gitcommit.core.chronology import validate_chronology
from gitcommit.core.dates import format_for_git, parse_date
from gitcommit.core.exceptions import (
    CommitFailedError,
    InvalidCalendarDateError,
    MalformedFormatError,
    RepositoryError,
)
from gitcommit.core.repository import GitRepository
from gitcommit.models import CommitRequest, ValidationReason


class App:
    """Runs one commit request from start to finish.

    Every failure is raised as a UserError; the caller decides how to show it.
    """

    def __init__(
        self,
        config: Config,
        logger: logging.Logger,
        repository: Optional[GitRepository] = None,
    ):
        self.config = config
        self.logger = logger
        self.repository = repository or GitRepository()

    def run(self) -> CommitRequest:
        """Validate the request and create the commit."""
        request = CommitRequest(
            input_date=self.config.date, commit_message=self.config.message
        )
        self.logger.info(
            "Processing commit request: date=%r message=%r",
            request.input_date,
            request.commit_message,
        )

        if not self.repository.is_repository():
            self.logger.error("Not in a Git repository")
            raise NoRepositoryError()
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Git repository detected at %s", self.repository.root())

        last_commit_date = self._get_last_commit_date()

        parsed_date = self._parse_and_validate_date(
            request.input_date, last_commit_date
        )
        request.parsed_date = parsed_date

        git_formatted_date = format_for_git(parsed_date)
        request.git_formatted_date = git_formatted_date
        self.logger.debug("Date formatted for Git: %s", git_formatted_date)

        try:
            self.repository.commit(git_formatted_date, request.commit_message)
        except CommitFailedError as e:
            self.logger.error("Git commit failed: %s", e)
            raise GitCommitError(e.output or str(e)) from e

        self.logger.info("Commit created successfully")
        return request

    def _get_last_commit_date(self) -> Optional[datetime]:
        if not self.repository.has_commits():
            self.logger.debug("No previous commits in repository")
            return None

        try:
            last_date = self.repository.last_commit_timestamp()
        except RepositoryError as e:
            self.logger.warning("Could not retrieve last commit date: %s", e)
            return None

        self.logger.debug("Last commit date retrieved: %s", last_date.isoformat())
        return last_date

    def _parse_and_validate_date(
        self, date_str: str, last_commit_date: Optional[datetime]
    ) -> datetime:
        try:
            parsed_date = parse_date(date_str)
        except MalformedFormatError as e:
            self.logger.error("Date parsing failed: %s", e)
            raise InvalidDateFormatError(date_str) from e
        except InvalidCalendarDateError as e:
            self.logger.error("Date parsing failed: %s", e)
            raise InvalidDateValueError(date_str, e.reason) from e
        self.logger.debug("Date parsed successfully: %s", parsed_date.isoformat())

        result = validate_chronology(parsed_date, last_commit_date)
        if not result.valid:
            self.logger.error(
                "Chronology validation failed: provided=%s last_commit=%s reason=%s",
                parsed_date.isoformat(),
                last_commit_date.isoformat(),
                result.reason.value,
            )
            raise ChronologyViolationError(
                format_for_git(parsed_date),
                format_for_git(last_commit_date),
                equal=result.reason == ValidationReason.EQUAL_TO_LAST,
            )

        self.logger.debug("Chronology validation passed")
        return parsed_date
