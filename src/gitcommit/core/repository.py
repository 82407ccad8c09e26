"""Access to the git repository a commit is created in."""

import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import git

from gitcommit.core.exceptions import (
    CommitFailedError,
    LookupFailedError,
    NoCommitsError,
)

# Exit code returned by git log when the current branch has no commits.
GIT_EXIT_CODE_NO_COMMITS = 128


class GitRepository:
    """Git operations needed to create a dated commit.

    Queries go through GitPython's command wrapper. The commit itself is run
    with ``subprocess`` so git can talk to the user's terminal directly.
    """

    def __init__(self, working_dir: Union[str, Path, None] = None):
        self.working_dir = Path(working_dir or os.getcwd()).resolve()
        self._git = git.Git(str(self.working_dir))

    def is_repository(self) -> bool:
        """Check if the working directory is inside a git repository."""
        try:
            self._git.rev_parse("--git-dir")
        except git.CommandError:
            return False
        return True

    def has_commits(self) -> bool:
        """Check if HEAD points to a commit."""
        try:
            self._git.rev_parse("--verify", "--quiet", "HEAD")
        except git.CommandError:
            return False
        return True

    def root(self) -> Optional[Path]:
        """Get the top-level directory of the working tree."""
        try:
            return Path(self._git.rev_parse("--show-toplevel"))
        except git.CommandError:
            return None

    def last_commit_timestamp(self) -> datetime:
        """Get the author date of the most recent commit.

        Raises:
            NoCommitsError: the repository has no commits.
            LookupFailedError: git failed or printed something unexpected.
        """
        try:
            output = self._git.log("-1", "--format=%aI")
        except git.GitCommandError as e:
            if e.status == GIT_EXIT_CODE_NO_COMMITS:
                raise NoCommitsError("no commits in repository") from e
            raise LookupFailedError(f"failed to get last commit date: {e}") from e

        date_str = output.strip()
        if not date_str:
            raise NoCommitsError("no commits in repository")

        try:
            return datetime.fromisoformat(date_str)
        except ValueError as e:
            raise LookupFailedError(
                f"failed to parse commit date {date_str!r}"
            ) from e

    def commit(self, git_formatted_date: str, message: str) -> None:
        """Run ``git commit`` with forced author and committer dates.

        Nothing is staged here; an empty index makes git fail and that failure
        is raised as CommitFailedError.
        """
        env = os.environ.copy()
        env["GIT_AUTHOR_DATE"] = git_formatted_date
        env["GIT_COMMITTER_DATE"] = git_formatted_date

        result = subprocess.run(  # noqa: S603, S607
            ["git", "commit", "-m", message],
            cwd=str(self.working_dir),
            env=env,
            check=False,
        )
        if result.returncode != 0:
            raise CommitFailedError(
                result.returncode,
                f"git commit failed with exit code {result.returncode}",
            )
