"""Commit request model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CommitRequest(BaseModel):
    """A user's request to create a commit with a specific date."""

    input_date: str
    commit_message: str
    parsed_date: Optional[datetime] = None  # Set once the date is parsed
    git_formatted_date: Optional[str] = None  # Value for GIT_*_DATE
