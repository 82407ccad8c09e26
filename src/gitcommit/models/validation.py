"""Validation result model for commit dates."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ValidationReason(str, Enum):
    """Why a commit date was rejected."""

    MALFORMED_FORMAT = "malformed_format"
    INVALID_VALUE = "invalid_value"
    EQUAL_TO_LAST = "equal_to_last"
    BEFORE_LAST = "before_last"


class ValidationResult(BaseModel):
    """Outcome of validating a commit date.

    A result without a reason is valid.
    """

    reason: Optional[ValidationReason] = None
    message: str = ""
    provided_date: Optional[datetime] = None
    last_commit_date: Optional[datetime] = None

    @property
    def valid(self) -> bool:
        return self.reason is None

    @property
    def is_chronology_violation(self) -> bool:
        return self.reason in (
            ValidationReason.EQUAL_TO_LAST,
            ValidationReason.BEFORE_LAST,
        )
