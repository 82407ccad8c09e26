"""Data models for gitcommit."""

from .commit_request import CommitRequest
from .validation import ValidationReason, ValidationResult

__all__ = ["CommitRequest", "ValidationReason", "ValidationResult"]
