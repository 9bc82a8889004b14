"""
Exception hierarchy for the bucket split engine.

All exceptions inherit from BucketSplitError for easy catching.
"""
from typing import Optional


class BucketSplitError(Exception):
    """Base exception for all bucket split errors"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidSplitError(BucketSplitError):
    """Raised when a transaction cannot be split across the participant set"""
    pass
