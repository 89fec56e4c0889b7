"""
Error taxonomy shared by all applications.

Every error raised by a repository or a record parser derives from
RepositoryError so orchestration code can catch the whole family at once.
Missing or unreadable files surface as the built-in OSError family
(FileNotFoundError, PermissionError).
"""

from typing import Any, Optional


class RepositoryError(Exception):
    """Base class for repository and record validation failures."""


class DuplicateKeyError(RepositoryError):
    def __init__(self, key: Any, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} already exists.")


class NotFoundError(RepositoryError):
    def __init__(self, key: Any, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} not found.")


class InvalidValueError(RepositoryError):
    """Raised when a quantity-like field would be set to a negative or invalid value."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or "Quantity cannot be negative.")


class MalformedRecordError(RepositoryError):
    """
    A line of a delimited text file could not be parsed.

    Attributes:
        line_number: 1-based number of the offending line
    """

    reason = "Malformed record."

    def __init__(self, line_number: int, reason: Optional[str] = None):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {reason or self.reason}")


class MissingFieldError(MalformedRecordError):
    reason = "Missing required fields."


class InvalidIdFormatError(MalformedRecordError):
    reason = "Invalid ID format."


class InvalidScoreFormatError(MalformedRecordError):
    reason = "Score format is invalid."


class SnapshotFormatError(RepositoryError):
    """A snapshot file exists but does not hold a valid list of entities."""
