"""Repository, entity base and error taxonomy shared by all applications."""

from .entity import Entity
from .exceptions import (
    DuplicateKeyError,
    InvalidIdFormatError,
    InvalidScoreFormatError,
    InvalidValueError,
    MalformedRecordError,
    MissingFieldError,
    NotFoundError,
    RepositoryError,
    SnapshotFormatError,
)
from .repository import KeyedRepository

__all__ = [
    "Entity",
    "KeyedRepository",
    "RepositoryError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidValueError",
    "MalformedRecordError",
    "MissingFieldError",
    "InvalidIdFormatError",
    "InvalidScoreFormatError",
    "SnapshotFormatError",
]
