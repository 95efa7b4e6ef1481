"""Durable storage for contact submissions."""

from portfolio_contact.storage.store import (
    DEFAULT_DATA_FILE,
    FileSubmissionStore,
    StorageCorruptError,
    StorageError,
    StorageWriteError,
    SubmissionStore,
)

__all__ = [
    "DEFAULT_DATA_FILE",
    "FileSubmissionStore",
    "StorageCorruptError",
    "StorageError",
    "StorageWriteError",
    "SubmissionStore",
]
