"""Append-only file storage for contact submissions.

All submissions live in a single JSON document holding an array of
records in creation order. Every append rewrites the whole document
through a temporary file that is fsynced and then renamed over the
target, so readers see either the old or the new collection.

One store instance owns the backing file within a process. Appends are
serialized with a per-instance lock; separate processes writing the same
file are not supported and can lose updates.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from portfolio_contact.models.submission import ContactRequest, Submission

logger = logging.getLogger(__name__)

# Default backing file
DEFAULT_DATA_FILE = Path("data/submissions.json")


class StorageError(Exception):
    """Base exception for submission storage errors."""

    pass


class StorageCorruptError(StorageError):
    """The backing collection exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Submission store {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class StorageWriteError(StorageError):
    """The backing collection could not be durably written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to write submission store {path}: {reason}")
        self.path = path
        self.reason = reason


class SubmissionStore(Protocol):
    """Protocol for durable, append-only submission storage."""

    def list(self) -> list[Submission]:
        """Return every stored submission in creation order.

        Raises:
            StorageCorruptError: If the backing collection is unreadable.
        """
        ...

    def append(
        self, request: ContactRequest, now: datetime | None = None
    ) -> Submission:
        """Record a new submission and return it with id and timestamp set.

        Raises:
            StorageCorruptError: If the existing collection is unreadable.
            StorageWriteError: If the collection cannot be written.
        """
        ...


class FileSubmissionStore:
    """Submission store backed by a single JSON file.

    Attributes:
        path: Location of the backing JSON document.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize file storage.

        Args:
            path: Backing JSON file. Defaults to data/submissions.json.
                The file is created on the first append.
        """
        self.path = Path(path) if path is not None else DEFAULT_DATA_FILE
        self._lock = threading.Lock()

    def _read_records(self) -> list[dict[str, Any]]:
        """Load the raw record list from disk."""
        try:
            with open(self.path, encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            logger.error("Submission store %s is not valid UTF-8: %s", self.path, e)
            raise StorageCorruptError(self.path, f"invalid encoding: {e}") from e
        except OSError as e:
            logger.error("Failed to read submission store %s: %s", self.path, e)
            raise StorageCorruptError(self.path, str(e)) from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Submission store %s is not valid JSON: %s", self.path, e)
            raise StorageCorruptError(self.path, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            logger.error("Submission store %s does not hold a JSON array", self.path)
            raise StorageCorruptError(self.path, "top-level value is not an array")

        return data

    def _parse(self, records: list[dict[str, Any]]) -> list[Submission]:
        try:
            return [Submission.model_validate(record) for record in records]
        except ValidationError as e:
            logger.error("Submission store %s has invalid records: %s", self.path, e)
            raise StorageCorruptError(self.path, "invalid submission record") from e

    def _write_records(self, records: list[dict[str, Any]]) -> None:
        """Atomically replace the backing file with the given records."""
        directory = self.path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error("Failed to write submission store %s: %s", self.path, e)
            raise StorageWriteError(self.path, str(e)) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)

    def list(self) -> list[Submission]:
        """Return every stored submission in creation order.

        Returns:
            List of submissions; empty if nothing has been stored yet.

        Raises:
            StorageCorruptError: If the backing file exists but is not a
                valid JSON array of submissions.
        """
        return self._parse(self._read_records())

    def append(
        self, request: ContactRequest, now: datetime | None = None
    ) -> Submission:
        """Record a new submission.

        Reads the current collection, appends the new record and rewrites
        the whole document while holding the instance lock.

        Args:
            request: Validated contact request.
            now: Creation time. Defaults to current UTC time.

        Returns:
            The stored submission with id and timestamp assigned.

        Raises:
            StorageCorruptError: If the existing collection is unreadable.
                The file is left untouched.
            StorageWriteError: If the new collection cannot be written.
        """
        with self._lock:
            records = self._read_records()
            existing = self._parse(records)

            submission = Submission.from_request(request, now=now)
            # Regenerate on the (unlikely) chance of an id collision
            known_ids = {s.id for s in existing}
            while submission.id in known_ids:
                submission = Submission.from_request(request, now=submission.timestamp)

            records.append(submission.model_dump(mode="json"))
            self._write_records(records)

        logger.info("Stored submission %s in %s", submission.id, self.path)
        return submission
