"""Audit logger implementation with JSON Lines storage.

Events are appended one per line to a file per UTC day:
    audit_logs/
        2024-01-15.jsonl
        2024-01-16.jsonl
        ...
"""

import json
import logging
import os
import uuid
from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from portfolio_contact.audit.models import AuditAction, AuditEvent

logger = logging.getLogger(__name__)

DEFAULT_AUDIT_DIR = Path("audit_logs")


def generate_event_id() -> str:
    """Generate a unique event ID.

    Format: EVT-{timestamp}-{uuid4_short}
    Example: EVT-20240115143052-a1b2c3d4
    """
    timestamp = datetime.now(UTC).strftime("%Y%m%d%H%M%S")
    short_uuid = uuid.uuid4().hex[:8]
    return f"EVT-{timestamp}-{short_uuid}"


class AuditLogger:
    """Append-only audit logger with JSON file storage.

    Attributes:
        log_dir: Directory where audit logs are stored.
    """

    def __init__(self, log_dir: Path | str | None = None) -> None:
        """Initialize the audit logger.

        Args:
            log_dir: Directory for audit logs. If None, uses './audit_logs'.
                Created on the first write.
        """
        self.log_dir = Path(log_dir) if log_dir is not None else DEFAULT_AUDIT_DIR

    def _get_log_file(self, timestamp: datetime) -> Path:
        return self.log_dir / f"{timestamp.strftime('%Y-%m-%d')}.jsonl"

    def log_event(self, event: AuditEvent) -> str:
        """Append an event to the log file for its day.

        Args:
            event: The event to log.

        Returns:
            The event ID of the logged event.

        Raises:
            OSError: If unable to write to log file.
        """
        json_line = json.dumps(event.model_dump(mode="json"), ensure_ascii=False)
        log_file = self._get_log_file(event.timestamp)

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(json_line + "\n")
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            logger.error("Failed to write audit event %s: %s", event.event_id, e)
            raise

        logger.debug("Logged audit event %s to %s", event.event_id, log_file)
        return event.event_id

    def record(
        self,
        action: AuditAction,
        resource_id: str,
        details: dict[str, Any] | None = None,
    ) -> str:
        """Build and log an event in one call.

        Args:
            action: Action being recorded.
            resource_id: Affected submission ID.
            details: Optional action-specific details.

        Returns:
            The event ID of the logged event.
        """
        event = AuditEvent(
            event_id=generate_event_id(),
            action=action,
            resource_id=resource_id,
            details=details or {},
        )
        return self.log_event(event)

    def _iter_events(self) -> Iterator[AuditEvent]:
        for log_file in sorted(self.log_dir.glob("*.jsonl")):
            try:
                with open(log_file, encoding="utf-8") as f:
                    lines = f.readlines()
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to read audit log %s: %s", log_file, e)
                continue

            for line in lines:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield AuditEvent.model_validate(json.loads(line))
                except ValueError as e:
                    logger.warning("Skipping malformed event in %s: %s", log_file, e)

    def _collect(self, keep: Callable[[AuditEvent], bool]) -> list[AuditEvent]:
        events = [event for event in self._iter_events() if keep(event)]
        events.sort(key=lambda e: e.timestamp)
        return events

    def get_events(self, resource_id: str) -> list[AuditEvent]:
        """Retrieve events for one submission, sorted by timestamp."""
        return self._collect(lambda e: e.resource_id == resource_id)

    def get_all_events(self) -> list[AuditEvent]:
        """Retrieve every logged event, sorted by timestamp."""
        return self._collect(lambda e: True)
