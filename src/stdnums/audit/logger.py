"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle for efficient I/O.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from stdnums.audit.models import LOG_LEVELS, LogEvent
from stdnums.utils import get_iso_timestamp

__all__ = ["AuditLogger"]

# Raw values are truncated in events to keep lines bounded
_RAW_SNIPPET_LENGTH = 120


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write for durability.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        kind: str | None = None,
        index: int | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "batch_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        kind : str | None, optional
            Identifier type the event concerns.
        index : int | None, optional
            Batch position if event is value-specific.

        Raises
        ------
        ValueError
            If ``level`` is not a known log level.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            kind=kind,
            index=index,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def batch_started(self, kind: str, expected_values: int | None = None) -> None:
        """Log batch_started event.

        Parameters
        ----------
        kind : str
            Identifier type being normalized.
        expected_values : int | None, optional
            Number of values in the batch, if known.
        """
        data: dict[str, Any] = {}
        if expected_values is not None:
            data["expected_values"] = expected_values

        self.event("batch_started", data=data, kind=kind)

    def batch_finished(
        self,
        kind: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log batch_finished event.

        Parameters
        ----------
        kind : str
            Identifier type that was normalized.
        duration_seconds : float
            Batch execution time in seconds.
        counters : dict[str, int] | None, optional
            Outcome counters.
        """
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters

        self.event("batch_finished", data=data, kind=kind)

    def value_rejected(self, kind: str, index: int, raw: str | None, status: str) -> None:
        """Log value_rejected event for a value that did not normalize.

        Parameters
        ----------
        kind : str
            Identifier type.
        index : int
            Position of the value in its batch.
        raw : str | None
            The raw value (truncated in the event).
        status : str
            Validity status ("invalid" or "not_recognized").
        """
        self.event(
            "value_rejected",
            data={
                "raw_snippet": raw[:_RAW_SNIPPET_LENGTH] if raw is not None else None,
                "status": status,
            },
            level="WARN" if status == "invalid" else "DEBUG",
            kind=kind,
            index=index,
        )

    def error(
        self,
        exception_class: str,
        message: str,
        kind: str | None = None,
        index: int | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        kind : str | None, optional
            Identifier type being processed.
        index : int | None, optional
            Batch position if error is value-specific.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
            kind=kind,
            index=index,
        )
