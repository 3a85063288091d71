"""Data models for audit logging."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LOG_LEVELS", "LogEvent"]

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    kind : str | None
        Identifier type the event concerns ('isbn', 'issn', 'lccn').
    index : int | None
        Position of the value in its batch if event is value-specific.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    kind: str | None = None
    index: int | None = None
