"""Audit logging subsystem for stdnums.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: structured event record
"""

from stdnums.audit.helpers import generate_run_id, parse_iso_timestamp
from stdnums.audit.logger import AuditLogger
from stdnums.audit.models import LOG_LEVELS, LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "LOG_LEVELS",
    "generate_run_id",
    "parse_iso_timestamp",
]
