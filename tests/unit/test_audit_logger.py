"""Tests for audit logger module."""

import json
from pathlib import Path

import pytest

from stdnums.audit import AuditLogger, generate_run_id, parse_iso_timestamp


@pytest.fixture
def logger(tmp_path: Path) -> AuditLogger:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file."""
    assert logger.log_path.exists()
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "value"}, level="INFO", kind="isbn", index=3)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "value"}
    assert evt["kind"] == "isbn"
    assert evt["index"] == 3
    assert evt["ts"].endswith("Z")
    assert parse_iso_timestamp(evt["ts"]).tzinfo is not None


@pytest.mark.unit
def test_logger_rejects_unknown_level(logger: AuditLogger) -> None:
    """Test unknown log levels raise."""
    with pytest.raises(ValueError, match="level must be"):
        logger.event("bad", level="LOUD")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("batch_started", {"kind": "isbn", "expected_values": 10}, "batch_started", "INFO"),
        (
            "batch_finished",
            {"kind": "isbn", "duration_seconds": 0.5, "counters": {"valid": 5}},
            "batch_finished",
            "INFO",
        ),
        (
            "value_rejected",
            {"kind": "issn", "index": 0, "raw": "0378-5954", "status": "invalid"},
            "value_rejected",
            "WARN",
        ),
        (
            "value_rejected",
            {"kind": "issn", "index": 0, "raw": "abc", "status": "not_recognized"},
            "value_rejected",
            "DEBUG",
        ),
        ("error", {"exception_class": "TypeError", "message": "bad"}, "error", "ERROR"),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test all convenience methods produce correct event type and level."""
    getattr(logger, method)(**kwargs)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level


@pytest.mark.unit
def test_value_rejected_truncates_raw(logger: AuditLogger) -> None:
    """Test long raw values are truncated in events."""
    logger.value_rejected("lccn", 0, "x" * 500, "not_recognized")

    events = _read_events(logger.log_path)
    assert len(events[0]["data"]["raw_snippet"]) == 120


@pytest.mark.unit
def test_logger_close_and_context_manager(tmp_path: Path) -> None:
    """Test close() flushes and context manager auto-closes."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="r1", log_path=log_path) as lg:
        lg.event("inside")

    events = _read_events(log_path)
    assert len(events) == 1

    # Second logger can append to same file
    with AuditLogger(run_id="r2", log_path=log_path) as lg2:
        lg2.event("second")

    events = _read_events(log_path)
    assert [e["run_id"] for e in events] == ["r1", "r2"]


@pytest.mark.unit
def test_logger_creates_parent_directories(tmp_path: Path) -> None:
    """Test logger creates nested parent directories."""
    nested = tmp_path / "a" / "b" / "events.jsonl"
    lg = AuditLogger(run_id="test", log_path=nested)
    lg.event("test")
    lg.close()

    assert nested.exists()
    assert len(_read_events(nested)) == 1


@pytest.mark.unit
def test_generate_run_id_unique() -> None:
    """Test run ids are timestamped and unique."""
    first, second = generate_run_id(), generate_run_id()

    assert first != second
    assert "__" in first
    parse_iso_timestamp(first.split("__")[0])
