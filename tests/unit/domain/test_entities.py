"""Tests for typed artifact records."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from artifact_validator.domain.entities import (
    RUN_EVENT_ADAPTER,
    CommandEvent,
    FileEntry,
    SnapshotEvent,
    Summary,
)
from tests.factories import make_command_event, make_snapshot_event

NOON = datetime(2026, 1, 17, 12, tzinfo=UTC)


class TestRunEvent:
    def test_discriminates_command(self) -> None:
        event = RUN_EVENT_ADAPTER.validate_python({**make_command_event(), "timestamp": NOON})
        assert isinstance(event, CommandEvent)

    def test_discriminates_snapshot(self) -> None:
        event = RUN_EVENT_ADAPTER.validate_python({**make_snapshot_event(), "timestamp": NOON})
        assert isinstance(event, SnapshotEvent)
        assert event.exit_code is None

    def test_command_requires_exit_code(self) -> None:
        record = {**make_command_event(), "timestamp": NOON}
        del record["exit_code"]
        with pytest.raises(ValidationError):
            RUN_EVENT_ADAPTER.validate_python(record)

    def test_strict_types_do_not_coerce(self) -> None:
        record = {**make_command_event(), "timestamp": NOON, "duration_ms": "42"}
        with pytest.raises(ValidationError):
            RUN_EVENT_ADAPTER.validate_python(record)

    def test_events_are_frozen(self) -> None:
        event = RUN_EVENT_ADAPTER.validate_python({**make_command_event(), "timestamp": NOON})
        with pytest.raises(ValidationError):
            event.label = "changed"  # type: ignore[misc]


class TestFileEntry:
    def test_valid_entry(self) -> None:
        entry = FileEntry.model_validate({"path": "a.txt", "size": 3, "is_dir": False})
        assert entry.size == 3

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FileEntry.model_validate({"path": "a.txt", "size": -1, "is_dir": False})


class TestSummary:
    def test_bool_run_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Summary.model_validate(
                {"suite": "s", "test": "t", "passed": True, "run_count": True, "timestamp": NOON}
            )
