from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from artifact_validator.domain.entities.run_event import RUN_EVENT_ADAPTER, RunEvent
from artifact_validator.domain.entities.validation_report import ReportBuilder
from artifact_validator.domain.services.field_rules import (
    EXIT_CODE_MAX,
    EXIT_CODE_MIN,
    is_absolute_path,
    is_int,
    is_string_list,
    parse_timestamp,
    path_problem,
)
from artifact_validator.domain.services.line_parser import json_type_name
from artifact_validator.domain.value_objects import EventType, ViolationKind, is_known_event_type

REQUIRED_FIELDS = (
    "timestamp",
    "event_type",
    "label",
    "args",
    "cwd",
    "success",
    "stdout_len",
    "stderr_len",
)

COMMAND_FIELDS = ("binary", "exit_code", "duration_ms")

COUNT_FIELDS = ("duration_ms", "stdout_len", "stderr_len")

PATH_FIELDS = ("stdout_path", "stderr_path", "snapshot_path")


class EventChecker:
    """Schema checks for one decoded events.jsonl record.

    Every check runs regardless of earlier failures on the same record.
    """

    def check(self, record: dict[str, Any], line: int, builder: ReportBuilder) -> RunEvent | None:
        """Record all violations for ``record`` and return the typed event
        when the record is free of errors."""
        errors_before = builder.error_count
        event_type = record.get("event_type")
        is_command = event_type == EventType.COMMAND.value

        # 1. Discriminant
        if "event_type" in record and not is_known_event_type(event_type):
            allowed = ", ".join(t.value for t in EventType)
            builder.add(
                ViolationKind.UNKNOWN_EVENT_TYPE,
                f"event_type {event_type!r} is not one of: {allowed}",
                index=line,
                field="event_type",
            )

        # 2. Common required fields
        for name in REQUIRED_FIELDS:
            if name not in record:
                builder.add(
                    ViolationKind.MISSING_FIELD,
                    f"required field '{name}' is missing",
                    index=line,
                    field=name,
                )

        # 3. Fields required only for command events
        if is_command:
            for name in COMMAND_FIELDS:
                if record.get(name) is None:
                    builder.add(
                        ViolationKind.MISSING_CONDITIONAL_FIELD,
                        f"field '{name}' is required for command events",
                        index=line,
                        field=name,
                    )

        # 4. Types
        self._check_types(record, line, builder)

        # 5. Exit code range
        exit_code = record.get("exit_code")
        if is_int(exit_code) and not EXIT_CODE_MIN <= exit_code <= EXIT_CODE_MAX:
            builder.add(
                ViolationKind.OUT_OF_RANGE,
                f"exit_code {exit_code} is outside [{EXIT_CODE_MIN}, {EXIT_CODE_MAX}]",
                index=line,
                field="exit_code",
            )

        # 6. Non-negative counters
        for name in COUNT_FIELDS:
            value = record.get(name)
            if is_int(value) and value < 0:
                builder.add(
                    ViolationKind.OUT_OF_RANGE,
                    f"{name} must be non-negative, got {value}",
                    index=line,
                    field=name,
                )

        # 7. success mirrors exit_code
        success = record.get("success")
        if isinstance(success, bool) and is_int(exit_code) and success != (exit_code == 0):
            builder.add(
                ViolationKind.INCONSISTENT_FIELD,
                f"success is {str(success).lower()} but exit_code is {exit_code}",
                index=line,
                field="success",
            )

        # 8. Timestamp
        if "timestamp" in record and parse_timestamp(record["timestamp"]) is None:
            builder.add(
                ViolationKind.INVALID_TIMESTAMP,
                f"timestamp {record['timestamp']!r} is not RFC 3339 with an explicit offset",
                index=line,
                field="timestamp",
            )

        # 9. Relative path references
        for name in PATH_FIELDS:
            value = record.get(name)
            if isinstance(value, str):
                problem = path_problem(value)
                if problem:
                    builder.add(ViolationKind.UNSAFE_PATH, problem, index=line, field=name)

        if builder.error_count > errors_before:
            return None
        return self._to_event(record, line, builder)

    def _check_types(self, record: dict[str, Any], line: int, builder: ReportBuilder) -> None:
        def wrong_type(name: str, expected: str) -> None:
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"{name} must be {expected}, got {json_type_name(record[name])}",
                index=line,
                field=name,
            )

        if "args" in record and not is_string_list(record["args"]):
            wrong_type("args", "an array of strings")

        for name in ("label", "cwd"):
            if name in record and not isinstance(record[name], str):
                wrong_type(name, "a string")

        cwd = record.get("cwd")
        if isinstance(cwd, str) and not is_absolute_path(cwd):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"cwd '{cwd}' is not an absolute path",
                index=line,
                field="cwd",
            )

        if "success" in record and not isinstance(record["success"], bool):
            wrong_type("success", "a boolean")

        for name in ("stdout_len", "stderr_len"):
            if name in record and not is_int(record[name]):
                wrong_type(name, "an integer")

        # Conditional fields may be null; absence is reported separately
        for name in ("exit_code", "duration_ms"):
            if record.get(name) is not None and not is_int(record[name]):
                wrong_type(name, "an integer")

        if record.get("binary") is not None and not isinstance(record["binary"], str):
            wrong_type("binary", "a string")

        for name in PATH_FIELDS:
            if record.get(name) is not None and not isinstance(record[name], str):
                wrong_type(name, "a string")

    def _to_event(
        self, record: dict[str, Any], line: int, builder: ReportBuilder
    ) -> RunEvent | None:
        data = {**record, "timestamp": parse_timestamp(record["timestamp"])}
        try:
            return RUN_EVENT_ADAPTER.validate_python(data)
        except ValidationError as e:
            for error in e.errors():
                loc = error["loc"]
                # Discriminated unions prefix the location with the tag
                name = str(loc[1]) if len(loc) > 1 else str(loc[0]) if loc else None
                builder.add(
                    ViolationKind.INVALID_FIELD_TYPE,
                    error["msg"],
                    index=line,
                    field=name,
                )
            return None
