from __future__ import annotations

from typing import Any

from artifact_validator.domain.entities.summary import Summary
from artifact_validator.domain.entities.validation_report import ReportBuilder
from artifact_validator.domain.services.field_rules import is_int, parse_timestamp
from artifact_validator.domain.services.line_parser import json_type_name
from artifact_validator.domain.value_objects import ViolationKind

SUMMARY_INDEX = 1

STRING_FIELDS = ("suite", "test")


class SummaryChecker:
    def check(
        self,
        document: Any,
        builder: ReportBuilder,
        command_count: int | None = None,
    ) -> Summary | None:
        """Validate a summary document.

        When ``command_count`` is given (the number of command events in the
        same test's event stream) ``run_count`` must match it.
        """
        if not isinstance(document, dict):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"summary must be a JSON object, got {json_type_name(document)}",
                index=SUMMARY_INDEX,
            )
            return None

        errors_before = builder.error_count

        for name in ("suite", "test", "passed", "run_count", "timestamp"):
            if name not in document:
                builder.add(
                    ViolationKind.MISSING_FIELD,
                    f"required field '{name}' is missing",
                    index=SUMMARY_INDEX,
                    field=name,
                )

        for name in STRING_FIELDS:
            if name in document and not isinstance(document[name], str):
                self._wrong_type(builder, document, name, "a string")

        if "passed" in document and not isinstance(document["passed"], bool):
            self._wrong_type(builder, document, "passed", "a boolean")

        run_count = document.get("run_count")
        if "run_count" in document:
            if not is_int(run_count):
                self._wrong_type(builder, document, "run_count", "an integer")
            elif run_count < 0:
                builder.add(
                    ViolationKind.OUT_OF_RANGE,
                    f"run_count must be non-negative, got {run_count}",
                    index=SUMMARY_INDEX,
                    field="run_count",
                )

        timestamp = None
        if "timestamp" in document:
            timestamp = parse_timestamp(document["timestamp"])
            if timestamp is None:
                builder.add(
                    ViolationKind.INVALID_TIMESTAMP,
                    f"timestamp {document['timestamp']!r} is not RFC 3339 with an explicit offset",
                    index=SUMMARY_INDEX,
                    field="timestamp",
                )

        if command_count is not None and is_int(run_count) and run_count != command_count:
            builder.add(
                ViolationKind.COUNT_MISMATCH,
                f"run_count does not match command events: expected {command_count}, "
                f"found {run_count}",
                index=SUMMARY_INDEX,
                field="run_count",
            )

        if builder.error_count > errors_before:
            return None
        return Summary.model_validate({**document, "timestamp": timestamp})

    def _wrong_type(
        self, builder: ReportBuilder, document: dict[str, Any], name: str, expected: str
    ) -> None:
        builder.add(
            ViolationKind.INVALID_FIELD_TYPE,
            f"{name} must be {expected}, got {json_type_name(document[name])}",
            index=SUMMARY_INDEX,
            field=name,
        )
