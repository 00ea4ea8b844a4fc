"""Invariants that span records or files rather than single fields.

The engine only flags problems. Line-ending normalization is the harness's
job and happens before artifacts are written.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from artifact_validator.domain.entities.validation_report import ReportBuilder
from artifact_validator.domain.services.field_rules import path_problem
from artifact_validator.domain.value_objects import Severity, ViolationKind


def _contains_cr(value: Any) -> bool:
    if isinstance(value, str):
        return "\r" in value
    if isinstance(value, list):
        return any(_contains_cr(item) for item in value)
    if isinstance(value, dict):
        return any(_contains_cr(item) for item in value.values())
    return False


def is_path_field(name: str) -> bool:
    return name == "path" or name.endswith("_path")


class InvariantEngine:
    def check_line_endings(self, line: str, index: int, builder: ReportBuilder) -> None:
        """Flag a raw JSONL line that still carries a carriage return."""
        if "\r" in line:
            builder.add(
                ViolationKind.UNNORMALIZED_LINE_ENDING,
                "line contains a carriage return; line endings must be normalized to LF",
                index=index,
            )

    def check_document_line_endings(self, content: str, builder: ReportBuilder) -> None:
        """Flag a whole-file document that still carries carriage returns."""
        lines = content.split("\n")
        offending = [number for number, line in enumerate(lines, start=1) if "\r" in line]
        if offending:
            builder.add(
                ViolationKind.UNNORMALIZED_LINE_ENDING,
                f"{len(offending)} line(s) contain a carriage return "
                f"(first at line {offending[0]}); line endings must be normalized to LF",
            )

    def check_text_fields(
        self, record: dict[str, Any], index: int, builder: ReportBuilder
    ) -> None:
        """Flag captured text fields that still contain a carriage return."""
        for name, value in record.items():
            if _contains_cr(value):
                builder.add(
                    ViolationKind.UNNORMALIZED_LINE_ENDING,
                    f"{name} contains a carriage return",
                    index=index,
                    field=name,
                )

    def check_paths(self, record: dict[str, Any], index: int, builder: ReportBuilder) -> None:
        """Re-check every path-bearing field of a record, including ones the
        schema checkers do not know about."""
        for name, value in record.items():
            if not is_path_field(name) or not isinstance(value, str):
                continue
            problem = path_problem(value)
            if problem:
                builder.add(ViolationKind.UNSAFE_PATH, problem, index=index, field=name)

    def check_monotonic(
        self, timestamps: Iterable[tuple[int, datetime]], builder: ReportBuilder
    ) -> None:
        """Warn when an event's timestamp is earlier than the one before it.

        Equal timestamps are allowed; clock resolution can legitimately tie.
        """
        previous: tuple[int, datetime] | None = None
        for index, moment in timestamps:
            if previous is not None and moment < previous[1]:
                builder.add(
                    ViolationKind.NON_MONOTONIC_TIMESTAMP,
                    f"timestamp moves backward from line {previous[0]} "
                    f"({previous[1].isoformat()}) to {moment.isoformat()}",
                    index=index,
                    field="timestamp",
                    severity=Severity.WARNING,
                )
            previous = (index, moment)
