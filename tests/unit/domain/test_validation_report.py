"""Tests for ValidationReport and ReportBuilder."""

from artifact_validator.domain.entities import ReportBuilder, ValidationReport, Violation
from artifact_validator.domain.value_objects import Severity, ViolationKind


class TestReportBuilder:
    def test_empty_report_is_valid(self) -> None:
        report = ReportBuilder("events.jsonl").build()
        assert report.violations == ()
        assert report.is_valid

    def test_violations_sorted_by_index_then_kind(self) -> None:
        builder = ReportBuilder("events.jsonl")
        builder.add(ViolationKind.OUT_OF_RANGE, "late", index=5, field="exit_code")
        builder.add(ViolationKind.UNSAFE_PATH, "b", index=2, field="stdout_path")
        builder.add(ViolationKind.MISSING_FIELD, "a", index=2, field="label")

        report = builder.build()

        assert [(v.index, v.kind) for v in report.violations] == [
            (2, ViolationKind.MISSING_FIELD),
            (2, ViolationKind.UNSAFE_PATH),
            (5, ViolationKind.OUT_OF_RANGE),
        ]

    def test_same_location_and_kind_merged(self) -> None:
        builder = ReportBuilder("a.snapshot.json")
        builder.add(ViolationKind.UNSAFE_PATH, "first", index=0, field="path")
        builder.add(ViolationKind.UNSAFE_PATH, "second", index=0, field="path")

        violations = builder.build().violations
        assert len(violations) == 1
        assert violations[0].message == "first"

    def test_error_count_ignores_warnings(self) -> None:
        builder = ReportBuilder("events.jsonl")
        builder.add(
            ViolationKind.NON_MONOTONIC_TIMESTAMP, "w", index=2, severity=Severity.WARNING
        )
        assert builder.error_count == 0
        builder.add(ViolationKind.MISSING_FIELD, "e", index=2, field="label")
        assert builder.error_count == 1

    def test_error_count_skips_merged_duplicates(self) -> None:
        builder = ReportBuilder("events.jsonl")
        for line in range(1, 4001):
            builder.add(ViolationKind.MISSING_FIELD, "e", index=line, field="label")
            builder.add(ViolationKind.MISSING_FIELD, "again", index=line, field="label")

        assert builder.error_count == 4000
        assert builder.error_count == len(builder.build().errors)


class TestValidationReport:
    def test_warnings_do_not_invalidate(self) -> None:
        report = ValidationReport(
            violations=(
                Violation(
                    file="events.jsonl",
                    index=2,
                    field="timestamp",
                    kind=ViolationKind.NON_MONOTONIC_TIMESTAMP,
                    severity=Severity.WARNING,
                    message="backward",
                ),
            )
        )
        assert report.is_valid
        assert len(report.warnings) == 1
        assert report.errors == []

    def test_merge_orders_by_file(self) -> None:
        summary = ReportBuilder("summary.json")
        summary.add(ViolationKind.COUNT_MISMATCH, "m", index=1, field="run_count")
        events = ReportBuilder("events.jsonl")
        events.add(ViolationKind.MALFORMED_RECORD, "bad", index=9)

        merged = ValidationReport.merge(summary.build(), events.build())

        assert [v.file for v in merged.violations] == ["events.jsonl", "summary.json"]
        assert not merged.is_valid

    def test_describe(self) -> None:
        violation = Violation(
            file="events.jsonl",
            index=1,
            field="success",
            kind=ViolationKind.INCONSISTENT_FIELD,
            message="success is true but exit_code is 1",
        )
        assert violation.describe() == (
            "events.jsonl:1 [success] InconsistentField: success is true but exit_code is 1"
        )

    def test_report_is_frozen(self) -> None:
        import pydantic
        import pytest

        report = ValidationReport()
        with pytest.raises(pydantic.ValidationError):
            report.violations = ()  # type: ignore[misc]
