"""Single entry point for validating harness artifacts.

Each call reads its input files once, runs the line parser, the matching
schema checker and the invariant engine, and returns one sorted report.
Violations never abort a scan; only ``IoFailure`` does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from loguru import logger

from artifact_validator.domain.entities import (
    FileEntry,
    ReportBuilder,
    RunEvent,
    Summary,
    ValidationReport,
)
from artifact_validator.domain.ports.artifact_source_port import ArtifactSourcePort
from artifact_validator.domain.services import (
    EventChecker,
    InvariantEngine,
    ParsedLine,
    SnapshotChecker,
    SummaryChecker,
    decode_utf8,
    parse_document,
    parse_line,
)
from artifact_validator.domain.services.field_rules import parse_timestamp
from artifact_validator.domain.value_objects import EventType, ViolationKind
from artifact_validator.infrastructure.persistence import (
    EVENTS_FILE,
    SNAPSHOT_PATTERN,
    SUMMARY_FILE,
    ArtifactPathBuilder,
    FileArtifactReader,
)


@dataclass(frozen=True)
class EventLoad:
    report: ValidationReport
    events: list[RunEvent] = field(default_factory=list)
    command_count: int = 0


@dataclass(frozen=True)
class SnapshotLoad:
    report: ValidationReport
    entries: list[FileEntry] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryLoad:
    report: ValidationReport
    summary: Summary | None = None


class ArtifactValidator:
    def __init__(self, source: ArtifactSourcePort | None = None) -> None:
        self.source = source or FileArtifactReader()
        self.event_checker = EventChecker()
        self.snapshot_checker = SnapshotChecker()
        self.summary_checker = SummaryChecker()
        self.invariants = InvariantEngine()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def load_events(self, path: Path) -> EventLoad:
        """Validate an events.jsonl file and return the events that passed.

        ``command_count`` counts every decodable record tagged as a command,
        valid or not, since each one stands for an executed run.
        """
        data = self.source.read_bytes(path)
        builder = ReportBuilder(path.name)
        events: list[RunEvent] = []
        timestamps: list[tuple[int, datetime]] = []
        command_count = 0

        for number, raw in enumerate(data.split(b"\n"), start=1):
            decoded = decode_utf8(raw)
            if not decoded.ok:
                builder.add(ViolationKind.MALFORMED_RECORD, decoded.error or "", index=number)
                continue

            line = decoded.value
            self.invariants.check_line_endings(line, number, builder)
            if not line.strip():
                continue

            parsed = parse_line(line)
            if not parsed.ok:
                builder.add(ViolationKind.MALFORMED_RECORD, parsed.error or "", index=number)
                continue

            record = parsed.value
            if record.get("event_type") == EventType.COMMAND.value:
                command_count += 1

            errors_before = builder.error_count
            event = self.event_checker.check(record, number, builder)
            self.invariants.check_text_fields(record, number, builder)
            self.invariants.check_paths(record, number, builder)

            moment = parse_timestamp(record.get("timestamp"))
            if moment is not None:
                timestamps.append((number, moment))

            if event is not None and builder.error_count == errors_before:
                events.append(event)

        self.invariants.check_monotonic(timestamps, builder)

        report = builder.build()
        self._log_report(path, report)
        return EventLoad(report=report, events=events, command_count=command_count)

    def validate_events(self, path: Path) -> ValidationReport:
        return self.load_events(path).report

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def load_snapshot(self, path: Path) -> SnapshotLoad:
        builder = ReportBuilder(path.name)
        parsed = self._read_document(path, builder)
        if not parsed.ok:
            builder.add(ViolationKind.MALFORMED_RECORD, parsed.error or "")
            report = builder.build()
            self._log_report(path, report)
            return SnapshotLoad(report=report)

        entries = self.snapshot_checker.check(parsed.value, builder)
        if isinstance(parsed.value, list):
            for index, candidate in enumerate(parsed.value):
                if isinstance(candidate, dict):
                    self.invariants.check_text_fields(candidate, index, builder)
                    self.invariants.check_paths(candidate, index, builder)

        report = builder.build()
        if not report.is_valid:
            # Entries are only trusted when the whole snapshot is clean
            entries = []
        self._log_report(path, report)
        return SnapshotLoad(report=report, entries=entries)

    def validate_snapshot(self, path: Path) -> ValidationReport:
        return self.load_snapshot(path).report

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def load_summary(self, path: Path, events_path: Path | None = None) -> SummaryLoad:
        """Validate summary.json, cross-checking ``run_count`` against the
        event stream when ``events_path`` is given."""
        command_count = None
        if events_path is not None:
            command_count = self.load_events(events_path).command_count
        return self._load_summary(path, command_count)

    def validate_summary(self, path: Path, events_path: Path | None = None) -> ValidationReport:
        return self.load_summary(path, events_path).report

    def _load_summary(self, path: Path, command_count: int | None) -> SummaryLoad:
        builder = ReportBuilder(path.name)
        parsed = self._read_document(path, builder)
        if not parsed.ok:
            builder.add(ViolationKind.MALFORMED_RECORD, parsed.error or "")
            report = builder.build()
            self._log_report(path, report)
            return SummaryLoad(report=report)

        errors_before = builder.error_count
        summary = self.summary_checker.check(parsed.value, builder, command_count)
        if isinstance(parsed.value, dict):
            self.invariants.check_text_fields(parsed.value, 1, builder)
            self.invariants.check_paths(parsed.value, 1, builder)
        if builder.error_count > errors_before:
            summary = None

        report = builder.build()
        self._log_report(path, report)
        return SummaryLoad(report=report, summary=summary)

    # ------------------------------------------------------------------
    # Directory
    # ------------------------------------------------------------------

    def validate_directory(self, directory: Path) -> ValidationReport:
        """Validate every well-known artifact found in one test directory.

        Absent files are skipped; an artifact set may legitimately lack any
        of them.
        """
        self.source.require_directory(directory)
        paths = ArtifactPathBuilder(directory)
        reports: list[ValidationReport] = []

        command_count = None
        if self.source.list_matches(directory, EVENTS_FILE):
            event_load = self.load_events(paths.events_path())
            reports.append(event_load.report)
            command_count = event_load.command_count
        else:
            logger.debug("No {} in {}", EVENTS_FILE, directory)

        for snapshot_path in self.source.list_matches(directory, SNAPSHOT_PATTERN):
            reports.append(self.validate_snapshot(snapshot_path))

        if self.source.list_matches(directory, SUMMARY_FILE):
            reports.append(self._load_summary(paths.summary_path(), command_count).report)
        else:
            logger.debug("No {} in {}", SUMMARY_FILE, directory)

        return ValidationReport.merge(*reports)

    def _read_document(self, path: Path, builder: ReportBuilder) -> ParsedLine:
        """Decode a single-document artifact; an undecodable file is a
        document-level parse failure, not an I/O failure."""
        decoded = decode_utf8(self.source.read_bytes(path))
        if not decoded.ok:
            return decoded
        self.invariants.check_document_line_endings(decoded.value, builder)
        return parse_document(decoded.value)

    def _log_report(self, path: Path, report: ValidationReport) -> None:
        logger.info(
            "Validated {}: {} error(s), {} warning(s)",
            path,
            len(report.errors),
            len(report.warnings),
        )
        for violation in report.violations:
            logger.debug("{}", violation.describe())
