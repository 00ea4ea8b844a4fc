from __future__ import annotations

from pydantic import BaseModel

from artifact_validator.domain.value_objects import Severity, ViolationKind


class Violation(BaseModel, frozen=True):
    """One concrete deviation from the artifact schema or an invariant.

    ``index`` is the 1-based line for JSONL files, the 0-based array index
    for snapshot entries and 1 for single-object documents. It is ``None``
    for document-level problems that have no record to point at.
    """

    file: str
    index: int | None = None
    field: str | None = None
    kind: ViolationKind
    severity: Severity = Severity.ERROR
    message: str

    def sort_key(self) -> tuple[str, int, str, str, str]:
        return (
            self.file,
            self.index if self.index is not None else -1,
            self.kind.value,
            self.field or "",
            self.message,
        )

    def describe(self) -> str:
        location = self.file
        if self.index is not None:
            location = f"{location}:{self.index}"
        if self.field:
            location = f"{location} [{self.field}]"
        return f"{location} {self.kind.value}: {self.message}"


class ValidationReport(BaseModel, frozen=True):
    violations: tuple[Violation, ...] = ()

    @property
    def errors(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when no error-severity violation is present."""
        return not self.errors

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        return [v for v in self.violations if v.kind == kind]

    @classmethod
    def merge(cls, *reports: ValidationReport) -> ValidationReport:
        violations = [v for report in reports for v in report.violations]
        return cls(violations=tuple(sorted(violations, key=Violation.sort_key)))


class ReportBuilder:
    """Accumulates violations for one artifact file.

    Checks append here instead of raising, so one bad record never stops
    the rest of the scan. Violations sharing file, index, field and kind
    are merged into the first one recorded.
    """

    def __init__(self, file: str) -> None:
        self.file = file
        self._violations: list[Violation] = []
        self._seen: set[tuple[int | None, str | None, ViolationKind]] = set()
        self._error_count = 0

    @property
    def error_count(self) -> int:
        return self._error_count

    def add(
        self,
        kind: ViolationKind,
        message: str,
        *,
        index: int | None = None,
        field: str | None = None,
        severity: Severity = Severity.ERROR,
    ) -> None:
        key = (index, field, kind)
        if key in self._seen:
            return
        self._seen.add(key)
        if severity == Severity.ERROR:
            self._error_count += 1
        self._violations.append(
            Violation(
                file=self.file,
                index=index,
                field=field,
                kind=kind,
                severity=severity,
                message=message,
            )
        )

    def build(self) -> ValidationReport:
        return ValidationReport(
            violations=tuple(sorted(self._violations, key=Violation.sort_key))
        )
