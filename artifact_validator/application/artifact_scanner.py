from __future__ import annotations

import asyncio
from fnmatch import fnmatchcase
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from artifact_validator.application.validator_facade import ArtifactValidator
from artifact_validator.domain.entities import ValidationReport
from artifact_validator.domain.ports.artifact_source_port import ArtifactSourcePort, IoFailure
from artifact_validator.infrastructure.persistence import FileArtifactReader


class ArtifactFilter(BaseModel, frozen=True):
    """Selects test directories by glob patterns on ``suite/test``.

    Exclusions win over inclusions; no inclusions means everything is
    included.
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def matches(self, test_id: str) -> bool:
        if any(fnmatchcase(test_id, pattern) for pattern in self.exclude):
            return False
        if self.include:
            return any(fnmatchcase(test_id, pattern) for pattern in self.include)
        return True

    def describe(self) -> str:
        parts = []
        if self.include:
            parts.append(f"include=[{','.join(sorted(self.include))}]")
        if self.exclude:
            parts.append(f"exclude=[{','.join(sorted(self.exclude))}]")
        return " ".join(parts) if parts else "all tests"


class ScanEntry(BaseModel, frozen=True):
    test_id: str
    report: ValidationReport | None = None
    io_error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.io_error is None and self.report is not None and self.report.is_valid


class ScanResult(BaseModel, frozen=True):
    root: Path
    artifact_filter: ArtifactFilter
    entries: tuple[ScanEntry, ...] = ()
    skipped: int = 0

    @property
    def failed(self) -> list[ScanEntry]:
        return [entry for entry in self.entries if not entry.is_valid]

    @property
    def is_valid(self) -> bool:
        return not self.failed


class ArtifactScanner:
    """Validates every ``<root>/<suite>/<test>/`` directory of an artifact
    tree.

    Test directories are independent and are validated concurrently on the
    default thread pool. Results are always returned sorted by test id.
    """

    def __init__(
        self,
        validator: ArtifactValidator | None = None,
        source: ArtifactSourcePort | None = None,
    ) -> None:
        self.source = source or FileArtifactReader()
        self.validator = validator or ArtifactValidator(self.source)

    def discover(self, root: Path) -> list[tuple[str, Path]]:
        self.source.require_directory(root)
        found: list[tuple[str, Path]] = []
        for suite_dir in self.source.list_directories(root):
            for test_dir in self.source.list_directories(suite_dir):
                found.append((f"{suite_dir.name}/{test_dir.name}", test_dir))
        return found

    async def scan(self, root: Path, artifact_filter: ArtifactFilter | None = None) -> ScanResult:
        artifact_filter = artifact_filter or ArtifactFilter()
        discovered = self.discover(root)
        selected = [
            (test_id, path) for test_id, path in discovered if artifact_filter.matches(test_id)
        ]
        logger.info(
            "Scanning {} of {} test directories under {} ({})",
            len(selected),
            len(discovered),
            root,
            artifact_filter.describe(),
        )

        async def _validate(test_id: str, test_dir: Path) -> ScanEntry:
            try:
                report = await asyncio.to_thread(self.validator.validate_directory, test_dir)
            except IoFailure as e:
                logger.warning("Could not validate {}: {}", test_id, e)
                return ScanEntry(test_id=test_id, io_error=str(e))
            return ScanEntry(test_id=test_id, report=report)

        entries = await asyncio.gather(*(_validate(test_id, path) for test_id, path in selected))

        return ScanResult(
            root=root,
            artifact_filter=artifact_filter,
            entries=tuple(sorted(entries, key=lambda entry: entry.test_id)),
            skipped=len(discovered) - len(selected),
        )
