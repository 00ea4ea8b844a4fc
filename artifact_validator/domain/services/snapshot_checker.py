from __future__ import annotations

from typing import Any

from artifact_validator.domain.entities.file_entry import FileEntry
from artifact_validator.domain.entities.validation_report import ReportBuilder
from artifact_validator.domain.services.field_rules import is_int, path_problem
from artifact_validator.domain.services.line_parser import json_type_name
from artifact_validator.domain.value_objects import ViolationKind

ENTRY_FIELDS = ("path", "size", "is_dir")


class SnapshotChecker:
    """Schema checks for the entries of one ``*.snapshot.json`` file.

    Entries are addressed by their 0-based position in the array.
    """

    def check(self, document: Any, builder: ReportBuilder) -> list[FileEntry]:
        if not isinstance(document, list):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"snapshot must be a JSON array, got {json_type_name(document)}",
            )
            return []

        entries: list[FileEntry] = []
        first_seen: dict[str, int] = {}

        for index, candidate in enumerate(document):
            if not isinstance(candidate, dict):
                builder.add(
                    ViolationKind.INVALID_FIELD_TYPE,
                    f"snapshot entry must be an object, got {json_type_name(candidate)}",
                    index=index,
                )
                continue

            errors_before = builder.error_count
            self._check_entry(candidate, index, builder)

            path = candidate.get("path")
            if isinstance(path, str):
                if path in first_seen:
                    builder.add(
                        ViolationKind.DUPLICATE_ENTRY,
                        f"path '{path}' already listed at index {first_seen[path]}",
                        index=index,
                        field="path",
                    )
                else:
                    first_seen[path] = index

            if builder.error_count == errors_before:
                entries.append(FileEntry.model_validate(candidate))

        return entries

    def _check_entry(self, candidate: dict[str, Any], index: int, builder: ReportBuilder) -> None:
        for name in ENTRY_FIELDS:
            if name not in candidate:
                builder.add(
                    ViolationKind.MISSING_FIELD,
                    f"required field '{name}' is missing",
                    index=index,
                    field=name,
                )

        path = candidate.get("path")
        size = candidate.get("size")
        is_dir = candidate.get("is_dir")

        if "path" in candidate and not isinstance(path, str):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"path must be a string, got {json_type_name(path)}",
                index=index,
                field="path",
            )
        if "size" in candidate and not is_int(size):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"size must be an integer, got {json_type_name(size)}",
                index=index,
                field="size",
            )
        if "is_dir" in candidate and not isinstance(is_dir, bool):
            builder.add(
                ViolationKind.INVALID_FIELD_TYPE,
                f"is_dir must be a boolean, got {json_type_name(is_dir)}",
                index=index,
                field="is_dir",
            )

        if is_int(size) and size < 0:
            builder.add(
                ViolationKind.OUT_OF_RANGE,
                f"size must be non-negative, got {size}",
                index=index,
                field="size",
            )

        if is_dir is True and is_int(size) and size != 0:
            builder.add(
                ViolationKind.INCONSISTENT_FIELD,
                f"directory entry has size {size}, expected 0",
                index=index,
                field="size",
            )

        if isinstance(path, str):
            problem = path_problem(path)
            if problem:
                builder.add(ViolationKind.UNSAFE_PATH, problem, index=index, field="path")
