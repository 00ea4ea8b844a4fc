from artifact_validator.infrastructure.persistence._paths import (
    EVENTS_FILE,
    SNAPSHOT_PATTERN,
    SUMMARY_FILE,
    ArtifactPathBuilder,
)
from artifact_validator.infrastructure.persistence.artifact_reader import FileArtifactReader

__all__ = [
    "ArtifactPathBuilder",
    "EVENTS_FILE",
    "FileArtifactReader",
    "SNAPSHOT_PATTERN",
    "SUMMARY_FILE",
]
