from artifact_validator.application.artifact_scanner import (
    ArtifactFilter,
    ArtifactScanner,
    ScanEntry,
    ScanResult,
)
from artifact_validator.application.validator_facade import (
    ArtifactValidator,
    EventLoad,
    SnapshotLoad,
    SummaryLoad,
)

__all__ = [
    "ArtifactFilter",
    "ArtifactScanner",
    "ArtifactValidator",
    "EventLoad",
    "ScanEntry",
    "ScanResult",
    "SnapshotLoad",
    "SummaryLoad",
]
