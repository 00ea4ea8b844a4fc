from artifact_validator.domain.ports.artifact_source_port import ArtifactSourcePort, IoFailure

__all__ = [
    "ArtifactSourcePort",
    "IoFailure",
]
