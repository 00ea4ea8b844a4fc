from __future__ import annotations

from pathlib import Path

from loguru import logger

from artifact_validator.domain.ports.artifact_source_port import ArtifactSourcePort, IoFailure


class FileArtifactReader(ArtifactSourcePort):
    """Reads artifacts from the local filesystem."""

    def read_bytes(self, path: Path) -> bytes:
        if not path.exists():
            raise IoFailure(path, "file does not exist")
        if not path.is_file():
            raise IoFailure(path, "not a regular file")

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning("Failed to read artifact {}: {}", path, e)
            raise IoFailure(path, e.strerror or str(e)) from e

        logger.debug("Read {} bytes from {}", len(data), path)
        return data

    def require_directory(self, path: Path) -> None:
        if not path.exists():
            raise IoFailure(path, "directory does not exist")
        if not path.is_dir():
            raise IoFailure(path, "not a directory")
        try:
            next(path.iterdir(), None)
        except OSError as e:
            logger.warning("Artifact directory {} is unreadable: {}", path, e)
            raise IoFailure(path, e.strerror or str(e)) from e

    def list_matches(self, directory: Path, pattern: str) -> list[Path]:
        try:
            return sorted(directory.glob(pattern))
        except OSError as e:
            raise IoFailure(directory, e.strerror or str(e)) from e

    def list_directories(self, directory: Path) -> list[Path]:
        try:
            return sorted(p for p in directory.iterdir() if p.is_dir())
        except OSError as e:
            raise IoFailure(directory, e.strerror or str(e)) from e
