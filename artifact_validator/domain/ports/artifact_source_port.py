from abc import ABC, abstractmethod
from pathlib import Path


class IoFailure(Exception):
    """Raised when an artifact cannot be read at all.

    This is not a schema violation: validation could not even be attempted.
    It is never retried.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ArtifactSourcePort(ABC):
    """Port for reading artifact files."""

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Return the raw content of a regular file.

        Decoding is left to the caller so that one undecodable line does not
        hide the rest of the file.
        """

    @abstractmethod
    def require_directory(self, path: Path) -> None:
        """Raise IoFailure unless ``path`` is a readable directory."""

    @abstractmethod
    def list_matches(self, directory: Path, pattern: str) -> list[Path]:
        """Return entries of ``directory`` matching ``pattern``, sorted.

        Entries of any kind are returned; reading one that is not a regular
        file raises IoFailure.
        """

    @abstractmethod
    def list_directories(self, directory: Path) -> list[Path]:
        """Return subdirectories of ``directory``, sorted."""
