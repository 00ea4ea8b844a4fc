from pathlib import Path

EVENTS_FILE = "events.jsonl"
SUMMARY_FILE = "summary.json"
SNAPSHOT_PATTERN = "*.snapshot.json"


class ArtifactPathBuilder:
    """Well-known artifact locations inside one ``<root>/<suite>/<test>/``
    directory."""

    def __init__(self, test_dir: Path) -> None:
        self.test_dir = test_dir

    def events_path(self) -> Path:
        return self.test_dir / EVENTS_FILE

    def summary_path(self) -> Path:
        return self.test_dir / SUMMARY_FILE
