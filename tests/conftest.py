import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from artifact_validator.domain.entities import ReportBuilder
from tests.factories import make_command_event, make_snapshot_event, make_summary, write_jsonl


@pytest.fixture
def builder() -> ReportBuilder:
    return ReportBuilder("events.jsonl")


@pytest.fixture
def command_event() -> dict[str, Any]:
    return make_command_event()


@pytest.fixture
def snapshot_event() -> dict[str, Any]:
    return make_snapshot_event()


@pytest.fixture
def make_test_dir(tmp_path: Path) -> Callable[..., Path]:
    """Build a well-formed <root>/<suite>/<test>/ artifact directory."""

    def _make(suite: str = "e2e_basic", test: str = "init_and_create") -> Path:
        test_dir = tmp_path / "artifacts" / suite / test
        test_dir.mkdir(parents=True)
        write_jsonl(test_dir / "events.jsonl", [make_command_event(), make_snapshot_event()])
        (test_dir / "after_init.snapshot.json").write_text(
            json.dumps(
                [
                    {"path": ".beads", "size": 0, "is_dir": True},
                    {"path": ".beads/beads.db", "size": 4096, "is_dir": False},
                    {"path": ".beads/config.yaml", "size": 18, "is_dir": False},
                ],
                indent=2,
            )
            + "\n",
            encoding="utf-8",
        )
        (test_dir / "summary.json").write_text(
            json.dumps(make_summary(suite=suite, test=test), indent=2) + "\n", encoding="utf-8"
        )
        (test_dir / "0001_init.stdout").write_text("Initialized\n", encoding="utf-8")
        (test_dir / "0001_init.stderr").write_text("", encoding="utf-8")
        return test_dir

    return _make
