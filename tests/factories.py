import json
from pathlib import Path
from typing import Any


def make_command_event(**overrides: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "timestamp": "2026-01-17T12:00:00Z",
        "event_type": "command",
        "label": "init",
        "binary": "br",
        "args": ["init", "--prefix", "bd"],
        "cwd": "/tmp/workspace",
        "exit_code": 0,
        "success": True,
        "duration_ms": 42,
        "stdout_len": 120,
        "stderr_len": 0,
        "stdout_path": "0001_init.stdout",
        "stderr_path": "0001_init.stderr",
    }
    event.update(overrides)
    return event


def make_snapshot_event(**overrides: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "timestamp": "2026-01-17T12:00:01Z",
        "event_type": "snapshot",
        "label": "after_init",
        "args": [],
        "cwd": "/tmp/workspace",
        "success": True,
        "stdout_len": 0,
        "stderr_len": 0,
        "snapshot_path": "after_init.snapshot.json",
    }
    event.update(overrides)
    return event


def make_summary(**overrides: Any) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "suite": "e2e_basic",
        "test": "init_and_create",
        "passed": True,
        "run_count": 1,
        "timestamp": "2026-01-17T12:00:02Z",
    }
    summary.update(overrides)
    return summary


def write_jsonl(path: Path, records: list[dict[str, Any]]) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in records), encoding="utf-8")
    return path
