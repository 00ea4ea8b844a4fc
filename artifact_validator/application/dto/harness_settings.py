import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

ARTIFACTS_ENV = "HARNESS_ARTIFACTS"
PRESERVE_ENV = "HARNESS_PRESERVE_ARTIFACTS"
ARTIFACTS_DIR_ENV = "HARNESS_ARTIFACTS_DIR"

DEFAULT_ARTIFACTS_DIR = Path("target/test-artifacts")

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def _flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


class HarnessSettings(BaseModel, frozen=True):
    """Harness environment flags, read once and passed around explicitly.

    These only decide whether artifacts exist on disk; they never change
    how validation behaves.
    """

    artifacts_enabled: bool = Field(
        default=False, description="Harness writes artifacts for each test"
    )
    preserve_artifacts: bool = Field(
        default=False, description="Artifacts are kept after a passing test"
    )
    artifacts_dir: Path = Field(
        default=DEFAULT_ARTIFACTS_DIR, description="Root of <suite>/<test>/ artifact directories"
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HarnessSettings":
        env = os.environ if environ is None else environ
        artifacts_dir = env.get(ARTIFACTS_DIR_ENV, "").strip()
        return cls(
            artifacts_enabled=_flag(env.get(ARTIFACTS_ENV)),
            preserve_artifacts=_flag(env.get(PRESERVE_ENV)),
            artifacts_dir=Path(artifacts_dir) if artifacts_dir else DEFAULT_ARTIFACTS_DIR,
        )
