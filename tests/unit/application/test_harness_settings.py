from pathlib import Path

import pytest

from artifact_validator.application.dto.harness_settings import (
    DEFAULT_ARTIFACTS_DIR,
    HarnessSettings,
)


class TestHarnessSettings:
    def test_defaults_with_empty_environment(self) -> None:
        settings = HarnessSettings.from_env({})

        assert settings.artifacts_enabled is False
        assert settings.preserve_artifacts is False
        assert settings.artifacts_dir == DEFAULT_ARTIFACTS_DIR

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_truthy_flags(self, value: str) -> None:
        settings = HarnessSettings.from_env(
            {"HARNESS_ARTIFACTS": value, "HARNESS_PRESERVE_ARTIFACTS": value}
        )
        assert settings.artifacts_enabled
        assert settings.preserve_artifacts

    @pytest.mark.parametrize("value", ["0", "false", "", "maybe"])
    def test_falsy_flags(self, value: str) -> None:
        assert not HarnessSettings.from_env({"HARNESS_ARTIFACTS": value}).artifacts_enabled

    def test_artifacts_dir_override(self) -> None:
        settings = HarnessSettings.from_env({"HARNESS_ARTIFACTS_DIR": "/ci/artifacts"})
        assert settings.artifacts_dir == Path("/ci/artifacts")

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HARNESS_ARTIFACTS", "1")
        monkeypatch.delenv("HARNESS_PRESERVE_ARTIFACTS", raising=False)

        settings = HarnessSettings.from_env()

        assert settings.artifacts_enabled
        assert not settings.preserve_artifacts
