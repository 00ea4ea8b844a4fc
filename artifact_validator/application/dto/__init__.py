from artifact_validator.application.dto.harness_settings import HarnessSettings

__all__ = [
    "HarnessSettings",
]
