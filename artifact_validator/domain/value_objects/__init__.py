from artifact_validator.domain.value_objects.event_type import EventType, is_known_event_type
from artifact_validator.domain.value_objects.violation_enums import Severity, ViolationKind

__all__ = [
    "EventType",
    "Severity",
    "ViolationKind",
    "is_known_event_type",
]
