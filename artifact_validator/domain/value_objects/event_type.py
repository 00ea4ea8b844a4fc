from enum import Enum


class EventType(str, Enum):
    COMMAND = "command"
    SNAPSHOT = "snapshot"


def is_known_event_type(value: object) -> bool:
    return isinstance(value, str) and value in {t.value for t in EventType}
