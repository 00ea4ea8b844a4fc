from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter


class _RunEventBase(BaseModel, frozen=True, strict=True):
    timestamp: datetime
    label: str
    args: list[str]
    cwd: str
    success: bool
    stdout_len: int = Field(ge=0)
    stderr_len: int = Field(ge=0)
    stdout_path: str | None = None
    stderr_path: str | None = None
    snapshot_path: str | None = None


class CommandEvent(_RunEventBase, frozen=True):
    event_type: Literal["command"]
    binary: str
    exit_code: int = Field(ge=-128, le=255)
    duration_ms: int = Field(ge=0)


class SnapshotEvent(_RunEventBase, frozen=True):
    event_type: Literal["snapshot"]
    binary: str | None = None
    exit_code: int | None = Field(default=None, ge=-128, le=255)
    duration_ms: int | None = Field(default=None, ge=0)


RunEvent = Annotated[CommandEvent | SnapshotEvent, Field(discriminator="event_type")]

RUN_EVENT_ADAPTER: TypeAdapter[CommandEvent | SnapshotEvent] = TypeAdapter(RunEvent)
