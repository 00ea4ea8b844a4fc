from datetime import datetime

from pydantic import BaseModel, Field


class Summary(BaseModel, frozen=True, strict=True):
    """Terminal record written once per test."""

    suite: str
    test: str
    passed: bool
    run_count: int = Field(ge=0)
    timestamp: datetime
