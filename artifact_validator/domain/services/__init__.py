"""Domain services."""

from artifact_validator.domain.services.event_checker import EventChecker
from artifact_validator.domain.services.invariant_engine import InvariantEngine
from artifact_validator.domain.services.line_parser import (
    ParsedLine,
    decode_utf8,
    parse_document,
    parse_line,
)
from artifact_validator.domain.services.snapshot_checker import SnapshotChecker
from artifact_validator.domain.services.summary_checker import SummaryChecker

__all__ = [
    "EventChecker",
    "InvariantEngine",
    "ParsedLine",
    "SnapshotChecker",
    "SummaryChecker",
    "decode_utf8",
    "parse_document",
    "parse_line",
]
