from enum import Enum


class ViolationKind(str, Enum):
    # Schema violations
    UNKNOWN_EVENT_TYPE = "UnknownEventType"
    MISSING_FIELD = "MissingField"
    MISSING_CONDITIONAL_FIELD = "MissingConditionalField"
    INVALID_FIELD_TYPE = "InvalidFieldType"
    OUT_OF_RANGE = "OutOfRange"
    INCONSISTENT_FIELD = "InconsistentField"
    INVALID_TIMESTAMP = "InvalidTimestamp"
    UNSAFE_PATH = "UnsafePath"
    DUPLICATE_ENTRY = "DuplicateEntry"
    COUNT_MISMATCH = "CountMismatch"
    MALFORMED_RECORD = "MalformedRecord"

    # Cross-cutting invariants
    UNNORMALIZED_LINE_ENDING = "UnnormalizedLineEnding"
    NON_MONOTONIC_TIMESTAMP = "NonMonotonicTimestamp"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
