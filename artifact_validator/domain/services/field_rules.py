import re
from datetime import datetime
from typing import Any

# RFC 3339 date-time with a mandatory offset ("Z" or +hh:mm / -hh:mm).
# "T" and "Z" are case-insensitive. Leap seconds (:60) do not fit datetime
# and are rejected.
TIMESTAMP_PATTERN = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})\Z"
)

DRIVE_PATH_PATTERN = re.compile(r"^[A-Za-z]:[/\\]")

EXIT_CODE_MIN = -128
EXIT_CODE_MAX = 255


def is_int(value: Any) -> bool:
    """JSON integer check; booleans are not integers here."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp with an explicit offset.

    Returns None for anything else, including naive timestamps and
    out-of-range calendar values.
    """
    if not isinstance(value, str):
        return None
    match = TIMESTAMP_PATTERN.match(value)
    if not match:
        return None

    # datetime supports microseconds only; extra precision is truncated
    fraction = (match.group("fraction") or "0")[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"

    try:
        return datetime.fromisoformat(f"{match.group('base').upper()}.{fraction}{offset}")
    except ValueError:
        return None


def is_absolute_path(value: str) -> bool:
    return value.startswith("/") or bool(DRIVE_PATH_PATTERN.match(value))


def path_problem(value: str) -> str | None:
    """Return why a relative artifact path is unsafe, or None if it is fine."""
    if not value:
        return "path is empty"
    if "\\" in value:
        return f"path '{value}' uses backslash separators"
    if "\x00" in value:
        return "path contains a NUL byte"
    if is_absolute_path(value):
        return f"path '{value}' is absolute"
    if ".." in value.split("/"):
        return f"path '{value}' contains a parent-directory segment"
    return None
