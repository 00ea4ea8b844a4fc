"""Decoding of raw artifact text into JSON values.

Parsing never raises: every input produces a ``ParsedLine`` carrying either
the decoded value or a human-readable failure.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

# Valid surrogate pairs are combined by the decoder, so any survivor is lone
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class _DecodeRejected(ValueError):
    pass


@dataclass(frozen=True)
class ParsedLine:
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str) -> Any:
    raise _DecodeRejected(f"non-standard JSON constant {name}")


def _unique_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise _DecodeRejected(f"duplicate key {key!r}")
        obj[key] = value
    return obj


def _has_lone_surrogate(value: Any) -> bool:
    pending = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            if LONE_SURROGATE.search(item):
                return True
        elif isinstance(item, list):
            pending.extend(item)
        elif isinstance(item, dict):
            pending.extend(item.keys())
            pending.extend(item.values())
    return False


def _decode(text: str) -> ParsedLine:
    try:
        value = json.loads(
            text,
            object_pairs_hook=_unique_object,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        return ParsedLine(error=f"invalid JSON: {e.msg} (column {e.colno})")
    except _DecodeRejected as e:
        return ParsedLine(error=f"invalid JSON: {e}")
    except ValueError as e:
        # e.g. integer literals beyond the interpreter's digit limit
        return ParsedLine(error=f"invalid JSON: {e}")
    except RecursionError:
        return ParsedLine(error="invalid JSON: nesting too deep")
    if _has_lone_surrogate(value):
        return ParsedLine(error="invalid JSON: unpaired UTF-16 surrogate escape")
    return ParsedLine(value=value)


def decode_utf8(data: bytes) -> ParsedLine:
    """Decode raw artifact bytes; ``value`` is the text on success."""
    try:
        return ParsedLine(value=data.decode("utf-8"))
    except UnicodeDecodeError as e:
        return ParsedLine(error=f"not valid UTF-8 (byte {e.start})")


def parse_line(text: str) -> ParsedLine:
    """Decode one JSONL line; the top-level value must be an object."""
    parsed = _decode(text)
    if parsed.ok and not isinstance(parsed.value, dict):
        return ParsedLine(error=f"expected a JSON object, got {json_type_name(parsed.value)}")
    return parsed


def parse_document(text: str) -> ParsedLine:
    """Decode a whole-file JSON document of any top-level type."""
    return _decode(text)


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
