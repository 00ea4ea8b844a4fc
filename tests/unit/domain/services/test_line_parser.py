"""Tests for the JSON line parser."""

import pytest

from artifact_validator.domain.services.line_parser import (
    decode_utf8,
    json_type_name,
    parse_document,
    parse_line,
)


class TestParseLine:
    def test_object_line_decodes(self) -> None:
        parsed = parse_line('{"label": "x", "args": []}')
        assert parsed.ok
        assert parsed.value == {"label": "x", "args": []}

    def test_trailing_carriage_return_is_tolerated_by_decoder(self) -> None:
        parsed = parse_line('{"label": "x"}\r')
        assert parsed.ok

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("[1, 2]", "array"),
            ('"text"', "string"),
            ("42", "integer"),
            ("null", "null"),
            ("true", "boolean"),
        ],
    )
    def test_non_object_top_level_rejected(self, text: str, expected: str) -> None:
        parsed = parse_line(text)
        assert not parsed.ok
        assert parsed.error == f"expected a JSON object, got {expected}"

    def test_truncated_line_rejected(self) -> None:
        parsed = parse_line('{"label": "x", "args": [')
        assert not parsed.ok
        assert parsed.error is not None
        assert parsed.error.startswith("invalid JSON")

    def test_trailing_comma_rejected(self) -> None:
        assert not parse_line('{"label": "x",}').ok

    def test_empty_line_rejected(self) -> None:
        assert not parse_line("").ok

    def test_nan_constant_rejected(self) -> None:
        parsed = parse_line('{"duration_ms": NaN}')
        assert not parsed.ok
        assert "NaN" in (parsed.error or "")

    def test_duplicate_key_rejected(self) -> None:
        parsed = parse_line('{"exit_code": 0, "exit_code": 1}')
        assert not parsed.ok
        assert "duplicate key 'exit_code'" in (parsed.error or "")

    def test_numeric_string_is_not_coerced(self) -> None:
        parsed = parse_line('{"exit_code": "0"}')
        assert parsed.ok
        assert parsed.value["exit_code"] == "0"

    def test_deep_nesting_does_not_raise(self) -> None:
        parsed = parse_line("[" * 100_000 + "]" * 100_000)
        assert not parsed.ok

    def test_oversized_integer_literal_rejected(self) -> None:
        parsed = parse_line('{"exit_code": ' + "1" * 5000 + "}")
        assert not parsed.ok
        assert (parsed.error or "").startswith("invalid JSON")

    @pytest.mark.parametrize(
        "text",
        [
            '{"path": "../\\ud800"}',
            '{"args": ["ok", ["\\udfff"]]}',
            '{"\\ud800": 1}',
        ],
    )
    def test_unpaired_surrogate_escape_rejected(self, text: str) -> None:
        parsed = parse_line(text)
        assert not parsed.ok
        assert "surrogate" in (parsed.error or "")

    def test_paired_surrogate_escape_decodes(self) -> None:
        parsed = parse_line('{"label": "\\ud83d\\ude00"}')
        assert parsed.ok
        assert parsed.value["label"] == "\U0001f600"


class TestParseDocument:
    def test_array_document(self) -> None:
        parsed = parse_document('[{"path": "a", "size": 0, "is_dir": false}]')
        assert parsed.ok
        assert isinstance(parsed.value, list)

    def test_multiline_object_document(self) -> None:
        parsed = parse_document('{\n  "suite": "s"\n}\n')
        assert parsed.ok
        assert parsed.value == {"suite": "s"}

    def test_malformed_document(self) -> None:
        assert not parse_document("{").ok


class TestDecodeUtf8:
    def test_valid_bytes(self) -> None:
        decoded = decode_utf8("caf\u00e9\r".encode())
        assert decoded.ok
        assert decoded.value == "caf\u00e9\r"

    def test_invalid_byte_reports_offset(self) -> None:
        decoded = decode_utf8(b'{"label": "\xff"}')
        assert not decoded.ok
        assert decoded.error == "not valid UTF-8 (byte 11)"


class TestJsonTypeName:
    def test_bool_is_not_integer(self) -> None:
        assert json_type_name(True) == "boolean"
        assert json_type_name(1) == "integer"
        assert json_type_name(1.5) == "number"
        assert json_type_name({}) == "object"
