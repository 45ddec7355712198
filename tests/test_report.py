"""Tests for report serialization and terminal rendering."""

import jsonschema
import pytest

from tinypio.core.ir import Instruction, ValidationReport
from tinypio.core.report import (
    REPORT_SCHEMA,
    format_report,
    instruction_to_dict,
    report_to_dict,
)
from tinypio.core.validator import validate


class TestReportToDict:

    def test_full_form_keeps_empty_fields(self, squarewave_source):
        data = report_to_dict(validate(squarewave_source))
        assert data["valid"] is True
        assert data["errors"] == []
        assert data["instructions"][2] == {
            "line": 5, "op": "jmp", "args": "again", "comment": "",
        }

    def test_compact_form_omits_empty_fields(self):
        data = report_to_dict(validate("nop\nbadop x ; why"), compact=True)
        assert data == {
            "valid": False,
            "instructions": [
                {"line": 1, "op": "nop"},
                {"line": 2, "op": "badop", "args": "x", "comment": "why"},
            ],
            "errors": ["line 2: unknown opcode 'badop'"],
        }

    def test_compact_valid_report_has_no_errors_key(self, squarewave_source):
        data = report_to_dict(validate(squarewave_source), compact=True)
        assert "errors" not in data

    def test_instructions_always_present(self):
        assert report_to_dict(validate(""), compact=True) == {
            "valid": True,
            "instructions": [],
        }

    def test_schema_rejects_bad_line_number(self):
        report = ValidationReport(instructions=(Instruction(line=0, op="nop"),))
        with pytest.raises(jsonschema.ValidationError):
            report_to_dict(report)

    def test_output_matches_schema(self, oversized_source):
        jsonschema.validate(instance=report_to_dict(validate(oversized_source)), schema=REPORT_SCHEMA)

    def test_instruction_to_dict(self):
        inst = Instruction(line=3, op="set", args="pins, 1")
        assert instruction_to_dict(inst, compact=True) == {"line": 3, "op": "set", "args": "pins, 1"}


class TestFormatReport:

    def test_valid_header(self, squarewave_source):
        text = format_report(validate(squarewave_source))
        assert text.splitlines()[0] == "✓ Valid PIO program (3/32 instructions)"
        assert "5: jmp again" in text

    def test_invalid_lists_errors(self):
        text = format_report(validate("    badop pins, 1"))
        assert text.startswith("✗ Invalid:")
        assert "  - line 1: unknown opcode 'badop'" in text

    def test_comment_is_shown(self):
        text = format_report(validate("nop ; idle"))
        assert "; idle" in text

    def test_empty_program(self):
        assert format_report(validate("")) == "✓ Valid PIO program (0/32 instructions)"
