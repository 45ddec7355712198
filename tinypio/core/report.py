"""JSON-ready and human-readable renderings of a ValidationReport.

WHY: The HTTP API, the CLI's --json mode, and the terminal output all
show the same report. Building the dict in one place keeps the field
names (valid, instructions, errors; line, op, args, comment) identical
everywhere, and checking it against a JSON schema catches drift before
a client ever sees it.

HOW: report_to_dict() builds a plain dict and validates it with
jsonschema. compact=True drops empty args/comment and an empty error
list, which is the wire format the web UI has always consumed.
format_report() renders the terminal view used by the CLI.

RULES:
- "instructions" is always present, even when empty
- compact output omits empty "args", "comment" and "errors"
- Schema validation is mandatory; a violation raises
  jsonschema.ValidationError (a programming error, not a user error)
"""

from __future__ import annotations

from typing import Any, Dict, List

import jsonschema

from tinypio.config import MAX_INSTRUCTIONS
from tinypio.core.ir import Instruction, ValidationReport

REPORT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "PIO validation report",
    "type": "object",
    "required": ["valid", "instructions"],
    "additionalProperties": False,
    "properties": {
        "valid": {"type": "boolean"},
        "instructions": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["line", "op"],
                "additionalProperties": False,
                "properties": {
                    "line": {"type": "integer", "minimum": 1},
                    "op": {"type": "string", "minLength": 1},
                    "args": {"type": "string"},
                    "comment": {"type": "string"},
                },
            },
        },
        "errors": {
            "type": "array",
            "items": {"type": "string"},
        },
    },
}


def instruction_to_dict(inst: Instruction, compact: bool = False) -> Dict[str, Any]:
    """Convert one Instruction to a JSON-ready dict."""
    data: Dict[str, Any] = {"line": inst.line, "op": inst.op}
    if inst.args or not compact:
        data["args"] = inst.args
    if inst.comment or not compact:
        data["comment"] = inst.comment
    return data


def report_to_dict(report: ValidationReport, compact: bool = False) -> Dict[str, Any]:
    """Convert a ValidationReport to a JSON-ready dict.

    Args:
        report: The report to serialize.
        compact: Omit empty optional fields (HTTP wire format).

    Returns:
        A dict with "valid", "instructions" and (unless compact and empty)
        "errors".

    Raises:
        jsonschema.ValidationError: If the dict does not match REPORT_SCHEMA.
    """
    data: Dict[str, Any] = {
        "valid": report.valid,
        "instructions": [
            instruction_to_dict(inst, compact=compact)
            for inst in report.instructions
        ],
    }
    if report.errors or not compact:
        data["errors"] = list(report.errors)

    jsonschema.validate(instance=data, schema=REPORT_SCHEMA)
    return data


def format_report(report: ValidationReport) -> str:
    """Render a report for the terminal.

    The header line mirrors the web UI: a check mark with the instruction
    budget for valid programs, otherwise the list of errors. The parsed
    instructions follow, one per line, with their source line numbers.
    """
    lines: List[str] = []
    count = len(report.instructions)
    if report.valid:
        lines.append("✓ Valid PIO program ({}/{} instructions)".format(count, MAX_INSTRUCTIONS))
    else:
        lines.append("✗ Invalid:")
        for error in report.errors:
            lines.append("  - {}".format(error))

    if report.instructions:
        lines.append("")
        lines.append("Parsed instructions:")
        width = len(str(report.instructions[-1].line))
        for inst in report.instructions:
            text = inst.op if not inst.args else "{} {}".format(inst.op, inst.args)
            if inst.comment:
                text = "{:<24} ; {}".format(text, inst.comment)
            lines.append("  {:>{w}}: {}".format(inst.line, text, w=width))

    return "\n".join(lines)
