"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and the automatic OpenAPI docs at /docs. The
field names are the wire contract the web UI (and any other client)
relies on.

HOW: One model per request body and per response shape. Optional fields
are None when empty and dropped from the JSON by the routes
(response_model_exclude_none), matching the compact report format.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Request fields default to "" so a missing field behaves like an empty one
- Request strings must be encodable as UTF-8 (no lone surrogates)
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


def _require_utf8(value: str) -> str:
    """Reject strings holding lone surrogates, which cannot be encoded."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("not valid UTF-8: {}".format(exc)) from exc
    return value


class ValidateRequest(BaseModel):
    """Body of POST /api/validate."""

    source: str = Field(
        default="",
        description="PIO assembly source text (directives, labels and comments allowed).",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"source": ".program squarewave\nagain:\n    set pins, 1\n    set pins, 0\n    jmp again"}
        ]
    }}

    @field_validator("source")
    @classmethod
    def check_source(cls, value: str) -> str:
        return _require_utf8(value)


class CompileRequest(BaseModel):
    """Body of POST /api/compile."""

    source: str = Field(default="", description="PIO assembly source text.")
    format: str = Field(
        default="",
        description="pioasm output format: 'hex' (default) or 'go'.",
    )

    @field_validator("source", "format")
    @classmethod
    def check_text(cls, value: str) -> str:
        return _require_utf8(value)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class InstructionModel(BaseModel):
    """One classified instruction line."""

    line: int = Field(description="1-based line number in the submitted source.")
    op: str = Field(description="Lowercased mnemonic.")
    args: Optional[str] = Field(
        default=None,
        description="Raw operand text with side-set and delay removed; omitted when empty.",
    )
    comment: Optional[str] = Field(
        default=None,
        description="Trailing ';' comment; omitted when empty.",
    )


class ValidationResponse(BaseModel):
    """Result of validating a PIO program.

    RULES:
    - valid is true iff errors is absent
    - instructions includes lines that failed validation
    """

    valid: bool = Field(description="True when no structural violations were found.")
    instructions: List[InstructionModel] = Field(
        description="Classified instructions in source order.",
    )
    errors: Optional[List[str]] = Field(
        default=None,
        description="Human-readable violations; omitted when the program is valid.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "valid": False,
                "instructions": [
                    {"line": 1, "op": "badop", "args": "pins, 1"},
                ],
                "errors": ["line 1: unknown opcode 'badop'"],
            }
        ]
    }}


class CompileResponse(BaseModel):
    """Result of running pioasm on a program."""

    success: bool = Field(description="True when pioasm produced output.")
    binary: Optional[List[int]] = Field(
        default=None,
        description="16-bit instruction words parsed from hex output.",
    )
    hex: Optional[str] = Field(default=None, description="Raw pioasm hex output.")
    go: Optional[str] = Field(default=None, description="Raw pioasm Go output.")
    errors: Optional[List[str]] = Field(
        default=None,
        description="Error messages when compilation failed.",
    )


class ExampleProgram(BaseModel):
    """A built-in example program."""

    name: str = Field(description="Example identifier.")
    source: str = Field(description="PIO assembly source.")
    description: str = Field(description="What the program does.")


class DriverInfo(BaseModel):
    """A ready-to-use PIO driver from piolib."""

    name: str = Field(description="Driver name.")
    description: str = Field(description="What the driver does.")
    package: str = Field(description="Go import path of the driver package.")
    example: Optional[str] = Field(default=None, description="Usage snippet.")


class StatusResponse(BaseModel):
    """Service capabilities shown in the web UI footer."""

    validator: bool = Field(description="Structural validator availability (always true).")
    pioasm: bool = Field(description="Whether the pioasm binary was found.")
    pioasm_path: str = Field(description="Resolved pioasm path, empty when missing.")
    drivers: int = Field(description="Number of catalog drivers.")
    examples: int = Field(description="Number of catalog example programs.")
    upstream: str = Field(description="Upstream PIO project.")
    max_instructions: int = Field(description="PIO instruction memory size.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")
