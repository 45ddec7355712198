"""Data structures produced by the line classifier and validator.

WHY: The HTTP API, the CLI, and the tests all consume the same result of
a validation pass. Two small, immutable dataclasses give them one stable
contract regardless of how the result is rendered.

HOW:
  Instruction       — one classified source line (op + raw args)
  ValidationReport  — every classified instruction plus the violations

RULES:
- Instructions keep source order; never reordered or deduplicated
- line is the 1-based position in the original source text
- op is lowercased; args and comment are never case-normalized
- valid is True iff errors is empty
- Both dataclasses are frozen and hold tuples, so a report can be shared
  between callers without copying
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Instruction:
    """A single source line reduced to a mnemonic and its raw arguments.

    RULES:
    - line: 1-based line number in the original source
    - op: first field of the stripped line, lowercased
    - args: remaining fields joined with single spaces ("" if none)
    - comment: text after the first ";" (trimmed, "" if none)
    """

    line: int
    op: str
    args: str = ""
    comment: str = ""


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating one PIO program.

    Rejected instructions stay in ``instructions`` so callers can render
    line-by-line diagnostics next to the errors.
    """

    instructions: tuple[Instruction, ...] = field(default_factory=tuple)
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return not self.errors
