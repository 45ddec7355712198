"""Constraint validator for classified PIO instructions.

WHY: Catching unknown mnemonics and programs that overflow the 32-slot
instruction memory is cheap and covers the most common mistakes, long
before the program reaches pioasm or a board.

HOW: validate() runs the line classifier, then applies each rule to the
full instruction list and concatenates their messages. Rules never
short-circuit each other: a caller always gets every violation from a
single pass.

RULES:
- Unknown opcode: "line <N>: unknown opcode '<op>'", one per instruction
- Program length: "program has <count> instructions, max is 32", emitted
  once, after all opcode errors
- Rejected instructions are still part of the report
- No operand, side-set width, delay range, wrap, or label checks
- Never raises for malformed source; violations are data
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from tinypio.config import MAX_INSTRUCTIONS, VALID_OPCODES
from tinypio.core.classifier import classify_source
from tinypio.core.ir import Instruction, ValidationReport

logger = logging.getLogger(__name__)


def check_opcodes(instructions: Sequence[Instruction]) -> List[str]:
    """Report every instruction whose mnemonic is not a PIO opcode."""
    return [
        "line {}: unknown opcode '{}'".format(inst.line, inst.op)
        for inst in instructions
        if inst.op not in VALID_OPCODES
    ]


def check_length(instructions: Sequence[Instruction]) -> List[str]:
    """Report a program that does not fit in PIO instruction memory."""
    count = len(instructions)
    if count > MAX_INSTRUCTIONS:
        return [
            "program has {} instructions, max is {}".format(count, MAX_INSTRUCTIONS)
        ]
    return []


def validate(source: str) -> ValidationReport:
    """Classify and validate a PIO program.

    Args:
        source: Full program text (directives, labels and comments allowed).

    Returns:
        A ValidationReport holding every classified instruction and the
        ordered list of violations.
    """
    instructions = classify_source(source)

    errors: List[str] = []
    errors.extend(check_opcodes(instructions))
    errors.extend(check_length(instructions))

    logger.debug(
        "Validated %d instructions, %d errors", len(instructions), len(errors)
    )
    return ValidationReport(
        instructions=tuple(instructions),
        errors=tuple(errors),
    )
