"""Line classifier, constraint validator, and report structures.

WHY: The core is the only part of tinypio with real parsing logic. It is
kept free of HTTP, CLI, and subprocess concerns so every caller gets the
same answer for the same source text.

HOW: ir.py defines Instruction and ValidationReport, classifier.py turns
source text into instructions, validator.py applies the opcode and
length rules, report.py renders the result as JSON or text.

RULES:
- validate() is a pure function: no I/O, no shared mutable state
- The IR dataclasses are the contract with the API and CLI
"""

from tinypio.core.ir import Instruction, ValidationReport
from tinypio.core.validator import validate

__all__ = ["Instruction", "ValidationReport", "validate"]
