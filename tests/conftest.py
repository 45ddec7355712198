"""Shared test fixtures for the tinypio test suite.

WHY: Several test modules need the same small PIO programs: a valid
program with directives and labels, an annotated side-set program, and
an oversized one. Centralizing them keeps expected counts in one place.

RULES:
- SQUAREWAVE has exactly 3 instructions (set, set, jmp)
- SIDE_SET_PROGRAM has exactly 2 instructions and no errors
- OVERSIZED_PROGRAM has 33 "nop" lines
"""

from typing import List

import pytest

SQUAREWAVE = (
    ".program squarewave\n"
    "again:\n"
    "    set pins, 1\n"
    "    set pins, 0\n"
    "    jmp again"
)

SIDE_SET_PROGRAM = (
    "    out pins, 1  side 0 [1]\n"
    "    nop          side 1 [2]"
)

OVERSIZED_PROGRAM = "    nop\n" * 33


@pytest.fixture
def squarewave_source() -> str:
    return SQUAREWAVE


@pytest.fixture
def side_set_source() -> str:
    return SIDE_SET_PROGRAM


@pytest.fixture
def oversized_source() -> str:
    return OVERSIZED_PROGRAM


@pytest.fixture
def tricky_sources() -> List[str]:
    """Inputs that mix every kind of non-instruction content."""
    return [
        "",
        "\n\n\n",
        "; only a comment",
        ".wrap_target",
        "label_only:",
        "loop: ; comment: with colon",
        "    SET PINS, 1 ; Upper case",
        "x: y: set pins, 1",
        "mov x, outside",
        "    [3]",
        "side 1",
        "  pull block\r\n  out pins, 8\r\n",
        SQUAREWAVE,
        SIDE_SET_PROGRAM,
        OVERSIZED_PROGRAM,
        "badop a\n" * 40,
    ]
