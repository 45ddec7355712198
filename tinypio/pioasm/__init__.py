"""Bridge to the external pioasm assembler.

WHY: Full PIO assembly (encoding, label resolution, side-set widths) is
pioasm's job. This package shells out to it when it is installed and
reports its absence cleanly when it is not. The validator never depends
on it.

HOW: runner.py locates the binary, runs it on a temp file, and parses
hex output into instruction words. models.py holds the CompileResult.

RULES:
- All pioasm invocations go through compile_source()
- Results are always a CompileResult, never an exception
"""

from tinypio.pioasm.models import CompileResult
from tinypio.pioasm.runner import compile_source, find_pioasm, parse_hex_program

__all__ = ["CompileResult", "compile_source", "find_pioasm", "parse_hex_program"]
