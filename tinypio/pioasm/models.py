"""Result dataclass for the pioasm compile bridge.

WHY: pioasm either produces output in the requested format or fails with
a message on stderr. Callers (API, CLI) need one shape for both cases.

RULES:
- success=True: hex (with binary) or go is set, errors is empty
- success=False: errors holds at least one human-readable message
- binary holds 16-bit instruction words parsed from the hex output
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CompileResult:
    """Outcome of one pioasm invocation."""

    success: bool
    binary: Optional[List[int]] = None
    hex: Optional[str] = None
    go: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> CompileResult:
        return cls(success=False, errors=[message])
