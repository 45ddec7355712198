"""Configuration constants, the PIO opcode set, and .env loading.

WHY: The validator, the HTTP service, and the CLI all need the same
opcode whitelist, instruction-memory limit, and server settings. Keeping
them as plain module-level data makes them easy to find and override,
and keeps the validation logic free of magic values.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level frozensets, ints, and strings. Numeric settings are read
through _env_int() so a bad value fails loudly at startup.

RULES:
- VALID_OPCODES is the fixed RP2040/RP2350 PIO mnemonic set (lowercase)
- MAX_INSTRUCTIONS is the PIO instruction memory size (32 slots)
- Settings can be overridden via environment variables or .env
- Nothing in this module depends on the pioasm binary being installed
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# PIO instruction set
# ---------------------------------------------------------------------------

VALID_OPCODES: frozenset[str] = frozenset({
    "jmp", "wait", "in", "out",
    "push", "pull", "mov", "irq", "set",
    "nop",
})
"""Mnemonics accepted by the validator (RP2040 PIO instruction set)."""

MAX_INSTRUCTIONS = 32
"""Size of a PIO block's shared instruction memory."""

UPSTREAM = "github.com/tinygo-org/pio"
"""Upstream TinyGo PIO project the catalog and drivers refer to."""

# ---------------------------------------------------------------------------
# External assembler (pioasm)
# ---------------------------------------------------------------------------

PIOASM_INSTALL_URL = "https://github.com/raspberrypi/pico-sdk/tree/master/tools/pioasm"

COMPILE_FORMATS: frozenset[str] = frozenset({"hex", "go"})
"""pioasm output formats the compile bridge exposes."""

DEFAULT_COMPILE_FORMAT = "hex"


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment.

    RULES:
    - Missing or blank values fall back to the default
    - Non-integer values raise ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}".format(name, raw)
        ) from None


PIOASM_PATH = os.getenv("PIOASM_PATH", "").strip() or None
PIOASM_TIMEOUT = _env_int("PIOASM_TIMEOUT", 30)

# ---------------------------------------------------------------------------
# HTTP server defaults
# ---------------------------------------------------------------------------

TINYPIO_HOST = os.getenv("TINYPIO_HOST", "0.0.0.0")
TINYPIO_PORT = _env_int("TINYPIO_PORT", 8090)
