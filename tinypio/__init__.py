"""tinypio: structural validator and toolkit for RP2040/RP2350 PIO assembly.

WHY: PIO programs are tiny but easy to get wrong, and the full assembler
(pioasm) is not always installed. tinypio checks the shape of a program
(known mnemonics, fits in instruction memory) with no external tools, and
wraps pioasm when it is available.

HOW: Line classifier → constraint validator (core), with an HTTP API, a
CLI, a catalog of example programs and drivers, and a pioasm bridge
layered on top.

RULES:
- The core never depends on pioasm, the server, or the CLI
- validate() gives identical results whether or not pioasm is installed
"""

__version__ = "0.1.0"
