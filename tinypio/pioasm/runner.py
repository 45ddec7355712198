"""Run the external pioasm assembler and parse its hex output.

WHY: Structural validation catches typos, but only pioasm knows the full
PIO encoding. When the binary is installed on the host, the service can
hand the program to it and return machine words; when it is not, callers
get a clear message instead of a crash.

HOW: find_pioasm() resolves the binary (PIOASM_PATH, then PATH).
compile_source() writes the source to a temporary .pio file, runs
``pioasm -o <format> <input> <output>`` with a timeout, reads the output
file, and for hex output parses it into 16-bit words.

RULES:
- Never raises for assembler failures; everything becomes a CompileResult
- Unknown or empty formats fall back to "hex"
- Temporary files are always removed, even on failure
- stderr is the error message on a non-zero exit; fall back to the exit
  status when stderr is empty
- Undecodable pioasm output is decoded with U+FFFD replacements
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from tinypio import config
from tinypio.pioasm.models import CompileResult

logger = logging.getLogger(__name__)


def find_pioasm() -> Optional[str]:
    """Locate the pioasm binary.

    RULES:
    - An explicit PIOASM_PATH wins if it points to an existing file
    - Otherwise search PATH for "pioasm"
    - Returns None when neither is available
    """
    if config.PIOASM_PATH:
        if Path(config.PIOASM_PATH).is_file():
            return config.PIOASM_PATH
        logger.warning("PIOASM_PATH does not exist: %s", config.PIOASM_PATH)
    return shutil.which("pioasm")


def parse_hex_program(hex_output: str) -> List[int]:
    """Parse pioasm hex output into 16-bit instruction words.

    RULES:
    - Blank lines and lines starting with "//" or "#" are skipped
    - A leading "0x" and a trailing "," are dropped
    - The first 4 characters are read as one big-endian word; lines with
      fewer than 4 characters or non-hex digits are skipped

    Args:
        hex_output: Text written by ``pioasm -o hex``.

    Returns:
        The instruction words in program order.
    """
    words: List[int] = []
    for line in hex_output.split("\n"):
        line = line.strip()
        if not line or line.startswith("//") or line.startswith("#"):
            continue
        if line.startswith("0x"):
            line = line[2:]
        if line.endswith(","):
            line = line[:-1]
        if len(line) < 4:
            continue
        try:
            words.append(int.from_bytes(bytes.fromhex(line[:4]), "big"))
        except ValueError:
            continue
    return words


def compile_source(source: str, output_format: str = config.DEFAULT_COMPILE_FORMAT) -> CompileResult:
    """Assemble a PIO program with pioasm.

    Args:
        source: Full program text.
        output_format: "hex" or "go"; anything else is treated as "hex".

    Returns:
        A CompileResult. On success, hex output also fills ``binary``.
    """
    pioasm_path = find_pioasm()
    if pioasm_path is None:
        return CompileResult.failure(
            "pioasm not found. Install from: {}".format(config.PIOASM_INSTALL_URL)
        )

    if output_format not in config.COMPILE_FORMATS:
        output_format = config.DEFAULT_COMPILE_FORMAT

    temp_paths: List[Path] = []
    try:
        src_fd, src_name = tempfile.mkstemp(prefix="pio-", suffix=".pio")
        src_path = Path(src_name)
        temp_paths.append(src_path)
        with os.fdopen(src_fd, "w", encoding="utf-8") as f:
            f.write(source)

        out_fd, out_name = tempfile.mkstemp(prefix="pio-out-")
        os.close(out_fd)
        out_path = Path(out_name)
        temp_paths.append(out_path)

        cmd = [pioasm_path, "-o", output_format, str(src_path), str(out_path)]
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=config.PIOASM_TIMEOUT,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("pioasm timed out after %ss", config.PIOASM_TIMEOUT)
            return CompileResult.failure(
                "pioasm timed out after {}s".format(config.PIOASM_TIMEOUT)
            )
        except OSError as exc:
            logger.exception("Failed to run pioasm at %s", pioasm_path)
            return CompileResult.failure(str(exc))

        if proc.returncode != 0:
            message = proc.stderr.strip() or "pioasm exited with status {}".format(
                proc.returncode
            )
            return CompileResult.failure(message)

        output = out_path.read_text(encoding="utf-8", errors="replace")
    except UnicodeEncodeError as exc:
        logger.warning("Source is not encodable as UTF-8: %s", exc)
        return CompileResult.failure("source is not valid UTF-8: {}".format(exc))
    except OSError as exc:
        logger.exception("pioasm temp file handling failed")
        return CompileResult.failure(str(exc))
    finally:
        for path in temp_paths:
            try:
                path.unlink()
            except FileNotFoundError:
                pass

    if output_format == "go":
        return CompileResult(success=True, go=output)
    return CompileResult(success=True, hex=output, binary=parse_hex_program(output))
