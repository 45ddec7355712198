"""Command-line interface for tinypio.

WHY: Checking a .pio file from a terminal, a Makefile, or a pre-commit
hook should not require running the web service. The CLI exposes the
same validator, pioasm bridge, and catalog as the HTTP API, plus a
command to start the API itself.

HOW: argparse with one subcommand per task:
  validate  — classify and validate a file (or stdin), print the report
  compile   — run pioasm on a file (or stdin), print or save the output
  examples  — list example programs, or print one example's source
  drivers   — list ready-to-use piolib drivers
  serve     — run the FastAPI app with uvicorn

RULES:
- Results go to stdout; status and error messages go to stderr
- "-" as the file argument reads the program from stdin
- Exit codes: 0 success/valid, 1 invalid program or failed compile,
  2 unreadable input or unknown example
- --verbose enables DEBUG logging on stderr
- Python 3.9 compatible — no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tinypio import __version__
from tinypio.catalog import DRIVERS, EXAMPLES, get_example
from tinypio.config import (
    COMPILE_FORMATS,
    DEFAULT_COMPILE_FORMAT,
    TINYPIO_HOST,
    TINYPIO_PORT,
)
from tinypio.core.report import format_report, report_to_dict
from tinypio.core.validator import validate
from tinypio.pioasm import compile_source

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _read_source(path: str) -> Optional[str]:
    """Read program text from a file path or stdin ("-").

    Returns None (after printing an error) when the file cannot be read.
    """
    if path == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            _status("Error: Cannot read stdin: {}".format(exc))
            return None
    source_path = Path(path)
    if not source_path.is_file():
        _status("Error: File not found: {}".format(source_path))
        return None
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _status("Error: Cannot read {}: {}".format(source_path, exc))
        return None


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_validate(args: argparse.Namespace) -> int:
    source = _read_source(args.file)
    if source is None:
        return EXIT_INPUT_ERROR

    report = validate(source)
    if args.json:
        print(json.dumps(report_to_dict(report), indent=2, ensure_ascii=False))
    else:
        print(format_report(report))
    return EXIT_OK if report.valid else EXIT_INVALID


def _cmd_compile(args: argparse.Namespace) -> int:
    source = _read_source(args.file)
    if source is None:
        return EXIT_INPUT_ERROR

    result = compile_source(source, args.format)
    if not result.success:
        for error in result.errors:
            _status("Error: {}".format(error))
        return EXIT_INVALID

    output = result.go if result.go is not None else (result.hex or "")
    if args.output:
        out_path = Path(args.output)
        out_path.write_text(output, encoding="utf-8")
        _status("Saved: {}".format(out_path))
    else:
        sys.stdout.write(output)

    if result.binary:
        _status("{} instruction words".format(len(result.binary)))
    return EXIT_OK


def _cmd_examples(args: argparse.Namespace) -> int:
    if args.name:
        program = get_example(args.name)
        if program is None:
            available = ", ".join(ex.name for ex in EXAMPLES)
            _status("Error: Unknown example '{}'. Available: {}".format(args.name, available))
            return EXIT_INPUT_ERROR
        print(program.source)
        return EXIT_OK

    width = max(len(ex.name) for ex in EXAMPLES)
    for ex in EXAMPLES:
        print("{:<{w}}  {}".format(ex.name, ex.description, w=width))
    return EXIT_OK


def _cmd_drivers(args: argparse.Namespace) -> int:
    for driver in DRIVERS:
        print("{}: {}".format(driver.name, driver.description))
        print("  import \"{}\"".format(driver.package))
        if driver.example:
            for line in driver.example.splitlines():
                print("  {}".format(line))
        print("")
    return EXIT_OK


def _cmd_serve(args: argparse.Namespace) -> int:
    from tinypio.server.app import run_api

    run_api(host=args.host, port=args.port)
    return EXIT_OK


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    the parser without running a command.
    """
    parser = argparse.ArgumentParser(
        prog="tinypio",
        description="Validate and assemble RP2040/RP2350 PIO programs.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p_validate = sub.add_parser(
        "validate",
        help="Check a PIO program for unknown opcodes and size limits.",
    )
    p_validate.add_argument("file", help="Path to a .pio file, or '-' for stdin.")
    p_validate.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON.",
    )
    p_validate.set_defaults(func=_cmd_validate)

    p_compile = sub.add_parser(
        "compile",
        help="Assemble a PIO program with pioasm (must be installed).",
    )
    p_compile.add_argument("file", help="Path to a .pio file, or '-' for stdin.")
    p_compile.add_argument(
        "--format",
        choices=sorted(COMPILE_FORMATS),
        default=DEFAULT_COMPILE_FORMAT,
        help="pioasm output format (default: %(default)s).",
    )
    p_compile.add_argument(
        "--output", "-o",
        default=None,
        help="Write the output to this file instead of stdout.",
    )
    p_compile.set_defaults(func=_cmd_compile)

    p_examples = sub.add_parser(
        "examples",
        help="List example programs, or print one by name.",
    )
    p_examples.add_argument("name", nargs="?", default=None, help="Example name.")
    p_examples.set_defaults(func=_cmd_examples)

    p_drivers = sub.add_parser("drivers", help="List ready-to-use piolib drivers.")
    p_drivers.set_defaults(func=_cmd_drivers)

    p_serve = sub.add_parser("serve", help="Run the HTTP API and web UI.")
    p_serve.add_argument(
        "--host",
        default=TINYPIO_HOST,
        help="Bind address (default: %(default)s).",
    )
    p_serve.add_argument(
        "--port",
        type=int,
        default=TINYPIO_PORT,
        help="Port (default: %(default)s).",
    )
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Returns the process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    return args.func(args)


def run() -> None:
    """Console-script wrapper that exits with main()'s status."""
    sys.exit(main())


if __name__ == "__main__":
    run()
