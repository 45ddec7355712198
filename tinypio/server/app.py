"""FastAPI application exposing the validator, pioasm bridge, and catalog.

WHY: The web UI, curl users, and editor plugins need an HTTP API to
check PIO programs, assemble them when pioasm is available, and browse
the example programs and drivers. FastAPI provides request parsing,
response models, and OpenAPI docs out of the box.

HOW: One module-level app with JSON routes under /api, a plain-text
/health probe, and the single-page UI at /. Validation runs inline in the
request (it is a pure, fast function). Compilation runs pioasm in a
worker thread via run_in_threadpool so the event loop stays responsive.

RULES:
- Request bodies that are not valid JSON, or have fields of the wrong
  type, get 400 {"detail": "invalid JSON"}
- Wrong HTTP methods get FastAPI's default 405
- Empty optional fields (including empty compile output) are omitted
  from JSON responses
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from tinypio import __version__
from tinypio.catalog import DRIVERS, EXAMPLES
from tinypio.config import MAX_INSTRUCTIONS, TINYPIO_HOST, TINYPIO_PORT, UPSTREAM
from tinypio.core.report import report_to_dict
from tinypio.core.validator import validate
from tinypio.pioasm import compile_source, find_pioasm
from tinypio.server.models import (
    CompileRequest,
    CompileResponse,
    DriverInfo,
    ErrorResponse,
    ExampleProgram,
    StatusResponse,
    ValidateRequest,
    ValidationResponse,
)
from tinypio.server.page import INDEX_HTML

logger = logging.getLogger(__name__)

app = FastAPI(
    title="tinypio API",
    description=(
        "Validate RP2040/RP2350 PIO assembly programs, assemble them with "
        "pioasm when it is installed, and browse example programs and "
        "ready-to-use PIO drivers."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "invalid JSON"})


# ---------------------------------------------------------------------------
# Endpoints: Health and UI
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_class=PlainTextResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness probe. Always returns 'ok'.",
)
async def health_check() -> PlainTextResponse:
    return PlainTextResponse("ok\n")


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


# ---------------------------------------------------------------------------
# Endpoints: Catalog
# ---------------------------------------------------------------------------


@app.get(
    "/api/examples",
    response_model=List[ExampleProgram],
    tags=["catalog"],
    summary="List example PIO programs",
)
async def list_examples() -> List[ExampleProgram]:
    return [
        ExampleProgram(name=ex.name, source=ex.source, description=ex.description)
        for ex in EXAMPLES
    ]


@app.get(
    "/api/drivers",
    response_model=List[DriverInfo],
    response_model_exclude_none=True,
    tags=["catalog"],
    summary="List ready-to-use PIO drivers",
)
async def list_drivers() -> List[DriverInfo]:
    return [
        DriverInfo(
            name=d.name,
            description=d.description,
            package=d.package,
            example=d.example or None,
        )
        for d in DRIVERS
    ]


# ---------------------------------------------------------------------------
# Endpoints: Validation and compilation
# ---------------------------------------------------------------------------


@app.post(
    "/api/validate",
    response_model=ValidationResponse,
    response_model_exclude_none=True,
    tags=["pio"],
    summary="Validate a PIO program",
    description=(
        "Classify every source line and check mnemonics against the PIO "
        "instruction set and the 32-instruction memory limit. Rejected "
        "instructions are still listed so clients can show per-line "
        "diagnostics."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Body is not valid JSON"},
    },
)
async def validate_program(body: ValidateRequest) -> ValidationResponse:
    report = validate(body.source)
    return ValidationResponse.model_validate(report_to_dict(report, compact=True))


@app.post(
    "/api/compile",
    response_model=CompileResponse,
    response_model_exclude_none=True,
    tags=["pio"],
    summary="Assemble a PIO program with pioasm",
    description=(
        "Runs the pioasm binary when it is installed on the server. "
        "format is 'hex' (default, also returns parsed instruction words) "
        "or 'go'."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Body is not valid JSON"},
    },
)
async def compile_program(body: CompileRequest) -> CompileResponse:
    result = await run_in_threadpool(compile_source, body.source, body.format)
    if not result.success:
        logger.info("Compilation failed: %s", "; ".join(result.errors))
    return CompileResponse(
        success=result.success,
        binary=result.binary or None,
        hex=result.hex or None,
        go=result.go or None,
        errors=result.errors or None,
    )


@app.get(
    "/api/status",
    response_model=StatusResponse,
    tags=["health"],
    summary="Service capabilities",
)
async def status() -> StatusResponse:
    pioasm_path = find_pioasm() or ""
    return StatusResponse(
        validator=True,
        pioasm=bool(pioasm_path),
        pioasm_path=pioasm_path,
        drivers=len(DRIVERS),
        examples=len(EXAMPLES),
        upstream=UPSTREAM,
        max_instructions=MAX_INSTRUCTIONS,
    )


def run_api(host: str = TINYPIO_HOST, port: int = TINYPIO_PORT) -> None:
    """Entry point for the tinypio-api console script."""
    import uvicorn
    logger.info("tinypio listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
