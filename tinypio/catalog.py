"""Built-in example PIO programs and ready-to-use driver descriptions.

WHY: The web UI offers one-click example programs, and users porting a
peripheral want to know whether the TinyGo piolib package already has a
driver for it. Both are fixed reference data, unrelated to validation.

HOW: Two module-level tuples of frozen dataclasses. get_example() is a
lookup helper for the CLI and the API.

RULES:
- Data is read-only and fixed at import time
- Every example program must pass validate() with no errors
- Example sources use directives, labels, side-set and delay annotations
  so they double as realistic classifier fixtures
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

PIOLIB_PACKAGE = "github.com/tinygo-org/pio/rp2-pio/piolib"


@dataclass(frozen=True)
class CatalogProgram:
    """A named example PIO program."""

    name: str
    description: str
    source: str


@dataclass(frozen=True)
class Driver:
    """A PIO-backed peripheral driver available in piolib."""

    name: str
    description: str
    package: str
    example: str = ""


EXAMPLES: tuple[CatalogProgram, ...] = (
    CatalogProgram(
        name="squarewave",
        description="Simple square wave generator",
        source=(
            ".program squarewave\n"
            "again:\n"
            "    set pins, 1 [1]  ; Drive pin high and delay\n"
            "    set pins, 0       ; Drive pin low\n"
            "    jmp again         ; Loop"
        ),
    ),
    CatalogProgram(
        name="ws2812",
        description="WS2812 (Neopixel) LED driver",
        source=(
            ".program ws2812\n"
            ".side_set 1\n"
            "bitloop:\n"
            "    out x, 1       side 0 [2]  ; Shift 1 bit, drive low\n"
            "    jmp !x, do_zero side 1 [1] ; Branch on bit value\n"
            "    jmp bitloop    side 1 [4]  ; Bit is 1: long pulse\n"
            "do_zero:\n"
            "    nop            side 0 [4]  ; Bit is 0: short pulse"
        ),
    ),
    CatalogProgram(
        name="spi_tx",
        description="SPI transmit-only master",
        source=(
            ".program spi_tx\n"
            ".side_set 1\n"
            "    out pins, 1  side 0 [1]  ; Write data, clock low\n"
            "    nop          side 1 [1]  ; Clock high"
        ),
    ),
)

DRIVERS: tuple[Driver, ...] = (
    Driver(
        name="WS2812B",
        description="WS2812B (NeoPixel) RGB LED strip controller with DMA support",
        package=PIOLIB_PACKAGE,
        example=(
            "ws, err := piolib.NewWS2812B(sm, machine.GP0)\n"
            "ws.PutRGB(255, 0, 0) // Red"
        ),
    ),
    Driver(
        name="SPI",
        description="SPI master implementation using PIO",
        package=PIOLIB_PACKAGE,
        example="spi, err := piolib.NewSPI(sm, clkPin, mosiPin, misoPin)",
    ),
    Driver(
        name="Parallel",
        description="8-pin send-only parallel bus for displays",
        package=PIOLIB_PACKAGE,
        example="bus, err := piolib.NewParallel8(sm, dataPin, clockPin)",
    ),
    Driver(
        name="I2S",
        description="I2S audio output driver",
        package=PIOLIB_PACKAGE,
        example="i2s, err := piolib.NewI2S(sm, bclkPin, lrclkPin, dataPin)",
    ),
    Driver(
        name="Pulsar",
        description="Pulse-constrained square wave generator",
        package=PIOLIB_PACKAGE,
        example="pulsar, err := piolib.NewPulsar(sm, pin, freq)",
    ),
)


def get_example(name: str) -> Optional[CatalogProgram]:
    """Look up an example program by name (exact match)."""
    for program in EXAMPLES:
        if program.name == name:
            return program
    return None
