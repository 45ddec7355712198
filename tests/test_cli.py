"""Tests for the argparse CLI.

HOW: main() is called with an explicit argv list; stdout/stderr are
captured with capsys. pioasm and uvicorn are patched out.
"""

from __future__ import annotations

import io
import json
from unittest.mock import patch

import pytest

from tinypio import config
from tinypio.cli import EXIT_INPUT_ERROR, EXIT_INVALID, EXIT_OK, build_parser, main
from tinypio.pioasm import CompileResult


@pytest.fixture
def pio_file(tmp_path, squarewave_source):
    path = tmp_path / "squarewave.pio"
    path.write_text(squarewave_source, encoding="utf-8")
    return path


class TestParser:

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_compile_format_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["compile", "x.pio", "--format", "bin"])

    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])
        assert args.port == config.TINYPIO_PORT
        assert args.host == config.TINYPIO_HOST


class TestValidateCommand:

    def test_valid_file(self, pio_file, capsys):
        assert main(["validate", str(pio_file)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Valid PIO program (3/32 instructions)" in out

    def test_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "bad.pio"
        path.write_text("    badop pins, 1\n", encoding="utf-8")
        assert main(["validate", str(path)]) == EXIT_INVALID
        assert "line 1: unknown opcode 'badop'" in capsys.readouterr().out

    def test_json_output(self, pio_file, capsys):
        assert main(["validate", "--json", str(pio_file)]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["valid"] is True
        assert data["errors"] == []
        assert [i["op"] for i in data["instructions"]] == ["set", "set", "jmp"]

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("nop\nnop\n"))
        assert main(["validate", "-"]) == EXIT_OK
        assert "(2/32 instructions)" in capsys.readouterr().out

    def test_stdin_invalid_utf8(self, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(b"nop\n\xff\xfe set\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        assert main(["validate", "-"]) == EXIT_INPUT_ERROR
        assert "Error: Cannot read stdin" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["validate", str(tmp_path / "missing.pio")]) == EXIT_INPUT_ERROR
        assert "File not found" in capsys.readouterr().err


class TestCompileCommand:

    def test_success_to_stdout(self, pio_file, capsys):
        result = CompileResult(success=True, hex="0xe001,\n", binary=[0xE001])
        with patch("tinypio.cli.compile_source", return_value=result) as mock:
            assert main(["compile", str(pio_file)]) == EXIT_OK
        assert mock.call_args[0][1] == "hex"
        captured = capsys.readouterr()
        assert captured.out == "0xe001,\n"
        assert "1 instruction words" in captured.err

    def test_go_output_to_file(self, pio_file, tmp_path):
        out = tmp_path / "out.go"
        result = CompileResult(success=True, go="package pio\n")
        with patch("tinypio.cli.compile_source", return_value=result):
            assert main(["compile", str(pio_file), "--format", "go", "-o", str(out)]) == EXIT_OK
        assert out.read_text(encoding="utf-8") == "package pio\n"

    def test_failure(self, pio_file, capsys):
        with patch("tinypio.cli.compile_source", return_value=CompileResult.failure("pioasm not found")):
            assert main(["compile", str(pio_file)]) == EXIT_INVALID
        assert "Error: pioasm not found" in capsys.readouterr().err


class TestCatalogCommands:

    def test_list_examples(self, capsys):
        assert main(["examples"]) == EXIT_OK
        out = capsys.readouterr().out
        for name in ("squarewave", "ws2812", "spi_tx"):
            assert name in out

    def test_show_example(self, capsys):
        assert main(["examples", "spi_tx"]) == EXIT_OK
        assert capsys.readouterr().out.startswith(".program spi_tx")

    def test_unknown_example(self, capsys):
        assert main(["examples", "nope"]) == EXIT_INPUT_ERROR
        assert "Unknown example 'nope'" in capsys.readouterr().err

    def test_drivers(self, capsys):
        assert main(["drivers"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "WS2812B:" in out
        assert "piolib.NewPulsar" in out


class TestServeCommand:

    def test_runs_uvicorn(self):
        with patch("uvicorn.run") as run:
            assert main(["serve", "--host", "127.0.0.1", "--port", "9000"]) == EXIT_OK
        _, kwargs = run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9000
