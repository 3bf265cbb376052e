from __future__ import annotations

import io
import sys

import pytest

from pyb32.cli import build_parser, main


def test_cli_encode_file(tmp_path) -> None:
    src = tmp_path / "plain.bin"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"foobar")

    assert main(["encode", "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == b"MZXW6YTBOI======\n"


def test_cli_decode_file_strips_line_ending(tmp_path) -> None:
    src = tmp_path / "in.txt"
    dst = tmp_path / "plain.bin"
    src.write_bytes(b"MZXW6YTBOI======\r\n")

    assert main(["decode", "--input", str(src), "--output", str(dst)]) == 0
    assert dst.read_bytes() == b"foobar"


def test_cli_decode_invalid_input_keeps_existing_output(tmp_path, capsys) -> None:
    src = tmp_path / "bad.txt"
    src.write_text("not base32!\n")
    dst = tmp_path / "plain.bin"
    dst.write_bytes(b"previous output")

    assert main(["decode", "-i", str(src), "-o", str(dst)]) == 1
    assert "pyb32:" in capsys.readouterr().err
    assert dst.read_bytes() == b"previous output"


def test_cli_failed_decode_does_not_create_output(tmp_path) -> None:
    src = tmp_path / "bad.txt"
    src.write_text("MY==MY==\n")
    dst = tmp_path / "plain.bin"

    assert main(["decode", "-i", str(src), "-o", str(dst)]) == 1
    assert not dst.exists()


def test_cli_missing_input_file_fails(tmp_path, capsys) -> None:
    assert main(["encode", "-i", str(tmp_path / "missing.bin")]) == 1
    assert "missing.bin" in capsys.readouterr().err


def test_cli_stdin_to_stdout(monkeypatch: pytest.MonkeyPatch, capsysbinary) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"MZXW6===\n")))

    assert main(["decode"]) == 0
    assert capsysbinary.readouterr().out == b"foo"


def test_cli_log_level_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYB32_LOG_LEVEL", "debug")
    assert build_parser().parse_args(["encode"]).log_level == "DEBUG"

    monkeypatch.delenv("PYB32_LOG_LEVEL")
    args = build_parser().parse_args(["--log-level", "error", "decode", "-i", "x"])
    assert args.log_level == "ERROR"
    assert args.command == "decode"
    assert args.input == "x"
    assert args.output == "-"
