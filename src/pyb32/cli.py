from __future__ import annotations

import argparse
import logging
import sys
from os import environ

from .decoder import b32decode
from .encoder import b32encode
from .exceptions import Pyb32Error

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write(path: str, data: bytes) -> None:
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def _transform(command: str, data: bytes) -> bytes:
    if command == "encode":
        return b32encode(data).encode("ascii") + b"\n"
    # Text files usually end with a newline, which is not part of the payload.
    return b32decode(data.rstrip(b"\r\n"))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pyb32", description="RFC 4648 base32 encode/decode")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=environ.get("PYB32_LOG_LEVEL", "WARNING").upper(),
        help="logging level (default: $PYB32_LOG_LEVEL or WARNING)",
    )
    sub = ap.add_subparsers(dest="command", required=True)
    for name, summary in (
        ("encode", "raw bytes to base32 text"),
        ("decode", "base32 text to raw bytes"),
    ):
        p = sub.add_parser(name, help=summary)
        p.add_argument("-i", "--input", default="-", help="input file (default: stdin)")
        p.add_argument("-o", "--output", default="-", help="output file (default: stdout)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        # The output is only opened once the input has been transformed successfully.
        out = _transform(args.command, _read(args.input))
        _write(args.output, out)
    except (Pyb32Error, OSError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"pyb32: {e}", file=sys.stderr)
        return 1
    return 0
