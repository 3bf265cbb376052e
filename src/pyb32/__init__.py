"""
pyb32: RFC 4648 base32 encoding and decoding.

`encode`/`decode` return their result together with an `Error` code and never
raise for bad input; `b32encode`/`b32decode` raise `Pyb32Error` subclasses
instead.
"""

from __future__ import annotations

from .constants import ALPHABET, MAX_DECODE_INPUT_LEN, MAX_ENCODE_INPUT_LEN, PAD_CHAR
from .decoder import b32decode, decode
from .encoder import b32encode, encode
from .exceptions import (
    EncodeError,
    InputLengthExceededError,
    InvalidAlphabetError,
    Pyb32Error,
)
from .types import Error

__all__ = [
    "ALPHABET",
    "MAX_DECODE_INPUT_LEN",
    "MAX_ENCODE_INPUT_LEN",
    "PAD_CHAR",
    "EncodeError",
    "Error",
    "InputLengthExceededError",
    "InvalidAlphabetError",
    "Pyb32Error",
    "b32decode",
    "b32encode",
    "decode",
    "encode",
]

__version__ = "0.1.0"
