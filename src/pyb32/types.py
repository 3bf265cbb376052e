from __future__ import annotations

from enum import IntEnum
from typing import TypeAlias

BytesLike: TypeAlias = bytes | bytearray | memoryview
TextLike: TypeAlias = str | bytes | bytearray | memoryview


class Error(IntEnum):
    """
    Result code returned alongside every encode/decode result.

    A successful call always reports `NO_ERROR`, so callers can check it
    unconditionally. Empty input is not an error.
    """

    NO_ERROR = 0
    INVALID_ALPHABET_INPUT = 1
    INPUT_LENGTH_EXCEEDED = 2


def input_length(value: TextLike) -> int:
    """Length checked against the codec limits; memoryviews count bytes, not items."""

    if isinstance(value, memoryview):
        return value.nbytes
    return len(value)
