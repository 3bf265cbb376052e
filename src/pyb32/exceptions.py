from __future__ import annotations

from .types import Error


class Pyb32Error(Exception):
    """Base error for the pyb32 library."""


class EncodeError(Pyb32Error):
    """Internal encoder invariant violation."""


class InvalidAlphabetError(Pyb32Error):
    """Encoded text contains a character outside the base32 alphabet."""


class InputLengthExceededError(Pyb32Error):
    """
    Input is longer than the codec accepts.

    The limits bound worst-case allocation; split the data or reject it.
    """

    def __init__(self, *, length: int, limit: int) -> None:
        super().__init__(f"input length {length} exceeds maximum of {limit}")
        self.length = length
        self.limit = limit


def error_for(code: Error, *, length: int, limit: int) -> Pyb32Error:
    if code == Error.INPUT_LENGTH_EXCEEDED:
        return InputLengthExceededError(length=length, limit=limit)
    if code == Error.INVALID_ALPHABET_INPUT:
        return InvalidAlphabetError("input contains characters outside the base32 alphabet")
    raise ValueError(f"no exception for result code {code!r}")
