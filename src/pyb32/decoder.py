from __future__ import annotations

import logging

from .alphabet import in_alphabet, position
from .constants import (
    BITS_PER_BYTE,
    BITS_PER_CHAR,
    INVALID_POSITION,
    MAX_DECODE_INPUT_LEN,
)
from .exceptions import error_for
from .types import Error, TextLike, input_length

logger = logging.getLogger(__name__)

_SPACE = ord(" ")
# Trailing padding; NUL covers buffers that still carry their terminator.
_TRAILER = b"=\0"


def payload_length(raw: bytes) -> int:
    """Number of leading characters left once trailing padding is discarded."""

    return len(raw.rstrip(_TRAILER))


def decode(text: TextLike) -> tuple[bytearray, Error]:
    """
    Decode RFC 4648 base32 `text`.

    Trailing `=` (and NUL) characters are ignored and interior spaces are
    skipped. Any other character outside the alphabet aborts the decode with
    `(bytearray(), Error.INVALID_ALPHABET_INPUT)`; no partial result is
    returned. Input longer than `MAX_DECODE_INPUT_LEN` is rejected untouched
    with `Error.INPUT_LENGTH_EXCEEDED`.
    """

    if not isinstance(text, (str, bytes, bytearray, memoryview)):
        raise TypeError("text must be str or bytes-like")
    size = input_length(text)
    if size > MAX_DECODE_INPUT_LEN:
        logger.debug("decode rejected: length %d > %d", size, MAX_DECODE_INPUT_LEN)
        return bytearray(), Error.INPUT_LENGTH_EXCEEDED

    if isinstance(text, str):
        if not text.isascii():
            logger.debug("decode rejected: non-ASCII input")
            return bytearray(), Error.INVALID_ALPHABET_INPUT
        raw = text.encode("ascii")
    else:
        raw = bytes(text)

    payload = payload_length(raw)
    out = bytearray()
    if payload == 0:
        return out, Error.NO_ERROR

    current_byte = 0
    bits_left = BITS_PER_BYTE
    for i in range(payload):
        code = raw[i]
        if code == _SPACE:
            continue
        if not in_alphabet(code):
            logger.debug("decode rejected: invalid character at offset %d", i)
            return bytearray(), Error.INVALID_ALPHABET_INPUT
        value = position(code)
        if value == INVALID_POSITION:
            # Padding is only valid at the end of the text.
            logger.debug("decode rejected: padding at offset %d", i)
            return bytearray(), Error.INVALID_ALPHABET_INPUT

        if bits_left > BITS_PER_CHAR:
            current_byte |= value << (bits_left - BITS_PER_CHAR)
            bits_left -= BITS_PER_CHAR
        else:
            current_byte |= value >> (BITS_PER_CHAR - bits_left)
            out.append(current_byte)
            current_byte = (value << (BITS_PER_BYTE - BITS_PER_CHAR + bits_left)) & 0xFF
            bits_left += BITS_PER_BYTE - BITS_PER_CHAR

    return out, Error.NO_ERROR


def b32decode(text: TextLike) -> bytes:
    """
    Like `decode`, but raises instead of returning a code.

    Raises `InputLengthExceededError` or `InvalidAlphabetError`.
    """

    data, err = decode(text)
    if err != Error.NO_ERROR:
        raise error_for(err, length=input_length(text), limit=MAX_DECODE_INPUT_LEN)
    return bytes(data)
