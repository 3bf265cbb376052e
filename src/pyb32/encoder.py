from __future__ import annotations

import logging

from .alphabet import FORWARD
from .constants import (
    BITS_PER_BLOCK,
    BITS_PER_BYTE,
    BITS_PER_CHAR,
    BYTES_PER_BLOCK,
    MAX_ENCODE_INPUT_LEN,
    PAD_CHAR,
)
from .exceptions import EncodeError, error_for
from .types import BytesLike, Error, input_length

logger = logging.getLogger(__name__)

# Trailing bits of the last block -> number of pad characters.
_PADDING = {
    0: 0,
    1 * BITS_PER_BYTE: 6,
    2 * BITS_PER_BYTE: 4,
    3 * BITS_PER_BYTE: 3,
    4 * BITS_PER_BYTE: 1,
}

_MASK = 0x1F


def padding_length(n: int) -> int:
    """Number of `=` characters that follow the encoding of `n` bytes."""

    remainder = (n * BITS_PER_BYTE) % BITS_PER_BLOCK
    pad = _PADDING.get(remainder)
    if pad is None:
        raise EncodeError(f"unexpected trailing bit count: {remainder}")
    return pad


def encoded_length(n: int) -> int:
    """Number of alphabet characters (padding excluded) needed for `n` bytes."""

    return (n * BITS_PER_BYTE + 4) // BITS_PER_CHAR


def encode(data: BytesLike) -> tuple[str, Error]:
    """
    Encode `data` as RFC 4648 base32 text.

    Returns `(text, Error.NO_ERROR)` on success. Input longer than
    `MAX_ENCODE_INPUT_LEN` is rejected untouched with
    `("", Error.INPUT_LENGTH_EXCEEDED)`.
    """

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    size = input_length(data)
    if size > MAX_ENCODE_INPUT_LEN:
        logger.debug("encode rejected: length %d > %d", size, MAX_ENCODE_INPUT_LEN)
        return "", Error.INPUT_LENGTH_EXCEEDED

    b = bytes(data)
    n = len(b)

    pad = padding_length(n)
    output_length = encoded_length(n)

    out: list[str] = []
    for i in range(0, n, BYTES_PER_BLOCK):
        block = b[i : i + BYTES_PER_BLOCK]
        quintuple = 0
        for k in range(BYTES_PER_BLOCK):
            quintuple = (quintuple << BITS_PER_BYTE) | (block[k] if k < len(block) else 0)
        for shift in range(BITS_PER_BLOCK - BITS_PER_CHAR, -1, -BITS_PER_CHAR):
            out.append(FORWARD[(quintuple >> shift) & _MASK])

    # The zero-extended tail of a partial block is replaced by padding.
    del out[output_length:]
    out.extend(PAD_CHAR * pad)
    return "".join(out), Error.NO_ERROR


def b32encode(data: BytesLike) -> str:
    """Like `encode`, but raises `InputLengthExceededError` instead of returning a code."""

    text, err = encode(data)
    if err != Error.NO_ERROR:
        raise error_for(err, length=input_length(data), limit=MAX_ENCODE_INPUT_LEN)
    return text
