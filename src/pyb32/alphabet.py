"""
Lookup tables for the RFC 4648 base32 alphabet.

All three tables are built once at import time by pure functions and are
immutable afterwards, so they can be shared freely between threads.
"""

from __future__ import annotations

from .constants import ALPHABET, ALPHABET_TABLE_SIZE, INVALID_POSITION, PAD_CHAR


def build_forward_table(alphabet: str = ALPHABET) -> tuple[str, ...]:
    """5-bit value -> alphabet character."""

    return tuple(alphabet)


def build_reverse_table(alphabet: str = ALPHABET) -> bytes:
    """Character code -> 5-bit value, or `INVALID_POSITION`."""

    table = bytearray([INVALID_POSITION]) * ALPHABET_TABLE_SIZE
    for i, ch in enumerate(alphabet):
        table[ord(ch)] = i
    return bytes(table)


def build_membership_table(alphabet: str = ALPHABET) -> tuple[bool, ...]:
    """Character code -> accepted by the decoder (alphabet or pad)."""

    accepted = {ord(ch) for ch in alphabet}
    accepted.add(ord(PAD_CHAR))
    return tuple(code in accepted for code in range(ALPHABET_TABLE_SIZE))


FORWARD = build_forward_table()
REVERSE = build_reverse_table()
MEMBERSHIP = build_membership_table()


def in_alphabet(code: int) -> bool:
    if code < 0 or code >= ALPHABET_TABLE_SIZE:
        return False
    return MEMBERSHIP[code]


def position(code: int) -> int:
    if code < 0 or code >= ALPHABET_TABLE_SIZE:
        return INVALID_POSITION
    return REVERSE[code]
