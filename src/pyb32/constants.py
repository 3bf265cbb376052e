from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD_CHAR = "="

BITS_PER_BYTE = 8
BITS_PER_CHAR = 5
BYTES_PER_BLOCK = 5
BITS_PER_BLOCK = BITS_PER_BYTE * BYTES_PER_BLOCK

# Lookup tables cover the ASCII range; anything above is never in the alphabet.
ALPHABET_TABLE_SIZE = 128
INVALID_POSITION = 0xFF

MAX_ENCODE_INPUT_LEN = 64 * 1024 * 1024
# Large enough to admit the text produced by encoding MAX_ENCODE_INPUT_LEN bytes.
MAX_DECODE_INPUT_LEN = (MAX_ENCODE_INPUT_LEN * BITS_PER_BYTE + 4) // BITS_PER_CHAR
