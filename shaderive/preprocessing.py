# preprocessing.py
# Message padding and parsing, see NIST FIPS 180-4, Section 5.1 and 5.2.

from __future__ import annotations

from .utils import BITS_PER_BYTE, Buffer, from_bytes

__all__ = ["block_bytes", "pad", "preprocess", "split_blocks"]

WORDS_PER_BLOCK: int = 16

# Only the low 64 bits of the length field are ever written.
LENGTH_BYTES: int = 8


def block_bytes(word_bits: int) -> int:
    return WORDS_PER_BLOCK * word_bits // BITS_PER_BYTE


def pad(message: Buffer, word_bits: int) -> bytes:
    """The purpose of this padding is to ensure that the padded
    message is a multiple of 512 or 1024 bits, depending on the
    word size.

    A single '1' bit (0x80) follows the message, then zeros, then the
    bit length of the message. The length field is two words wide
    (64 bits for SHA-1/224/256, 128 bits for SHA-384/512) but only a
    64-bit count is encoded, which is plenty for any realistic message."""
    message = bytes(message)
    size = block_bytes(word_bits)
    length_field = 2 * word_bits // BITS_PER_BYTE

    # Room for the message, the 0x80 byte and the length field, rounded up to a whole block.
    blocks = (len(message) + 1 + length_field + size - 1) // size

    padded = bytearray(blocks * size)
    padded[: len(message)] = message
    padded[len(message)] = 0x80
    padded[-LENGTH_BYTES:] = (len(message) * BITS_PER_BYTE).to_bytes(LENGTH_BYTES, "big")
    return bytes(padded)


def split_blocks(padded: Buffer, word_bits: int) -> list[tuple[int, ...]]:
    """Parse a padded message into blocks of 16 big-endian words"""
    size = block_bytes(word_bits)
    view = memoryview(padded).cast("B")
    if len(view) % size:
        raise ValueError(
            f"Padded message length must be a multiple of {size} bytes, got {len(view)}"
        )
    return [from_bytes(view[i : i + size], word_bits) for i in range(0, len(view), size)]


def preprocess(message: Buffer, word_bits: int) -> list[tuple[int, ...]]:
    return split_blocks(pad(message, word_bits), word_bits)
