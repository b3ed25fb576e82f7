# utils.py
# Primes, roots and byte helpers used to derive the SHA constants.

from __future__ import annotations

import decimal
import typing as t

from typing_extensions import Buffer

__all__ = [
    "Buffer",
    "DigestSizeError",
    "byte_swap",
    "from_bytes",
    "is_prime",
    "next_prime",
    "nprimes",
    "nth_root",
    "prime",
    "to_bytes",
]

BITS_PER_BYTE: int = 8

# Enough digits for 128-bit (quad) precision and then some.
ROOT_PRECISION: int = 60
ROOT_TOLERANCE = decimal.Decimal("1e-32")


class DigestSizeError(ValueError): ...


def is_prime(value: int) -> bool:
    """Trial division by every d with d*d <= value, starting at 2.

    Only meant for the handful of small primes the constants need.
    Does not give meaningful results for value < 2."""
    divisor = 2
    while divisor * divisor <= value:
        if value % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(start: int) -> int:
    """Returns the first prime at or after *start*"""
    value = start
    while not is_prime(value):
        value += 1
    return value


def prime(index: int) -> int:
    """Returns the index-th prime, zero indexed: prime(0) == 2"""
    value = 2
    for _ in range(index):
        value = next_prime(value + 1)
    return value


def nprimes(n: int) -> list[int]:
    """Returns the first n prime numbers"""
    primes: list = []
    candidate = 2

    while len(primes) < n:
        candidate = next_prime(candidate)
        primes.append(candidate)
        candidate += 1

    return primes


def nth_root(value: int, n: int) -> decimal.Decimal:
    """The n-th root of *value* by Newton-Raphson iteration.

    Starts from a guess of 1 and refines with
    ``g' = ((n - 1)·g + value / g^(n-1)) / n`` until two successive guesses
    are within 1e-32 of each other. The arithmetic runs in a private
    decimal context, so a double is never involved; 64-bit fractional
    constants need far more than 53 bits of mantissa.
    """
    with decimal.localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        target = decimal.Decimal(value)
        guess = decimal.Decimal(1)

        while True:
            refined = ((n - 1) * guess + target / guess ** (n - 1)) / n
            if abs(guess - refined) <= ROOT_TOLERANCE:
                return +refined
            guess = refined


def byte_swap(value: int, bits: int) -> int:
    """Reverse the byte order of a *bits*-wide word"""
    size = bits // BITS_PER_BYTE
    return int.from_bytes(value.to_bytes(size, "big"), "little")


def to_bytes(words: t.Iterable[int], bits: int) -> bytes:
    """Serialize words big-endian, *bits* wide each"""
    size = bits // BITS_PER_BYTE
    return b"".join(word.to_bytes(size, "big") for word in words)


def from_bytes(data: Buffer, bits: int) -> tuple[int, ...]:
    """Reads big-endian *bits*-wide words out of *data*"""
    size = bits // BITS_PER_BYTE
    view = memoryview(data).cast("B")
    return tuple(
        int.from_bytes(view[i : i + size], "big") for i in range(0, len(view), size)
    )
