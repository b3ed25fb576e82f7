# constants.py
# Round constants and initial hash values, derived rather than copied from NIST FIPS 180-4.

from __future__ import annotations

import decimal
import logging
import math

from .utils import ROOT_PRECISION, byte_swap, nprimes, nth_root

logger = logging.getLogger(__name__)


def sha2_constant(p: int, root: int, bits: int) -> int:
    """Return `⌊frac(p^(1/root))·2ᵇⁱᵗˢ⌋`, the first *bits* bits of the fractional part."""
    with decimal.localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        value = nth_root(p, root)
        fractional = value - math.floor(value)
        return int(fractional * (1 << bits))


def sha1_constant(value: int) -> int:
    """The most significant 32 bits of sqrt(value), integer part included.

    NIST FIPS 180-4 gives no derivation for the SHA-1 constants; these are
    sqrt(2), sqrt(3), sqrt(5) and sqrt(10) scaled by 2^30."""
    with decimal.localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        return int(nth_root(value, 2) * (1 << 30))


def _sha1_constants() -> tuple:
    # NIST FIPS 180-4, Section 4.2.1: one constant per 20-round range.
    return tuple(sha1_constant(value) for value in (2, 3, 5, 10) for _ in range(20))


PRIMES: tuple = tuple(nprimes(80))

K1: tuple = _sha1_constants()

# NIST FIPS 180-4, Section 4.2.2: cube roots of the first 64 primes
K256: tuple = tuple(sha2_constant(p, 3, 32) for p in PRIMES[:64])
K224 = K256

# NIST FIPS 180-4, Section 4.2.3: cube roots of the first 80 primes
K512: tuple = tuple(sha2_constant(p, 3, 64) for p in PRIMES[:80])
K384 = K512_224 = K512_256 = K512

# Initial Hash Values
# See definition in NIST FIPS 180-4, Section 5.3.

# Written byte-swapped so the pattern shows: 0..f ascending, f..0 descending,
# then f..c in the high nibbles and 0..3 in the low nibbles.
SHA1_IV: tuple = tuple(
    byte_swap(word, 32)
    for word in (0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210, 0xF0E1D2C3)
)

# Square roots of the first eight primes
SHA256_IV: tuple = tuple(sha2_constant(p, 2, 32) for p in PRIMES[:8])
SHA512_IV: tuple = tuple(sha2_constant(p, 2, 64) for p in PRIMES[:8])

# Square roots of the ninth through sixteenth primes. SHA-224 keeps the
# low half of each 64-bit word.
SHA384_IV: tuple = tuple(sha2_constant(p, 2, 64) for p in PRIMES[8:16])
SHA224_IV: tuple = tuple(word & 0xFFFFFFFF for word in SHA384_IV)

logger.debug(
    "derived %d SHA-1, %d 32-bit and %d 64-bit round constants",
    len(K1),
    len(K256),
    len(K512),
)


__all__: list = [var for var in globals().keys() if var.isupper() and not var.startswith("_")]
__all__ += ["sha1_constant", "sha2_constant"]
