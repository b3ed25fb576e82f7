# functions.py
# Operations on words and the logical functions of NIST FIPS 180-4, Section 3.2 and 4.1.

from __future__ import annotations

import typing as t

__all__ = [
    "Sigma0",
    "Sigma1",
    "choice",
    "majority",
    "mask",
    "parity",
    "rotl",
    "rotr",
    "sha1_function",
    "shr",
    "sigma0",
    "sigma1",
]

RoundFunction = t.Callable[[int, int, int], int]


def mask(w: int) -> int:
    return (1 << w) - 1


def rotr(x: int, n: int, w: int) -> int:
    '''Rotate Right (circular right shift) operation'''
    return ((x >> n) | (x << (w - n))) & mask(w)


def rotl(x: int, n: int, w: int) -> int:
    '''Rotate Left (circular left shift) operation'''
    return ((x << n) | (x >> (w - n))) & mask(w)


def shr(x: int, n: int) -> int:
    '''Right Shift operation'''
    return x >> n


def choice(x: int, y: int, z: int) -> int:
    '''Choice
    _
    SHA-1 -> 0 <= t <= 19, every SHA-2 round'''
    return (x & y) ^ (~x & z)


def parity(x: int, y: int, z: int) -> int:
    '''Parity
    _
    SHA-1 -> 20 <= t <= 39 and 60 <= t <= 79'''
    return x ^ y ^ z


def majority(x: int, y: int, z: int) -> int:
    '''Majority
    _
    SHA-1 -> 40 <= t <= 59, every SHA-2 round'''
    return (x & y) ^ (x & z) ^ (y & z)


def sha1_function(t: int) -> RoundFunction:
    '''The SHA-1 round function f_t, picked by the 20-round range t falls in.
    See NIST FIPS 180-4, Section 4.1.1'''
    if t < 20:
        return choice
    if t < 40:
        return parity
    if t < 60:
        return majority
    return parity


# (rotr, rotr, rotr) for the upper case sigmas and (rotr, rotr, shr) for the lower case ones.
# NIST FIPS 180-4, Section 4.1.2 (32-bit words) and 4.1.3 (64-bit words).
_SIGMA_AMOUNTS: dict[int, dict[str, tuple[int, int, int]]] = {
    32: {
        "Sigma0": (2, 13, 22),
        "Sigma1": (6, 11, 25),
        "sigma0": (7, 18, 3),
        "sigma1": (17, 19, 10),
    },
    64: {
        "Sigma0": (28, 34, 39),
        "Sigma1": (14, 18, 41),
        "sigma0": (1, 8, 7),
        "sigma1": (19, 61, 6),
    },
}


def Sigma0(x: int, w: int) -> int:
    s1, s2, s3 = _SIGMA_AMOUNTS[w]["Sigma0"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ rotr(x, s3, w)


def Sigma1(x: int, w: int) -> int:
    s1, s2, s3 = _SIGMA_AMOUNTS[w]["Sigma1"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ rotr(x, s3, w)


def sigma0(x: int, w: int) -> int:
    s1, s2, s3 = _SIGMA_AMOUNTS[w]["sigma0"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ shr(x, s3)


def sigma1(x: int, w: int) -> int:
    s1, s2, s3 = _SIGMA_AMOUNTS[w]["sigma1"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ shr(x, s3)
