# hashes.py
# A naive Python implementation of the secure hash standard (NIST FIPS 180-4).

from __future__ import annotations

import copy
import logging
import re
import typing as t
import warnings
from functools import lru_cache, wraps

from typing_extensions import Self

from .constants import (
    K1,
    K256,
    K512,
    SHA1_IV,
    SHA224_IV,
    SHA256_IV,
    SHA384_IV,
    SHA512_IV,
)
from .functions import (
    Sigma0,
    Sigma1,
    choice,
    majority,
    mask,
    rotl,
    sha1_function,
    sigma0,
    sigma1,
)
from .preprocessing import block_bytes, preprocess
from .utils import BITS_PER_BYTE, Buffer, DigestSizeError, from_bytes, to_bytes

logger = logging.getLogger(__name__)

SHA512T_PREFIX: bytes = b"SHA-512/"
SHA512T_IV_MASK: int = 0xA5A5A5A5A5A5A5A5


def sha1_compress(state: t.Sequence[int], block: t.Sequence[int]) -> tuple:
    """Fold one 16-word block into a SHA-1 state. NIST FIPS 180-4, Section 6.1.2"""
    M = mask(32)
    W: list = list(block)

    for i in range(16, 80):
        W.append(rotl(W[i - 3] ^ W[i - 8] ^ W[i - 14] ^ W[i - 16], 1, 32))

    a, b, c, d, e = state

    for i in range(80):
        temp = (rotl(a, 5, 32) + sha1_function(i)(b, c, d) + e + K1[i] + W[i]) & M
        a, b, c, d, e = temp, a, rotl(b, 30, 32), c, d

    return tuple((x + y) & M for x, y in zip(state, (a, b, c, d, e)))


def sha2_compress(
    state: t.Sequence[int],
    block: t.Sequence[int],
    constants: t.Sequence[int],
    word_bits: int,
) -> tuple:
    """Fold one 16-word block into a SHA-2 state.

    The same loop serves SHA-224/256 (32-bit words, 64 rounds) and
    SHA-384/512/t (64-bit words, 80 rounds); the number of rounds is the
    length of *constants*. NIST FIPS 180-4, Section 6.2.2 and 6.4.2"""
    M = mask(word_bits)
    W: list = list(block)

    for i in range(16, len(constants)):
        W.append(
            (sigma1(W[i - 2], word_bits) + W[i - 7] + sigma0(W[i - 15], word_bits) + W[i - 16])
            & M
        )

    a, b, c, d, e, f, g, h = state

    for i in range(len(constants)):
        t1 = (h + Sigma1(e, word_bits) + choice(e, f, g) + constants[i] + W[i]) & M
        t2 = (Sigma0(a, word_bits) + majority(a, b, c)) & M

        h, g, f = g, f, e
        e = (d + t1) & M
        d, c, b = c, b, a
        a = (t1 + t2) & M

    return tuple((x + y) & M for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _assemble(state: t.Sequence[int], word_bits: int, digest_bits: int) -> bytes:
    """Big-endian serialization of the final state, cut down to *digest_bits*."""
    full = to_bytes(state, word_bits)
    size = -(-digest_bits // BITS_PER_BYTE)
    digest = bytearray(full[:size])

    # Leftmost digest_bits bits; clear whatever the last byte holds beyond them.
    spare = size * BITS_PER_BYTE - digest_bits
    if spare:
        digest[-1] &= (0xFF << spare) & 0xFF
    return bytes(digest)


def sha1_digest(message: Buffer) -> bytes:
    state: tuple = SHA1_IV
    for block in preprocess(message, 32):
        state = sha1_compress(state, block)
    return _assemble(state, 32, 160)


def sha2_digest(
    message: Buffer,
    initial_hash_values: t.Sequence[int],
    constants: t.Sequence[int],
    word_bits: int,
    digest_bits: int,
) -> bytes:
    state: tuple = tuple(initial_hash_values)
    for block in preprocess(message, word_bits):
        state = sha2_compress(state, block, constants, word_bits)
    return _assemble(state, word_bits, digest_bits)


def _check_sha512t_bits(bits: int) -> int:
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise DigestSizeError(f"SHA-512/t size must be an integer, got {bits!r}")
    if not 0 < bits < 512 or bits == 384:
        raise DigestSizeError(
            f"SHA-512/t size must be between 1 and 511 and not 384, got {bits}"
        )
    return bits


@lru_cache(maxsize=None)
def sha512t_iv(bits: int) -> tuple:
    """Initial hash value for SHA-512/t, see NIST FIPS 180-4, Section 5.3.6.

    The SHA-512 initial hash value is xored with 0xa5 in every byte, and
    the result is used to hash the ASCII string "SHA-512/t". That digest,
    read back as eight 64-bit words, is the initial hash value for t."""
    _check_sha512t_bits(bits)

    intermediate = tuple(word ^ SHA512T_IV_MASK for word in SHA512_IV)
    message = SHA512T_PREFIX + str(bits).encode("ascii")
    digest = sha2_digest(message, intermediate, K512, 64, 512)

    logger.debug("bootstrapped initial hash value for SHA-512/%d", bits)
    return from_bytes(digest, 64)


class HASH(object):

    __slots__: tuple = (
        "_buffer",
        "digest_size",
        "block_size",
        "word_bit_length",
        "digest_bit_length",
        "name",
        "_H",
        "_K",
        "usedforsecurity",
    )

    def __new__(cls, **kwds) -> HASH:
        if kwds.get("name", "").lower() == "sha1" and kwds.get(
            "usedforsecurity", False
        ):
            warnings.warn(
                "SHA-1 is not considered secure for cryptographic purposes.",
                UserWarning,
                stacklevel=4,
            )
        return super().__new__(cls)

    @t.overload
    def __init__(
        self,
        *,
        digest_bit_length: int,
        word_bit_length: int,
        name: str,
        usedforsecurity: bool,
        **kwds,
    ) -> None: ...
    def __init__(self, **kwds: t.Any) -> None:

        self._buffer: bytearray = bytearray()

        for key, value in kwds.items():
            object.__setattr__(self, key, value)

        self.digest_size: int = -(-self.digest_bit_length // BITS_PER_BYTE)
        self.block_size: int = block_bytes(self.word_bit_length)

    def __repr__(self) -> str:
        return f"<{self.name} HASH object @ {hex(id(self))}>"

    def copy(self) -> Self:
        return copy.deepcopy(self)

    def digest(self) -> bytes:
        if self.name == "sha1":
            return sha1_digest(self._buffer)
        return sha2_digest(
            self._buffer, self._H, self._K, self.word_bit_length, self.digest_bit_length
        )

    def hexdigest(self) -> str:
        return self.digest().hex()

    def update(self, obj: Buffer, /) -> None:
        # Nothing is compressed here, the whole message is hashed by digest().
        if isinstance(obj, str):
            raise TypeError("Strings must be encoded before hashing")
        self._buffer.extend(memoryview(obj).cast("B"))


"""
NOTE: The `usedforsecurity` parameter in the following functions is primarily advisory.
In most cases, it has no effect.  However,  for insecure algorithms like SHA-1, setting
`usedforsecurity=True` may raise a warning in security-sensitive environments.
"""


def _new_hash(
    name: str,
    digest_bits: int,
    word_bit_length: int,
    initial_hash_values: t.Sequence[int],
    constants: t.Sequence[int],
    string: Buffer,
    usedforsecurity: bool,
) -> HASH:

    if isinstance(string, str):
        raise TypeError("Strings must be encoded before hashing")

    h = HASH(
        digest_bit_length=digest_bits,
        word_bit_length=word_bit_length,
        name=name,
        usedforsecurity=usedforsecurity,
        _H=initial_hash_values,
        _K=constants,
    )

    if string:
        h.update(string)
    return h


def _shadef(
    digest_bits: int,
    word_bit_length: int,
    initial_hash_values: t.Sequence[int],
    constants: t.Sequence[int],
) -> t.Callable[[t.Callable[..., HASH]], t.Callable[..., HASH]]:

    def decorator(func: t.Callable[..., HASH]) -> t.Callable[..., HASH]:

        @wraps(func)
        def wrapper(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH:
            return _new_hash(
                func.__name__,
                digest_bits,
                word_bit_length,
                initial_hash_values,
                constants,
                string,
                usedforsecurity,
            )

        wrapper.digest_size = -(-digest_bits // BITS_PER_BYTE)
        wrapper.block_size = block_bytes(word_bit_length)
        wrapper.name = func.__name__
        return wrapper

    return decorator


@_shadef(160, 32, SHA1_IV, K1)
def sha1(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(224, 32, SHA224_IV, K256)
def sha224(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(256, 32, SHA256_IV, K256)
def sha256(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(384, 64, SHA384_IV, K512)
def sha384(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


@_shadef(512, 64, SHA512_IV, K512)
def sha512(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH: ...


def sha512t(bits: int, string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH:
    """SHA-512/t for any t in 1..511 except 384.

    The size is checked, and the initial hash value bootstrapped, before
    anything is hashed."""
    _check_sha512t_bits(bits)
    return _new_hash(
        f"sha512_{bits}", bits, 64, sha512t_iv(bits), K512, string, usedforsecurity
    )


def sha512_224(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH:
    return sha512t(224, string, usedforsecurity=usedforsecurity)


def sha512_256(string: Buffer = b"", *, usedforsecurity: bool = True) -> HASH:
    return sha512t(256, string, usedforsecurity=usedforsecurity)


for _func, _bits in ((sha512_224, 224), (sha512_256, 256)):
    _func.digest_size = _bits // BITS_PER_BYTE
    _func.block_size = block_bytes(64)
    _func.name = _func.__name__


_CONSTRUCTORS: dict[str, t.Callable[..., HASH]] = {
    "sha1": sha1,
    "sha224": sha224,
    "sha256": sha256,
    "sha384": sha384,
    "sha512": sha512,
    "sha512_224": sha512_224,
    "sha512_256": sha512_256,
}

algorithms_available: frozenset = frozenset(_CONSTRUCTORS)

_SHA512T_NAME = re.compile(r"sha512[_/](\d+)")


def new(name: str, data: Buffer = b"", *, usedforsecurity: bool = True) -> HASH:
    """Return a new hashing object using the named algorithm.

    Besides the names in `algorithms_available`, any "sha512/t" or
    "sha512_t" spelling (dashes ignored, any case) selects SHA-512/t."""
    key = name.lower().replace("-", "")
    if key in _CONSTRUCTORS:
        return _CONSTRUCTORS[key](data, usedforsecurity=usedforsecurity)

    match = _SHA512T_NAME.fullmatch(key)
    if match is None:
        raise ValueError(f"Unsupported algorithm: {name!r}")
    return sha512t(int(match.group(1)), data, usedforsecurity=usedforsecurity)


__all__: list = [
    "HASH",
    "algorithms_available",
    "new",
    "sha1",
    "sha1_compress",
    "sha1_digest",
    "sha224",
    "sha256",
    "sha2_compress",
    "sha2_digest",
    "sha384",
    "sha512",
    "sha512_224",
    "sha512_256",
    "sha512t",
    "sha512t_iv",
]
