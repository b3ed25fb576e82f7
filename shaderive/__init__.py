# shaderive
# SHA-1 and SHA-2 (NIST FIPS 180-4) with every constant derived from primes and roots.

from .hashes import (
    HASH,
    algorithms_available,
    new,
    sha1,
    sha224,
    sha256,
    sha384,
    sha512,
    sha512_224,
    sha512_256,
    sha512t,
)
from .utils import DigestSizeError

__version__ = "0.2.0"

__all__: list = [
    "DigestSizeError",
    "HASH",
    "algorithms_available",
    "new",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512_224",
    "sha512_256",
    "sha512t",
]
