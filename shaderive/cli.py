"""Command line front end, modelled on ``shasum``.

    shaderive -a 256 FILE...          hex digest of each file
    shaderive -a sha512/200 -         hex digest of stdin
    shaderive -a 384 --string abc     hex digest of a UTF-8 string
    shaderive -a 512224 --derive      print the derived constants and IV
"""

from __future__ import annotations

import argparse
import logging
import sys
import typing as t

from . import constants
from .hashes import HASH, new, sha512t_iv

logger = logging.getLogger(__name__)

# shasum --algorithm numbers
_SHASUM_NAMES: dict[str, str] = {
    "1": "sha1",
    "224": "sha224",
    "256": "sha256",
    "384": "sha384",
    "512": "sha512",
    "512224": "sha512_224",
    "512256": "sha512_256",
}


def algorithm_name(value: str) -> str:
    """Map a shasum number or an algorithm name to a name `new()` accepts."""
    return _SHASUM_NAMES.get(value, value)


def _hash_stream(name: str, stream: t.BinaryIO) -> HASH:
    h = new(name, usedforsecurity=False)
    for chunk in iter(lambda: stream.read(1 << 16), b""):
        h.update(chunk)
    return h


def _derived_tables(name: str) -> tuple[tuple, tuple, int]:
    """(round constants, initial hash values, word bits) for *name*"""
    h = new(name, usedforsecurity=False)
    if h.name == "sha1":
        return constants.K1, constants.SHA1_IV, 32
    if h.word_bit_length == 32:
        iv = constants.SHA224_IV if h.name == "sha224" else constants.SHA256_IV
        return constants.K256, iv, 32
    if h.name == "sha384":
        return constants.K512, constants.SHA384_IV, 64
    if h.name == "sha512":
        return constants.K512, constants.SHA512_IV, 64
    return constants.K512, sha512t_iv(h.digest_bit_length), 64


def _print_tables(name: str, out: t.TextIO) -> None:
    K, iv, bits = _derived_tables(name)
    width = bits // 4
    print(f"# {name}", file=out)
    for i, word in enumerate(iv):
        print(f"H{i} = {word:0{width}x}", file=out)
    for i, word in enumerate(K):
        print(f"K{i:02} = {word:0{width}x}", file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shaderive",
        description="Print SHA-1/SHA-2 checksums computed with derived constants",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=algorithm_name,
        default="sha1",
        help="1, 224, 256, 384, 512, 512224, 512256 or a name such as sha512/200 (default: 1)",
    )
    parser.add_argument(
        "-s",
        "--string",
        help="Hash the UTF-8 encoding of STRING instead of files",
    )
    parser.add_argument(
        "--derive",
        action="store_true",
        help="Print the derived initial hash values and round constants and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the SHA-512/t bootstrap at DEBUG level",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="Files to hash, '-' for standard input (default: -)",
    )
    return parser


def main(argv: t.Optional[t.Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        new(args.algorithm, usedforsecurity=False)
    except ValueError as exc:
        parser.error(str(exc))

    if args.derive:
        _print_tables(args.algorithm, sys.stdout)
        return 0

    if args.string is not None:
        h = new(args.algorithm, args.string.encode("utf-8"), usedforsecurity=False)
        print(f'{h.hexdigest()}  "{args.string}"')
        return 0

    status = 0
    for filename in args.files:
        logger.debug("%s %s", args.algorithm, filename)
        try:
            if filename == "-":
                h = _hash_stream(args.algorithm, sys.stdin.buffer)
            else:
                with open(filename, "rb") as stream:
                    h = _hash_stream(args.algorithm, stream)
        except OSError as exc:
            print(f"shaderive: {filename}: {exc.strerror}", file=sys.stderr)
            status = 1
            continue
        print(f"{h.hexdigest()}  {filename}")

    return status


__all__ = ["algorithm_name", "build_parser", "main"]
