# test_hashes.py
# Unit test

import hashlib
import unittest
import warnings

from shaderive import (
    DigestSizeError,
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


class SecureHashStandardTest(unittest.TestCase):
    def setUp(self):
        self.test_vectors = [
            b"",
            b"a",
            b"abc",
            b"message digest",
            b"abcdefghijklmnopqrstuvwxyz",
            b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            b"1234567890" * 8,
            # Either side of the padding boundaries for 64 and 128 byte blocks
            b"a" * 55,
            b"a" * 56,
            b"a" * 64,
            b"b" * 111,
            b"b" * 112,
            b"b" * 119,
            b"b" * 128,
            bytes(range(256)) * 3,
        ]

    def test_sha1(self):
        for msg in self.test_vectors:
            expected = hashlib.sha1(msg).hexdigest()
            result = sha1(msg, usedforsecurity=False).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha224(self):
        for msg in self.test_vectors:
            expected = hashlib.sha224(msg).hexdigest()
            result = sha224(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha256(self):
        for msg in self.test_vectors:
            expected = hashlib.sha256(msg).hexdigest()
            result = sha256(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha384(self):
        for msg in self.test_vectors:
            expected = hashlib.sha384(msg).hexdigest()
            result = sha384(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha512(self):
        for msg in self.test_vectors:
            expected = hashlib.sha512(msg).hexdigest()
            result = sha512(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    @unittest.skipUnless("sha512_224" in hashlib.algorithms_available, "no sha512_224 in hashlib")
    def test_sha512_224(self):
        for msg in self.test_vectors:
            expected = hashlib.new("sha512_224", msg).hexdigest()
            result = sha512_224(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    @unittest.skipUnless("sha512_256" in hashlib.algorithms_available, "no sha512_256 in hashlib")
    def test_sha512_256(self):
        for msg in self.test_vectors:
            expected = hashlib.new("sha512_256", msg).hexdigest()
            result = sha512_256(msg).hexdigest()
            self.assertEqual(result, expected, f"Failed for message: {msg}")


class KnownAnswerTest(unittest.TestCase):
    """NIST FIPS 180-4 example vectors for the message "abc"."""

    def test_abc(self):
        cases = {
            "sha1": "a9993e364706816aba3e25717850c26c9cd0d89d",
            "sha224": "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
            "sha256": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
            "sha384": "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
            "8086072ba1e7cc2358baeca134c825a7",
            "sha512": "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
            "sha512_224": "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
            "sha512_256": "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                h = new(name, b"abc", usedforsecurity=False)
                self.assertEqual(h.digest(), bytes.fromhex(expected))

    def test_two_block_message(self):
        msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
        self.assertEqual(
            sha256(msg).hexdigest(),
            "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
        )
        self.assertEqual(
            sha1(msg, usedforsecurity=False).hexdigest(),
            "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
        )

    def test_digest_sizes(self):
        sizes = {
            sha1: 20,
            sha224: 28,
            sha256: 32,
            sha384: 48,
            sha512: 64,
            sha512_224: 28,
            sha512_256: 32,
        }
        for constructor, size in sizes.items():
            with self.subTest(name=constructor.name):
                h = constructor(b"abc", usedforsecurity=False)
                self.assertEqual(constructor.digest_size, size)
                self.assertEqual(h.digest_size, size)
                self.assertEqual(len(h.digest()), size)

    def test_block_sizes(self):
        for constructor in (sha1, sha224, sha256):
            self.assertEqual(constructor.block_size, 64)
        for constructor in (sha384, sha512, sha512_224, sha512_256):
            self.assertEqual(constructor.block_size, 128)


class TruncatedSha512Test(unittest.TestCase):

    def test_variants_differ(self):
        full = sha512(b"abc").digest()
        d224 = sha512_224(b"abc").digest()
        d256 = sha512_256(b"abc").digest()

        self.assertNotEqual(d224, d256[:28])
        self.assertNotEqual(d224, full[:28])
        self.assertNotEqual(d256, full[:32])

    def test_generic_t_matches_named_variants(self):
        self.assertEqual(sha512t(224, b"abc").digest(), sha512_224(b"abc").digest())
        self.assertEqual(sha512t(256, b"abc").digest(), sha512_256(b"abc").digest())

    def test_other_sizes(self):
        for bits in (8, 128, 200, 264, 504):
            with self.subTest(bits=bits):
                h = sha512t(bits, b"abc")
                self.assertEqual(h.name, f"sha512_{bits}")
                self.assertEqual(h.digest_size, bits // 8)
                self.assertEqual(len(h.digest()), bits // 8)

    def test_sizes_are_not_prefixes_of_each_other(self):
        # Each t gets its own initial hash value
        self.assertNotEqual(sha512t(128, b"abc").digest(), sha512t(136, b"abc").digest()[:16])

    def test_partial_byte_is_masked(self):
        h = sha512t(4, b"abc")
        digest = h.digest()
        self.assertEqual(h.digest_size, 1)
        self.assertEqual(len(digest), 1)
        self.assertEqual(digest[0] & 0x0F, 0)

        digest = sha512t(12, b"abc").digest()
        self.assertEqual(len(digest), 2)
        self.assertEqual(digest[1] & 0x0F, 0)

    def test_invalid_sizes(self):
        for bits in (0, -8, 384, 512, 1024, 2.5, "256", True):
            with self.subTest(bits=bits):
                with self.assertRaises(DigestSizeError):
                    sha512t(bits)

    def test_size_error_is_value_error(self):
        self.assertTrue(issubclass(DigestSizeError, ValueError))
        with self.assertRaises(ValueError):
            new("sha512/384")


class HashObjectTest(unittest.TestCase):

    def test_update_in_pieces(self):
        h = sha384()
        for piece in (b"The quick brown fox ", b"jumps over ", b"the lazy dog"):
            h.update(piece)
        expected = hashlib.sha384(b"The quick brown fox jumps over the lazy dog").digest()
        self.assertEqual(h.digest(), expected)

    def test_digest_does_not_consume(self):
        h = sha256(b"abc")
        self.assertEqual(h.digest(), h.digest())
        h.update(b"d")
        self.assertEqual(h.digest(), hashlib.sha256(b"abcd").digest())

    def test_copy_is_independent(self):
        h = sha512(b"abc")
        clone = h.copy()
        clone.update(b"def")

        self.assertEqual(h.hexdigest(), hashlib.sha512(b"abc").hexdigest())
        self.assertEqual(clone.hexdigest(), hashlib.sha512(b"abcdef").hexdigest())
        self.assertEqual(clone.name, "sha512")

    def test_buffer_types(self):
        expected = hashlib.sha256(b"abc").digest()
        for data in (b"abc", bytearray(b"abc"), memoryview(b"abc")):
            with self.subTest(kind=type(data).__name__):
                self.assertEqual(sha256(data).digest(), expected)

    def test_strings_rejected(self):
        with self.assertRaises(TypeError):
            sha256("abc")
        with self.assertRaises(TypeError):
            sha256().update("abc")

    def test_sha1_warns(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            sha1(b"abc")
        self.assertTrue(any(issubclass(w.category, UserWarning) for w in caught))

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            sha1(b"abc", usedforsecurity=False)
            sha256(b"abc")
        self.assertEqual(caught, [])

    def test_new(self):
        self.assertEqual(new("SHA256", b"abc").digest(), sha256(b"abc").digest())
        self.assertEqual(new("sha-512/224", b"abc").digest(), sha512_224(b"abc").digest())
        self.assertEqual(new("sha512_200", b"abc").digest(), sha512t(200, b"abc").digest())
        with self.assertRaises(ValueError):
            new("md5")

    def test_algorithms_available(self):
        self.assertEqual(
            algorithms_available,
            {"sha1", "sha224", "sha256", "sha384", "sha512", "sha512_224", "sha512_256"},
        )


if __name__ == "__main__":
    unittest.main()
