"""Crypto suite: hashing and compression workloads.

These represent integrity-check and archive workloads: SHA-256 over a
fixed buffer and zlib compress/decompress round trips.
"""

import hashlib
import random
import zlib

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.suite import Suite

SUITE_NAME = "Crypto"


def _random_payload(size: int) -> bytes:
    """Half-compressible payload: random bytes interleaved with text runs."""
    chunks = []
    while sum(len(c) for c in chunks) < size:
        chunks.append(random.randbytes(64))
        chunks.append(b"benchscore " * random.randint(1, 8))
    return b"".join(chunks)[:size]


class HashWorkload:
    """SHA-256 digest of a fixed buffer."""

    def __init__(self, data_size_kb: int = 256) -> None:
        self.data_size_kb = data_size_kb
        self._data: bytes | None = None
        self._expected: str | None = None

    def setup(self) -> None:
        self._data = _random_payload(self.data_size_kb * 1024)
        self._expected = hashlib.sha256(self._data).hexdigest()

    def run(self) -> None:
        if self._data is None:
            raise RuntimeError("Hash data not initialized. Did setup() run?")
        if hashlib.sha256(self._data).hexdigest() != self._expected:
            raise RuntimeError("SHA-256 digest changed between iterations")

    def teardown(self) -> None:
        self._data = None
        self._expected = None


class ZlibWorkload:
    """zlib compression followed by decompression and verification."""

    def __init__(self, data_size_kb: int = 256, compression_level: int = 6) -> None:
        if not 1 <= compression_level <= 9:
            raise ValueError("compression_level must be between 1 and 9")
        self.data_size_kb = data_size_kb
        self.compression_level = compression_level
        self._data: bytes | None = None

    def setup(self) -> None:
        self._data = _random_payload(self.data_size_kb * 1024)

    def run(self) -> None:
        if self._data is None:
            raise RuntimeError("Compression data not initialized. Did setup() run?")
        compressed = zlib.compress(self._data, self.compression_level)
        if zlib.decompress(compressed) != self._data:
            raise RuntimeError("zlib round trip corrupted data")

    def teardown(self) -> None:
        self._data = None


def build_suite() -> Suite:
    """Build the Crypto suite."""
    sha = HashWorkload()
    zlib_workload = ZlibWorkload()
    return Suite(
        SUITE_NAME,
        [
            Benchmark(
                "SHA256",
                reference=0.15,
                run=sha.run,
                setup=sha.setup,
                teardown=sha.teardown,
            ),
            Benchmark(
                "Zlib",
                reference=4.0,
                run=zlib_workload.run,
                setup=zlib_workload.setup,
                teardown=zlib_workload.teardown,
            ),
        ],
    )
