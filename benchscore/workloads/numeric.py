"""Numeric suite: integer sieve, dense matrix multiply and an n-body step."""

import math

import numpy as np

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.suite import Suite

SUITE_NAME = "Numeric"

PRIMES_BELOW_100K = 9592


def sieve(limit: int = 100_000) -> int:
    """Count primes below ``limit`` with the sieve of Eratosthenes."""
    flags = bytearray([1]) * limit
    flags[0:2] = b"\x00\x00"
    for i in range(2, math.isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return sum(flags)


def _run_sieve() -> None:
    count = sieve()
    if count != PRIMES_BELOW_100K:
        raise RuntimeError(f"Sieve found {count} primes, expected {PRIMES_BELOW_100K}")


class MatMulWorkload:
    """Dense float64 matrix multiplication with NumPy."""

    def __init__(self, matrix_size: int = 128) -> None:
        self.matrix_size = matrix_size
        self._a: np.ndarray | None = None
        self._b: np.ndarray | None = None

    def setup(self) -> None:
        rng = np.random.default_rng(self.matrix_size)
        self._a = rng.random((self.matrix_size, self.matrix_size))
        self._b = rng.random((self.matrix_size, self.matrix_size))

    def run(self) -> None:
        if self._a is None or self._b is None:
            raise RuntimeError("Matrices not initialized. Did setup() run?")
        _ = np.matmul(self._a, self._b)

    def teardown(self) -> None:
        self._a = None
        self._b = None


class NBodyWorkload:
    """Advance a five-body planetary system in pure Python.

    Each run() restores the initial state first so every iteration does
    identical work.
    """

    SOLAR_MASS = 4 * math.pi * math.pi
    DAYS_PER_YEAR = 365.24
    # fmt: off
    INITIAL_STATE: tuple[tuple[float, ...], ...] = (
        # x, y, z, vx, vy, vz (vx..vz in AU/day), mass (solar masses)
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0),
        (4.84143144246472090e00, -1.16032004402742839e00, -1.03622044471123109e-01,
         1.66007664274403694e-03, 7.69901118419740425e-03, -6.90460016972063023e-05,
         9.54791938424326609e-04),
        (8.34336671824457987e00, 4.12479856412430479e00, -4.03523417114321381e-01,
         -2.76742510726862411e-03, 4.99852801234917238e-03, 2.30417297573763929e-05,
         2.85885980666130812e-04),
        (1.28943695621391310e01, -1.51111514016986312e01, -2.23307578892655734e-01,
         2.96460137564761618e-03, 2.37847173959480950e-03, -2.96589568540237556e-05,
         4.36624404335156298e-05),
        (1.53796971148509165e01, -2.59193146099879641e01, 1.79258772950371181e-01,
         2.68067772490389322e-03, 1.62824170038242295e-03, -9.51592254519715870e-05,
         5.15138902046611451e-05),
    )
    # fmt: on

    def __init__(self, steps: int = 200, dt: float = 0.01) -> None:
        self.steps = steps
        self.dt = dt

    def _initial_bodies(self) -> list[list[float]]:
        bodies = []
        for x, y, z, vx, vy, vz, mass in self.INITIAL_STATE:
            bodies.append(
                [
                    x,
                    y,
                    z,
                    vx * self.DAYS_PER_YEAR,
                    vy * self.DAYS_PER_YEAR,
                    vz * self.DAYS_PER_YEAR,
                    mass * self.SOLAR_MASS,
                ]
            )
        return bodies

    def run(self) -> None:
        bodies = self._initial_bodies()
        dt = self.dt
        count = len(bodies)
        for _ in range(self.steps):
            for i in range(count):
                b1 = bodies[i]
                for j in range(i + 1, count):
                    b2 = bodies[j]
                    dx = b1[0] - b2[0]
                    dy = b1[1] - b2[1]
                    dz = b1[2] - b2[2]
                    dist2 = dx * dx + dy * dy + dz * dz
                    mag = dt / (dist2 * math.sqrt(dist2))
                    m1 = b1[6] * mag
                    m2 = b2[6] * mag
                    b1[3] -= dx * m2
                    b1[4] -= dy * m2
                    b1[5] -= dz * m2
                    b2[3] += dx * m1
                    b2[4] += dy * m1
                    b2[5] += dz * m1
            for body in bodies:
                body[0] += dt * body[3]
                body[1] += dt * body[4]
                body[2] += dt * body[5]


def build_suite() -> Suite:
    """Build the Numeric suite."""
    matmul = MatMulWorkload()
    nbody = NBodyWorkload()
    return Suite(
        SUITE_NAME,
        [
            Benchmark("Sieve", reference=3.0, run=_run_sieve),
            Benchmark(
                "MatMul",
                reference=0.3,
                run=matmul.run,
                setup=matmul.setup,
                teardown=matmul.teardown,
            ),
            Benchmark("NBody", reference=4.0, run=nbody.run),
        ],
    )
