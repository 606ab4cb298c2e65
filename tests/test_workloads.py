"""Tests for the built-in workload suites."""

import pytest

from benchscore.benchmarks.hooks import RunHooks
from benchscore.benchmarks.registry import SuiteRegistry
from benchscore.benchmarks.runner import Runner
from benchscore.benchmarks.timer import Timer
from benchscore.models.config_models import RunConfig
from benchscore.workloads import crypto, numeric, register_builtin_suites, text
from benchscore.workloads.crypto import ZlibWorkload, _random_payload
from benchscore.workloads.numeric import PRIMES_BELOW_100K, NBodyWorkload, sieve


@pytest.fixture
def quick_timer():
    """A real-clock timer with minimal floors."""
    return Timer(min_duration=0.001, min_iterations=1, warmup_iterations=0)


def test_sieve_counts_primes():
    """Test the sieve against known prime counts."""
    assert sieve() == PRIMES_BELOW_100K == 9592
    assert sieve(10) == 4
    assert sieve(2) == 0


def test_build_strings_is_deterministic():
    """Test the string building workload output."""
    result = text.build_strings(3)
    assert result == "00000:0:EVEN;00001:7:ODD;00002:1:EVEN"


def test_random_payload_size():
    """Test payload generation honours the requested size."""
    assert len(_random_payload(1000)) == 1000


def test_zlib_level_validated():
    """Test that an invalid compression level is rejected."""
    with pytest.raises(ValueError):
        ZlibWorkload(compression_level=0)


def test_workload_run_before_setup_fails():
    """Test that stateful workloads refuse to run without setup."""
    with pytest.raises(RuntimeError, match="setup"):
        crypto.HashWorkload().run()
    with pytest.raises(RuntimeError, match="setup"):
        numeric.MatMulWorkload().run()


def test_nbody_is_repeatable():
    """Test that NBody does not carry state between iterations."""
    workload = NBodyWorkload(steps=5)
    workload.run()
    assert workload._initial_bodies() == NBodyWorkload(steps=5)._initial_bodies()


@pytest.mark.parametrize("module", [text, crypto, numeric])
def test_builtin_suite_runs_cleanly(module, quick_timer):
    """Test that each built-in suite completes with a positive score."""
    suite = module.build_suite()
    scores = []
    errors = []

    Runner(RunConfig(), timer=quick_timer).run_all(
        [suite],
        RunHooks(on_error=lambda n, e: errors.append((n, e)), on_score=scores.append),
    )

    assert errors == []
    assert len(scores) == 1
    assert scores[0] > 0


def test_register_builtin_suites():
    """Test registering the built-in suites into a fresh registry."""
    registry = SuiteRegistry()
    register_builtin_suites(registry)

    assert registry.names == ["Text", "Crypto", "Numeric"]
    assert registry.count_benchmarks() == 8
