"""Models for run configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from benchscore.utils.env import get_env

if TYPE_CHECKING:
    from benchscore.benchmarks.scoring import Scorer
    from benchscore.benchmarks.timer import Timer

DEFAULT_MIN_DURATION = 1.0
DEFAULT_MIN_ITERATIONS = 32
DEFAULT_WARMUP_ITERATIONS = 1
DEFAULT_NORMALIZATION = 1000.0
DEFAULT_SEED = 49734321


class RunConfig(BaseModel):
    """Timing and scoring parameters for one run.

    The duration and iteration floors apply to every benchmark unless the
    benchmark carries its own override.
    """

    min_duration: float = Field(
        DEFAULT_MIN_DURATION,
        gt=0,
        description="Minimum measured wall time per benchmark in seconds",
    )
    min_iterations: int = Field(
        DEFAULT_MIN_ITERATIONS,
        ge=1,
        description="Minimum number of timed invocations per benchmark",
    )
    warmup_iterations: int = Field(
        DEFAULT_WARMUP_ITERATIONS,
        ge=0,
        description="Untimed invocations before measurement starts",
    )
    normalization: float = Field(
        DEFAULT_NORMALIZATION, gt=0, description="Score scale factor"
    )
    seed: int | None = Field(
        DEFAULT_SEED,
        description="Seed for the random module before each benchmark (None = off)",
    )

    @classmethod
    def from_env(cls, **overrides: object) -> RunConfig:
        """Build a config from BENCHSCORE_* variables plus explicit overrides.

        Overrides whose value is None are ignored so CLI options that were
        not given fall through to the environment and then to defaults.
        """
        values: dict[str, object] = {
            "min_duration": get_env(
                "BENCHSCORE_MIN_DURATION",
                default=DEFAULT_MIN_DURATION,
                as_type=float,
                log=True,
            ),
            "min_iterations": get_env(
                "BENCHSCORE_MIN_ITERATIONS",
                default=DEFAULT_MIN_ITERATIONS,
                as_type=int,
                log=True,
            ),
            "warmup_iterations": get_env(
                "BENCHSCORE_WARMUP_ITERATIONS",
                default=DEFAULT_WARMUP_ITERATIONS,
                as_type=int,
                log=True,
            ),
            "seed": get_env(
                "BENCHSCORE_SEED", default=DEFAULT_SEED, as_type=int, log=True
            ),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)

    def timer(self) -> Timer:
        """Build the Timer described by this config."""
        from benchscore.benchmarks.timer import Timer

        return Timer(
            min_duration=self.min_duration,
            min_iterations=self.min_iterations,
            warmup_iterations=self.warmup_iterations,
        )

    def scorer(self) -> Scorer:
        """Build the Scorer described by this config."""
        from benchscore.benchmarks.scoring import Scorer

        return Scorer(normalization=self.normalization)
