"""Pydantic models for timings, measurements and scores."""

from pydantic import BaseModel, Field


class TimingSample(BaseModel):
    """Raw output of the Timer for one measured pass."""

    elapsed_ms: float = Field(..., ge=0, description="Total measured wall time in ms")
    iterations: int = Field(..., ge=0, description="Timed invocations of the run action")

    @property
    def per_iteration_ms(self) -> float:
        """Average wall time of a single invocation in ms."""
        return self.elapsed_ms / self.iterations


class Measurement(BaseModel):
    """Outcome of executing one benchmark lifecycle."""

    benchmark: str = Field(..., description="Name of the measured benchmark")
    elapsed_ms: float = Field(..., ge=0, description="Total measured wall time in ms")
    iterations: int = Field(..., ge=0, description="Timed invocations completed")


class SuiteScore(BaseModel):
    """Scores produced by one suite run.

    ``score`` is only set when every benchmark in the suite succeeded;
    a partial suite has no representative score.
    """

    suite: str = Field(..., description="Suite name")
    benchmark_scores: dict[str, float] = Field(
        default_factory=dict, description="Score per successful benchmark"
    )
    errors: dict[str, str] = Field(
        default_factory=dict, description="Error message per failed benchmark"
    )
    score: float | None = Field(
        None, gt=0, description="Geometric mean of benchmark scores if all succeeded"
    )

    @property
    def succeeded(self) -> bool:
        """True when the suite produced a score."""
        return self.score is not None
