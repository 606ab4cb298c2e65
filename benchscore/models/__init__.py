"""Pydantic models for configuration and structured output."""

from benchscore.models.config_models import RunConfig
from benchscore.models.score_models import Measurement, SuiteScore, TimingSample

__all__ = [
    "Measurement",
    "RunConfig",
    "SuiteScore",
    "TimingSample",
]
