"""Version information for benchscore."""

from benchscore.version.benchscore_version import BENCHSCORE_VERSION, Version

__all__ = ["BENCHSCORE_VERSION", "Version"]
