"""benchscore - benchmark execution and scoring harness."""

import logging

from benchscore.version.benchscore_version import BENCHSCORE_VERSION, Version

# Silent unless Logger.configure() installs a real handler
logging.getLogger("benchscore").addHandler(logging.NullHandler())

__version__ = str(BENCHSCORE_VERSION)
__version_info__ = BENCHSCORE_VERSION

__all__ = [
    "BENCHSCORE_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
