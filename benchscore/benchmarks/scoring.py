"""Score normalization and aggregation."""

import math
from collections.abc import Iterable

NORMALIZATION_CONSTANT = 1000.0


def geometric_mean(scores: Iterable[float]) -> float:
    """Return the geometric mean of positive scores.

    Accumulates in log space so large score sets cannot overflow.

    Args:
        scores: Positive numbers.

    Returns:
        The Nth root of the product of the N scores.

    Raises:
        ValueError: If ``scores`` is empty or contains a non-positive value.
    """
    total = 0.0
    count = 0
    for score in scores:
        if not score > 0:
            raise ValueError(f"scores must be positive, got {score}")
        total += math.log(score)
        count += 1

    if count == 0:
        raise ValueError("geometric mean of an empty sequence is undefined")

    return math.exp(total / count)


def format_score(value: float) -> str:
    """Format a score for display.

    Scores above 100 are shown as whole numbers; smaller ones keep three
    significant digits.

    Examples:
        >>> format_score(2345.6)
        '2346'
        >>> format_score(12.345)
        '12.3'
    """
    if value > 100:
        return str(math.floor(value + 0.5))
    return f"{value:#.3g}".rstrip(".")


class Scorer:
    """Converts timings into normalized scores and aggregates them.

    A benchmark that runs exactly as fast as its reference time scores
    ``normalization``. Twice as fast scores double.
    """

    def __init__(self, normalization: float = NORMALIZATION_CONSTANT) -> None:
        if normalization <= 0:
            raise ValueError(f"normalization must be positive, got {normalization}")
        self.normalization = normalization

    def score_of(self, elapsed: float, reference: float, iterations: int) -> float:
        """Return ``reference / (elapsed / iterations) * normalization``.

        Args:
            elapsed: Total measured time, same unit as ``reference``.
            reference: Reference time per iteration.
            iterations: Number of timed invocations in ``elapsed``.

        Raises:
            ValueError: If any argument is not positive.
        """
        if elapsed <= 0:
            raise ValueError(f"elapsed must be positive, got {elapsed}")
        if reference <= 0:
            raise ValueError(f"reference must be positive, got {reference}")
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")

        return (reference / (elapsed / iterations)) * self.normalization

    def aggregate(self, scores: Iterable[float]) -> float:
        """Aggregate scores into one representative score (geometric mean)."""
        return geometric_mean(scores)
