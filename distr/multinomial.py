"""
Multinomial distribution sampler.

Samples from MN(n, weights): distributes n draws over K categories with
probabilities given by the normalized weights. Each sample is a list of K
non-negative counts summing exactly to n.

Follows the binomial approach in "The computer generation of multinomial
random variates" by Charles S. Davis: category i receives a binomial draw
over the trials not yet allocated, with probability weights[i] divided by
the mass not yet allocated. The last category takes whatever remains.
"""

import enum
import logging
import math
from collections.abc import Iterator, Sequence

from .binomial import Binomial
from .protocols import BinomialFactory, RandomSource

logger = logging.getLogger(__name__)

MAX_DRAWS = 2**64


class ErrorKind(enum.Enum):
    """Reason a weight vector was rejected."""

    NEGATIVE_OR_NAN = "One of the weights is negative or NaN"
    ALL_ZERO = "All of the weights are zero"
    OVERFLOW = "One of the weights is inf or the sum overflows"


class MultinomialError(ValueError):
    """
    Raised by Multinomial() when the weights cannot be normalized.

    Attributes:
        kind: Which of the three validation checks failed
    """

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


def _to_float(w) -> float:
    try:
        return float(w)
    except OverflowError:
        # Integers beyond the float range keep their sign as infinities
        return math.inf if w > 0 else -math.inf


def normalize(weights: Sequence[float]) -> tuple[float, ...]:
    """
    Validate raw weights and scale them to sum to 1.

    Checks run in a fixed order: negative/NaN, then zero sum, then
    infinite sum.

    Args:
        weights: Raw non-negative weights; not modified

    Returns:
        Normalized weights as a new tuple
    """
    values = [_to_float(w) for w in weights]

    # `not w >= 0.0` also catches NaN
    if any(not w >= 0.0 for w in values):
        raise MultinomialError(ErrorKind.NEGATIVE_OR_NAN)

    total = sum(values)

    if total == 0.0:
        raise MultinomialError(ErrorKind.ALL_ZERO)

    if math.isinf(total):
        raise MultinomialError(ErrorKind.OVERFLOW)

    return tuple(w / total for w in values)


class Multinomial:
    """
    Multinomial distribution over a fixed number of categories.

    The number of categories K is the length of the weight sequence given at
    construction and never changes. Instances are immutable, compare and hash
    by (n, weights), and can be shared read-only; the RandomSource passed to
    sample() is the only mutable state involved.
    """

    def __init__(
        self,
        n: int,
        weights: Sequence[float],
        binomial: BinomialFactory = Binomial,
    ):
        """
        Initialize Multinomial.

        Args:
            n: Number of draws, in [0, 2^64)
            weights: Raw category weights; normalized to sum to 1
            binomial: Factory for the per-category binomial draws

        Raises:
            MultinomialError: if the weights cannot be normalized
        """
        if len(weights) == 0:
            raise ValueError("Multinomial needs at least one category")
        if n < 0 or n >= MAX_DRAWS:
            raise ValueError(f"n must be in [0, 2^64), got {n}")

        try:
            normalized = normalize(weights)
        except MultinomialError as e:
            logger.debug("Rejected %d weights: %s", len(weights), e.kind.name)
            raise

        self._n = int(n)
        self._weights = normalized
        self._binomial = binomial
        logger.debug("Multinomial with n=%d over %d categories", self._n, len(normalized))

    @property
    def n(self) -> int:
        """Number of draws per sample."""
        return self._n

    @property
    def weights(self) -> tuple[float, ...]:
        """Normalized category probabilities."""
        return self._weights

    @property
    def num_categories(self) -> int:
        """Number of categories (K)."""
        return len(self._weights)

    def sample(self, rng: RandomSource) -> list[int]:
        """
        Draw one sample.

        If the weights sum to slightly less than 1.0 the last category gets
        the remaining mass. If a prefix of the weights sums to more than 1.0,
        the categories after it get zero.

        Args:
            rng: Source of uniform randomness, passed to the binomial draws

        Returns:
            K non-negative counts summing to n
        """
        k = len(self._weights)
        counts = [0] * k
        remaining_p = 1.0
        remaining_n = self._n

        for i in range(k - 1):
            if remaining_p <= 0.0:
                break

            # weights[i] / remaining_p can round slightly above 1.0
            p = min(self._weights[i] / remaining_p, 1.0)
            try:
                binomial = self._binomial(remaining_n, p)
            except ValueError as e:
                raise RuntimeError(
                    f"binomial rejected probability {p} for category {i}"
                ) from e

            counts[i] = binomial.sample(rng)
            # A binomial sample never exceeds its trial count
            remaining_n -= counts[i]
            if remaining_n == 0:
                break
            remaining_p -= self._weights[i]

        counts[k - 1] = remaining_n
        return counts

    def sample_iter(self, rng: RandomSource) -> Iterator[list[int]]:
        """
        Endless stream of independent samples.

        Args:
            rng: Source of uniform randomness shared by all samples

        Yields:
            One sample per iteration
        """
        while True:
            yield self.sample(rng)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multinomial):
            return NotImplemented
        return self._n == other._n and self._weights == other._weights

    def __hash__(self) -> int:
        return hash((self._n, self._weights))

    def __repr__(self) -> str:
        return f"Multinomial(n={self._n}, weights={list(self._weights)})"
