"""
Protocol interfaces for the sampling collaborators.

This module defines:
1. RandomSource: uniform randomness provider
2. BinomialSampler / BinomialFactory: binomial distribution collaborator
3. Distribution: anything that draws a value from a RandomSource

The multinomial sampler consumes RandomSource and BinomialSampler opaquely,
so any implementation satisfying these protocols can be plugged in.
Concrete defaults live in distr.utils (PRG) and distr.binomial (Binomial).
"""

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


# =============================================================================
# Randomness
# =============================================================================


@runtime_checkable
class RandomSource(Protocol):
    """
    Uniform randomness provider.

    random.Random, random.SystemRandom and distr.utils.PRG all satisfy
    this protocol.

    Random sources carry mutable state. They must not be shared between
    concurrent callers without external synchronization.
    """

    def random(self) -> float:
        """
        Return a uniform float in [0, 1).
        """
        ...


# =============================================================================
# Distributions
# =============================================================================


@runtime_checkable
class Distribution(Protocol[T_co]):
    """
    A distribution producing values of type T from a RandomSource.
    """

    def sample(self, rng: RandomSource) -> T_co:
        """
        Draw a single value.

        Args:
            rng: Source of uniform randomness

        Returns:
            The sampled value
        """
        ...

    def sample_iter(self, rng: RandomSource) -> Iterator[T_co]:
        """
        Endless stream of independent samples drawn with rng.
        """
        ...


class BinomialSampler(Protocol):
    """
    Binomial distribution over a fixed number of trials.

    sample() must return an unbiased count of successes in [0, trials].
    """

    def sample(self, rng: RandomSource) -> int:
        """
        Draw the number of successes.

        Args:
            rng: Source of uniform randomness

        Returns:
            Integer in [0, trials]
        """
        ...


class BinomialFactory(Protocol):
    """
    Constructor for binomial samplers.

    Must raise ValueError when probability is outside [0, 1].
    """

    def __call__(self, trials: int, probability: float) -> BinomialSampler:
        ...
