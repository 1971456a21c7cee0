"""
Exact multinomial sampling.

Draws K non-negative counts summing to n from the multinomial distribution
induced by a vector of non-negative weights.

The key components:
- Multinomial: the sampler (sequential conditional binomial draws)
- Binomial: default binomial collaborator
- PRG: deterministic SHAKE-256 random source
- Params: configuration for a sampling run
"""

from .binomial import Binomial, BinomialError
from .multinomial import ErrorKind, Multinomial, MultinomialError
from .params import Params
from .protocols import BinomialFactory, BinomialSampler, Distribution, RandomSource
from .utils import PRG, derive_seed, make_rng


def create_multinomial(n: int, weights, **kwargs) -> Multinomial:
    """
    Create a multinomial sampler.

    Args:
        n: Number of draws per sample
        weights: Raw category weights
        **kwargs: Sampler options (binomial)

    Returns:
        Configured Multinomial
    """
    return Multinomial(n, weights, **kwargs)


__all__ = [
    "Multinomial",
    "MultinomialError",
    "ErrorKind",
    "Binomial",
    "BinomialError",
    "Params",
    "PRG",
    "derive_seed",
    "make_rng",
    "RandomSource",
    "Distribution",
    "BinomialSampler",
    "BinomialFactory",
    "create_multinomial",
]
