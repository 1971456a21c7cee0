"""
Parameters for a multinomial sampling run.

Key parameters:
- n: Number of draws per sample
- weights: Raw category weights, normalized when the sampler is built
- num_samples: How many samples the run draws
- seed: Optional seed for a reproducible random stream
"""

from dataclasses import dataclass

from .multinomial import Multinomial
from .utils import PRG, make_rng


@dataclass
class Params:
    """Parameters for a multinomial sampling run."""

    n: int  # Draws per sample
    weights: tuple[float, ...]  # Raw category weights
    num_samples: int = 1  # Samples per run
    seed: int | None = None  # None draws a fresh key from OS entropy

    def __post_init__(self):
        # Validate parameters
        self.weights = tuple(self.weights)
        if self.n < 0:
            raise ValueError("n must be non-negative")
        if len(self.weights) == 0:
            raise ValueError("weights must contain at least one category")
        if self.num_samples < 1:
            raise ValueError("num_samples must be at least 1")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")

    @property
    def num_categories(self) -> int:
        """Number of categories (K)."""
        return len(self.weights)

    def build(self) -> Multinomial:
        """
        Construct the sampler.

        Raises:
            MultinomialError: if the weights cannot be normalized
        """
        return Multinomial(self.n, self.weights)

    def rng(self) -> PRG:
        """Random source for this run, reproducible when seed is set."""
        return make_rng(self.seed)

    def __repr__(self) -> str:
        return (
            f"Params(n={self.n}, weights={list(self.weights)}, "
            f"num_samples={self.num_samples}, seed={self.seed})"
        )
