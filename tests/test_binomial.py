"""Tests for the Binomial distribution."""

import math
import random

import pytest
from distr.binomial import Binomial, BinomialError
from distr.protocols import Distribution
from distr.utils import PRG


class TestBinomial:
    """Tests for Binomial."""

    def test_edge_probabilities(self):
        rng = random.Random(0)
        assert Binomial(10, 0.0).sample(rng) == 0
        assert Binomial(10, 1.0).sample(rng) == 10
        assert Binomial(0, 0.5).sample(rng) == 0

    def test_range(self):
        rng = random.Random(1)
        for p in [0.01, 0.3, 0.5, 0.7, 0.99]:
            for _ in range(100):
                assert 0 <= Binomial(25, p).sample(rng) <= 25

    @pytest.mark.parametrize("p", [0.05, 0.5, 0.8])
    def test_mean_and_variance(self, p):
        """Moments should match n*p and n*p*(1-p)."""
        n = 100
        rng = random.Random(42)
        xs = [Binomial(n, p).sample(rng) for _ in range(5000)]
        mean = sum(xs) / len(xs)
        var = sum((x - mean) ** 2 for x in xs) / (len(xs) - 1)

        expected_var = n * p * (1 - p)
        assert abs(mean - n * p) < 6 * math.sqrt(expected_var / len(xs))
        assert abs(var - expected_var) < 0.15 * expected_var

    def test_tiny_probability(self):
        """Vanishingly small p should not overflow."""
        rng = random.Random(2)
        assert Binomial(10**6, 1e-320).sample(rng) == 0

    def test_huge_trials(self):
        """Large means sample in bounded time and land near the mean."""
        n, p = 10**12, 0.4
        rng = random.Random(4)
        sd = math.sqrt(n * p * (1 - p))
        for _ in range(20):
            x = Binomial(n, p).sample(rng)
            assert 0 <= x <= n
            assert abs(x - n * p) < 8 * sd

    def test_large_mean_moments(self):
        """Moments for a mean well above the waiting-time threshold."""
        n, p = 1000, 0.3
        rng = PRG(b"test_seed_bytes_1234567890123456")
        xs = [Binomial(n, p).sample(rng) for _ in range(4000)]
        mean = sum(xs) / len(xs)
        var = sum((x - mean) ** 2 for x in xs) / (len(xs) - 1)

        expected_var = n * p * (1 - p)
        assert abs(mean - n * p) < 6 * math.sqrt(expected_var / len(xs))
        assert abs(var - expected_var) < 0.15 * expected_var

    def test_threshold_boundary(self):
        """Means just below and above the switch both stay in range."""
        rng = random.Random(5)
        for trials in [19, 20, 21]:
            for _ in range(200):
                assert 0 <= Binomial(trials, 0.5).sample(rng) <= trials

    def test_satisfies_distribution_protocol(self):
        assert isinstance(Binomial(3, 0.5), Distribution)

    def test_deterministic_with_prg(self):
        seed = b"test_seed_bytes_1234567890123456"
        b = Binomial(100, 0.4)
        assert b.sample(PRG(seed)) == b.sample(PRG(seed))

    def test_sample_iter(self):
        rng = random.Random(3)
        draws = [x for _, x in zip(range(20), Binomial(5, 0.5).sample_iter(rng))]
        assert len(draws) == 20
        assert all(0 <= x <= 5 for x in draws)

    def test_properties(self):
        b = Binomial(12, 0.25)
        assert b.trials == 12
        assert b.p == 0.25


class TestBinomialErrors:
    """Test error handling."""

    def test_invalid_probability(self):
        for p in [-0.1, 1.1, math.nan, math.inf]:
            with pytest.raises(BinomialError):
                Binomial(10, p)

    def test_invalid_trials(self):
        with pytest.raises(ValueError):
            Binomial(-1, 0.5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
