"""Tests for sampling run parameters and the package factory."""

import pytest
import distr
from distr.multinomial import ErrorKind, Multinomial, MultinomialError
from distr.params import Params


class TestParams:
    """Tests for Params."""

    def test_defaults(self):
        params = Params(n=10, weights=(1, 2, 3))
        assert params.num_samples == 1
        assert params.seed is None
        assert params.weights == (1.0, 2.0, 3.0)
        assert params.num_categories == 3

    def test_build(self):
        params = Params(n=10, weights=(2.0, 2.0))
        assert params.build() == Multinomial(10, [0.5, 0.5])

    def test_build_rejects_bad_weights(self):
        params = Params(n=10, weights=(0.0, 0.0))
        with pytest.raises(MultinomialError) as exc:
            params.build()
        assert exc.value.kind is ErrorKind.ALL_ZERO

    def test_seeded_run_is_reproducible(self):
        params = Params(n=100, weights=(0.3, 0.3, 0.4), seed=11)
        dist = params.build()
        assert dist.sample(params.rng()) == dist.sample(params.rng())

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            Params(n=-1, weights=(1.0,))
        with pytest.raises(ValueError):
            Params(n=1, weights=())
        with pytest.raises(ValueError):
            Params(n=1, weights=(1.0,), num_samples=0)
        with pytest.raises(ValueError):
            Params(n=1, weights=(1.0,), seed=-3)


class TestCreateMultinomial:
    """Tests for the package-level factory."""

    def test_create(self):
        dist = distr.create_multinomial(5, [1.0, 3.0])
        assert dist.weights == (0.25, 0.75)
        assert dist.n == 5

    def test_custom_binomial(self):
        calls = []

        def factory(trials, p):
            calls.append((trials, p))
            return distr.Binomial(trials, p)

        dist = distr.create_multinomial(5, [1.0, 1.0], binomial=factory)
        dist.sample(distr.make_rng(1))
        assert calls == [(5, 0.5)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
