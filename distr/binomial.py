"""
Binomial distribution.

Default BinomialSampler used by the multinomial sampler. Any object
satisfying distr.protocols.BinomialSampler can replace it.
"""

import math
from collections.abc import Iterator

from .protocols import RandomSource

# Means at or above this use BTPE, smaller ones the waiting-time method.
BTPE_THRESHOLD = 10.0


class BinomialError(ValueError):
    """Raised when Binomial parameters are out of range."""


class Binomial:
    """
    Binomial(trials, p): number of successes in `trials` independent
    Bernoulli(p) experiments.
    """

    def __init__(self, trials: int, p: float):
        """
        Initialize Binomial.

        Args:
            trials: Number of trials (non-negative)
            p: Success probability in [0, 1]
        """
        if trials < 0:
            raise BinomialError("trials must be non-negative")
        # Written so that NaN fails the check
        if not 0.0 <= p <= 1.0:
            raise BinomialError(f"probability {p} not in [0, 1]")

        self._trials = trials
        self._p = p

    @property
    def trials(self) -> int:
        """Number of trials."""
        return self._trials

    @property
    def p(self) -> float:
        """Success probability."""
        return self._p

    def sample(self, rng: RandomSource) -> int:
        """
        Draw the number of successes.

        Args:
            rng: Source of uniform randomness

        Returns:
            Integer in [0, trials]
        """
        if self._trials == 0 or self._p == 0.0:
            return 0
        if self._p == 1.0:
            return self._trials

        # Both algorithms below expect p <= 0.5; count failures otherwise.
        p = min(self._p, 1.0 - self._p)
        if self._trials * p < BTPE_THRESHOLD:
            x = _waiting_time(self._trials, p, rng)
        else:
            x = _btpe(self._trials, p, rng)
        return self._trials - x if self._p > 0.5 else x

    def sample_iter(self, rng: RandomSource) -> Iterator[int]:
        """Endless stream of independent samples."""
        while True:
            yield self.sample(rng)

    def __repr__(self) -> str:
        return f"Binomial(trials={self._trials}, p={self._p})"


def _waiting_time(trials: int, p: float, rng: RandomSource) -> int:
    """
    Sample Binomial(trials, p) by summing geometric gaps between successes.

    Expected cost is trials * p + 1 uniforms, so it is only used for small
    means.
    """
    log_q = math.log1p(-p)
    successes = 0
    position = 0
    while True:
        # 1 - random() lies in (0, 1], so the log is finite
        u = 1.0 - rng.random()
        # Next success lands at position + floor(gap) + 1; gap may be inf
        # for vanishingly small p.
        gap = math.log(u) / log_q
        if gap >= trials - position:
            return successes
        position += int(gap) + 1
        successes += 1


def _btpe(trials: int, p: float, rng: RandomSource) -> int:
    """
    Sample Binomial(trials, p) with BTPE (Kachitvichyanukul & Schmeiser,
    "Binomial random variate generation", 1988).

    Requires p <= 0.5 and trials * p >= BTPE_THRESHOLD. Expected number of
    uniforms is bounded independently of trials.
    """
    n = trials
    r = p
    q = 1.0 - r
    nrq = n * r * q
    fm = n * r + r
    m = math.floor(fm)
    p1 = math.floor(2.195 * math.sqrt(nrq) - 4.6 * q) + 0.5
    xm = m + 0.5
    xl = xm - p1
    xr = xm + p1
    c = 0.134 + 20.5 / (15.3 + m)
    a = (fm - xl) / (fm - xl * r)
    lam_l = a * (1.0 + a / 2.0)
    a = (xr - fm) / (xr * q)
    lam_r = a * (1.0 + a / 2.0)
    p2 = p1 * (1.0 + 2.0 * c)
    p3 = p2 + c / lam_l
    p4 = p3 + c / lam_r

    while True:
        u = rng.random() * p4
        # v lies in (0, 1], so every log(v) below is finite
        v = 1.0 - rng.random()

        # Triangular region: accept immediately
        if u <= p1:
            return math.floor(xm - p1 * v + u)

        if u <= p2:
            # Parallelograms
            x = xl + (u - p1) / c
            v = v * c + 1.0 - abs(m - x + 0.5) / p1
            if v > 1.0:
                continue
            y = math.floor(x)
        elif u <= p3:
            # Left exponential tail
            y = math.floor(xl + math.log(v) / lam_l)
            if y < 0:
                continue
            v = v * (u - p2) * lam_l
        else:
            # Right exponential tail
            y = math.floor(xr - math.log(v) / lam_r)
            if y > n:
                continue
            v = v * (u - p3) * lam_r

        k = abs(y - m)
        if k <= 20 or k >= nrq / 2.0 - 1:
            # Explicit evaluation of f(y) / f(m)
            s = r / q
            a = s * (n + 1)
            f = 1.0
            if m < y:
                for i in range(m + 1, y + 1):
                    f *= a / i - s
            elif m > y:
                for i in range(y + 1, m + 1):
                    f /= a / i - s
            if v <= f:
                return y
            continue

        # Squeeze on log(f(y) / f(m))
        rho = (k / nrq) * ((k * (k / 3.0 + 0.625) + 1.0 / 6.0) / nrq + 0.5)
        t = -k * k / (2.0 * nrq)
        log_v = math.log(v)
        if log_v < t - rho:
            return y
        if log_v > t + rho:
            continue

        # Final acceptance test with Stirling corrections
        x1 = y + 1
        f1 = m + 1
        z = n + 1 - m
        w = n - y + 1
        bound = (
            xm * math.log(f1 / x1)
            + (n - m + 0.5) * math.log(z / w)
            + (y - m) * math.log(w * r / (x1 * q))
            + _stirling(f1)
            + _stirling(z)
            + _stirling(x1)
            + _stirling(w)
        )
        if log_v <= bound:
            return y


def _stirling(x: float) -> float:
    """Stirling series correction term used by the BTPE final test."""
    x2 = float(x) * x
    return (13680.0 - (462.0 - (132.0 - (99.0 - 140.0 / x2) / x2) / x2) / x2) / x / 166320.0
