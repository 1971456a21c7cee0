"""
Random source utilities.

Includes:
- PRG (Pseudorandom Generator) for deterministic, reproducible sampling
- derive_seed for key derivation
- make_rng for building a PRG from an optional integer seed
"""

import hashlib
import secrets


def derive_seed(key: bytes, label: bytes) -> bytes:
    """
    Derive a deterministic seed from key and label using SHAKE-256.

    Returns 32 bytes suitable for seeding a PRG.
    """
    return hashlib.shake_256(key + label).digest(32)


class PRG:
    """
    Pseudorandom Number Generator using SHAKE-256 in counter mode.

    OPT: Could use a faster PRG (e.g., AES-CTR).

    Deterministic: same seed produces same sequence.
    Each call to random_bytes() produces output based on the seed
    and an internal counter.

    Satisfies the RandomSource protocol.
    """

    def __init__(self, seed: bytes):
        """
        Initialize with a seed.

        Args:
            seed: Seed bytes (typically 32 bytes from derive_seed)
        """
        if not seed:
            raise ValueError("seed must be non-empty")
        self._seed = seed
        self._counter = 0

    def random_bytes(self, n: int) -> bytes:
        """Get n random bytes."""
        data = hashlib.shake_256(
            self._seed + self._counter.to_bytes(8, "little")
        ).digest(n)
        self._counter += 1
        return data

    def random(self) -> float:
        """Get a random float in [0, 1) with 53 bits of precision."""
        return (int.from_bytes(self.random_bytes(8), "little") >> 11) / (2**53)


def make_rng(seed: int | None = None) -> PRG:
    """
    Create a PRG for a sampling run.

    Args:
        seed: Non-negative integer for a reproducible stream, or None to
              draw a fresh key from OS entropy

    Returns:
        A seeded PRG
    """
    if seed is None:
        key = secrets.token_bytes(32)
    else:
        if seed < 0:
            raise ValueError("seed must be non-negative")
        key = seed.to_bytes((seed.bit_length() + 7) // 8 or 1, "little")
    return PRG(derive_seed(key, b"distr:rng"))
