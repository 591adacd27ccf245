"""
Alea pseudorandom generator used for reproducible landscapes.

Based on Johannes Baagøe's Alea algorithm. A single generator is threaded
through every call that consumes randomness, so a seed fully determines the
terrain and the silhouette jitter.
"""

from typing import Protocol


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Alea PRNG seeded from a string, an int or an iterable of either.

    Two instances built from the same seed produce the same stream.
    """

    def __init__(self, seed):
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def __repr__(self) -> str:
        return f"AleaPRNG(seed={self.seed!r}, calls={self.call_count})"
