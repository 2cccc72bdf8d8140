"""
Seeded uniform / normal stream.

mulberry32: a 32-bit state incremented by a Weyl constant and mixed with
two multiply-xorshift rounds. All arithmetic is done on Python ints masked
to 32 bits, so the stream is bit-identical to any other port of the same
algorithm (the lesson pages depend on this for reproducible "generate new
data" buttons).
"""

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.compute.tolerances import MIN_UNIFORM
from pystatbook.core.validation import check_seed

_MASK32 = 0xFFFFFFFF
_WEYL = 0x6D2B79F5
_TWO_32 = 4294967296.0
_TWO_PI = 2.0 * math.pi


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply (low 32 bits of the product)."""
    return (a * b) & _MASK32


class SeededRandom:
    """
    Deterministic pseudo-random generator.

    Holds its own state; nothing global is read or written. Two instances
    built from the same seed produce the same stream.

    Examples:
        >>> rng = SeededRandom(42)
        >>> u = rng.next()          # uniform in [0, 1)
        >>> z = rng.next_normal()   # standard normal (Box-Muller)
        >>> sample = rng.normal(30, mean=100.0, sd=15.0)
    """

    __slots__ = ('_seed', '_state')

    def __init__(self, seed: int):
        self._seed = check_seed(seed)
        self._state = self._seed & _MASK32

    @property
    def seed(self) -> int:
        """Seed this generator was created with."""
        return self._seed

    def next_uint32(self) -> int:
        """Advance the state and return the next 32-bit output."""
        self._state = (self._state + _WEYL) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return (t ^ (t >> 14)) & _MASK32

    def next(self) -> float:
        """Uniform deviate in [0, 1)."""
        return self.next_uint32() / _TWO_32

    def next_normal(self) -> float:
        """
        Standard-normal deviate via Box-Muller.

        Consumes two uniforms: z = sqrt(-2 ln u1) cos(2 pi u2), with u1
        floored at MIN_UNIFORM so ln(u1) is finite.
        """
        u1 = self.next()
        u2 = self.next()
        if u1 < MIN_UNIFORM:
            u1 = MIN_UNIFORM
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(_TWO_PI * u2)

    def uniform(self, n: int) -> NDArray[np.floating[Any]]:
        """n uniform deviates in [0, 1)."""
        return np.array([self.next() for _ in range(n)], dtype=np.float64)

    def normal(
        self,
        n: int,
        mean: float = 0.0,
        sd: float = 1.0,
    ) -> NDArray[np.floating[Any]]:
        """n normal deviates, mean + sd * z."""
        z = np.array([self.next_normal() for _ in range(n)], dtype=np.float64)
        return mean + sd * z

    def integers(self, high: int, n: int) -> NDArray[np.intp]:
        """n integers in [0, high), floor(u * high)."""
        return np.array(
            [int(self.next() * high) for _ in range(n)], dtype=np.intp
        )

    def shuffle(self, values: Any) -> NDArray:
        """Fisher-Yates shuffle into a new array (input untouched)."""
        result = np.array(values, copy=True)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed})"
