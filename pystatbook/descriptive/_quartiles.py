"""
Order-statistic helpers: Tukey hinges and the median absolute deviation.

Hinges are the medians of the lower and upper halves of the sorted data,
the middle value excluded when n is odd. For n = 1 both halves are empty
and the hinges collapse to the single value.
"""

import numpy as np
from numpy.typing import NDArray


def _median_sorted(x: NDArray) -> float:
    n = len(x)
    if n == 0:
        return float('nan')
    mid = n // 2
    if n % 2 == 0:
        return float((x[mid - 1] + x[mid]) / 2.0)
    return float(x[mid])


def tukey_hinges(x: NDArray) -> tuple[float, float, float]:
    """
    Return (lower hinge, median, upper hinge) of an unsorted sample.
    """
    xs = np.sort(x)
    n = len(xs)
    median = _median_sorted(xs)
    if n == 1:
        return median, median, median
    lower = xs[: n // 2]
    upper = xs[(n + 1) // 2:]
    return _median_sorted(lower), median, _median_sorted(upper)


def mad_raw(x: NDArray) -> float:
    """Unscaled median absolute deviation about the median."""
    if len(x) == 0:
        return float('nan')
    med = _median_sorted(np.sort(x))
    return _median_sorted(np.sort(np.abs(x - med)))
