"""
Exact crossing probability of repeated two-sided tests under H0.

Recursive numerical integration (Armitage, McPherson & Rowe, 1969). With
equal information per look, the cumulative sum S_k of k standard-normal
stage increments has Z_k = S_k / sqrt(k), so look k rejects when
|S_k| > b_k = c_k sqrt(k) with c_k = Phi^-1(1 - p_k / 2).

    P(reject at 1)   = p_1
    f_1(s)           = phi(s)                          on |s| < b_1
    P(reject at k)   = int f_{k-1}(u) [Q(b_k - u) + Q(b_k + u)] du
    f_k(s)           = int f_{k-1}(u) phi(s - u) du    on |s| < b_k

where Q is the standard normal upper tail and f_k is the sub-density of
paths that have not yet rejected. Integrals use Simpson's rule.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

# Simpson's rule needs an odd number of nodes.
DEFAULT_GRID_SIZE = 1001


def _simpson_weights(lo: float, hi: float, m: int) -> tuple[NDArray, NDArray]:
    nodes = np.linspace(lo, hi, m)
    h = (hi - lo) / (m - 1)
    w = np.ones(m)
    w[1:-1:2] = 4.0
    w[2:-1:2] = 2.0
    return nodes, w * h / 3.0


def crossing_probabilities(
    thresholds: Sequence[float],
    grid_size: int = DEFAULT_GRID_SIZE,
) -> NDArray:
    """
    Probability of first rejecting at each look when H0 is true.

    Args:
        thresholds: Two-sided nominal p threshold per look, each in (0, 1)
        grid_size: Odd number of integration nodes per look

    Returns:
        Array of per-look first-crossing probabilities; their sum is the
        overall Type I error.
    """
    p = np.asarray(thresholds, dtype=np.float64)
    k = np.arange(1, p.size + 1)
    bounds = sp_stats.norm.isf(p / 2.0) * np.sqrt(k)

    probs = np.empty(p.size)
    probs[0] = 2.0 * sp_stats.norm.sf(bounds[0])
    if p.size == 1:
        return probs

    nodes, weights = _simpson_weights(-bounds[0], bounds[0], grid_size)
    density = sp_stats.norm.pdf(nodes)

    for j in range(1, p.size):
        mass = weights * density
        b = bounds[j]
        tails = sp_stats.norm.sf(b - nodes) + sp_stats.norm.sf(b + nodes)
        probs[j] = float(mass @ tails)

        if j < p.size - 1:
            new_nodes, new_weights = _simpson_weights(-b, b, grid_size)
            kernel = sp_stats.norm.pdf(new_nodes[:, None] - nodes[None, :])
            density = kernel @ mass
            nodes, weights = new_nodes, new_weights

    return probs
