"""
Nonparametric bootstrap of the indirect effect a*b.

Each replicate resamples n (x, m, y) triples with replacement, refits
    M ~ X        -> a* (slope of x)
    Y ~ X + M    -> b* (slope of m)
and records a* b*. A resample whose design is singular (for instance every
drawn x identical) is recorded as nan and counted in n_failed.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.compute.timing import Timer
from pystatbook.core.exceptions import SingularMatrixError
from pystatbook.core.result import Result
from pystatbook.montecarlo._common import IndirectBootParams
from pystatbook.montecarlo._replicates import ReplicateSet
from pystatbook.regression import fit_simple, fit_two_predictor
from pystatbook.rng import SeededRandom


def indirect_effect(x: NDArray, m: NDArray, y: NDArray) -> tuple[float, float]:
    """(a, b) from the mediator and outcome regressions."""
    a = fit_simple(m, x).coef('x')
    b = fit_two_predictor(y, x, m).coef('x2')
    return a, b


def bootstrap_indirect(
    x: NDArray,
    m: NDArray,
    y: NDArray,
    n_replicates: int,
    seed: int,
) -> Result[IndirectBootParams]:
    timer = Timer()
    timer.start()

    with timer.section('observed'):
        a, b = indirect_effect(x, m, y)

    n = x.size
    rng = SeededRandom(seed)
    replicates = np.empty(n_replicates, dtype=np.float64)

    with timer.section('replicates'):
        for r in range(n_replicates):
            idx = rng.integers(n, n)
            try:
                a_r, b_r = indirect_effect(x[idx], m[idx], y[idx])
                replicates[r] = a_r * b_r
            except SingularMatrixError:
                replicates[r] = np.nan

    n_failed = int(np.sum(np.isnan(replicates)))
    warnings_list = []
    if n_failed:
        msg = (
            f"{n_failed} of {n_replicates} bootstrap resamples had a singular "
            f"design and were recorded as nan"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=3)

    timer.stop()

    params = IndirectBootParams(
        a=a,
        b=b,
        ab=a * b,
        replicates=ReplicateSet.from_values(replicates),
        n_failed=n_failed,
        seed=seed,
    )
    return Result(
        params=params,
        info={'n': n, 'n_replicates': n_replicates, 'seed': seed},
        timing=timer.result(),
        method='bootstrap_indirect',
        warnings=tuple(warnings_list),
    )
