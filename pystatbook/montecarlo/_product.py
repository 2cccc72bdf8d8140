"""
Monte Carlo distribution of a product of two normal estimates.
"""

from __future__ import annotations

import numpy as np
from scipy import stats as sp_stats

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.montecarlo._common import ProductSimParams
from pystatbook.montecarlo._replicates import ReplicateSet
from pystatbook.rng import SeededRandom


def product_distribution(
    a: float,
    b: float,
    se_a: float,
    se_b: float,
    n_simulations: int,
    seed: int,
) -> Result[ProductSimParams]:
    timer = Timer()
    timer.start()

    rng = SeededRandom(seed)
    products = np.empty(n_simulations, dtype=np.float64)
    for i in range(n_simulations):
        a_hat = a + se_a * rng.next_normal()
        b_hat = b + se_b * rng.next_normal()
        products[i] = a_hat * b_hat

    warnings_list = []
    if n_simulations > 2 and np.ptp(products) > 0:
        skewness = float(sp_stats.skew(products))
    else:
        skewness = float('nan')
        warnings_list.append("Too few distinct products to estimate skewness")

    timer.stop()

    params = ProductSimParams(
        a=a,
        b=b,
        se_a=se_a,
        se_b=se_b,
        products=ReplicateSet.from_values(products),
        skewness=skewness,
        seed=seed,
    )
    return Result(
        params=params,
        info={'n_simulations': n_simulations, 'seed': seed},
        timing=timer.result(),
        method='product_simulation',
        warnings=tuple(warnings_list),
    )
