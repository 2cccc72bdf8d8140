"""
Resampling and simulation entry points.

Long runs are requested in bounded batches: call again with another seed
and merge the replicate sets.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import (
    check_sample,
    check_consistent_length,
    check_positive_int,
    check_seed,
)
from pystatbook.montecarlo._bootstrap import bootstrap_indirect
from pystatbook.montecarlo._product import product_distribution
from pystatbook.montecarlo.solution import IndirectBootSolution, ProductSimSolution


def bootstrap_indirect_effect(
    x: ArrayLike,
    m: ArrayLike,
    y: ArrayLike,
    n_replicates: int,
    seed: int,
) -> IndirectBootSolution:
    """
    Bootstrap the indirect effect a*b of X on Y through M.

    Args:
        x: Predictor
        m: Mediator
        y: Outcome
        n_replicates: Size of this batch
        seed: PRNG seed for this batch

    Returns:
        IndirectBootSolution. Resamples with a singular design are nan
        replicates and are reported in warnings.

    Raises:
        ValidationError: If fewer than 4 observations are given
        DimensionError: If x, m and y differ in length
        SingularMatrixError: If the original data's design is singular
    """
    x_arr = check_sample(x, "x")
    m_arr = check_sample(m, "m")
    y_arr = check_sample(y, "y")
    check_consistent_length(x_arr, m_arr, y_arr, names=("x", "m", "y"))
    if x_arr.size < 4:
        raise ValidationError(
            f"bootstrap_indirect_effect: needs at least 4 observations, got {x_arr.size}"
        )
    n_replicates = check_positive_int(n_replicates, "n_replicates")
    seed = check_seed(seed)
    return IndirectBootSolution(
        _result=bootstrap_indirect(x_arr, m_arr, y_arr, n_replicates, seed)
    )


def simulate_product_distribution(
    a: float,
    b: float,
    se_a: float,
    se_b: float,
    n_simulations: int,
    seed: int,
) -> ProductSimSolution:
    """
    Simulate a_hat * b_hat with a_hat ~ N(a, se_a), b_hat ~ N(b, se_b).

    The result is visibly skewed for small a/se_a or b/se_b, which is the
    normality assumption the Sobel test gets wrong.
    """
    if se_a < 0 or se_b < 0:
        raise ValidationError(f"standard errors must be non-negative, got {se_a}, {se_b}")
    n_simulations = check_positive_int(n_simulations, "n_simulations")
    seed = check_seed(seed)
    return ProductSimSolution(
        _result=product_distribution(
            float(a), float(b), float(se_a), float(se_b), n_simulations, seed,
        )
    )
