"""
Power and sample size for the two-group comparison of means.

Normal approximation with equal group sizes n:

    ncp   = d sqrt(n / 2)
    power = P(Z > z_crit - ncp) [+ P(Z < -z_crit - ncp) when two-tailed]
    n     = ceil(2 ((z_crit + z_power) / d)^2)

where z_crit = Phi^-1(1 - alpha / tails).
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_probability


def _check_tails(tails: int) -> int:
    if tails not in (1, 2):
        raise ValidationError(f"tails: must be 1 or 2, got {tails}")
    return tails


def calculate_power(
    effect_size: float,
    n_per_group: float,
    alpha: float = 0.05,
    tails: int = 2,
) -> float:
    """
    Power of a two-sample test of a standardized difference d.

    Args:
        effect_size: Cohen's d (sign matters only for one-tailed tests)
        n_per_group: Observations per group
        alpha: Significance level
        tails: 1 or 2

    Returns:
        Probability of rejecting H0; alpha when effect_size == 0
        (two-tailed) and 0 when n_per_group <= 0.
    """
    alpha = check_probability(alpha, "alpha")
    tails = _check_tails(tails)
    if n_per_group <= 0:
        return 0.0

    ncp = effect_size * math.sqrt(n_per_group / 2.0)
    z_crit = sp_stats.norm.isf(alpha / tails)
    power = sp_stats.norm.sf(z_crit - ncp)
    if tails == 2:
        power += sp_stats.norm.cdf(-z_crit - ncp)
    return float(power)


def required_sample_size(
    effect_size: float,
    power: float = 0.80,
    alpha: float = 0.05,
    tails: int = 2,
) -> int:
    """
    Smallest per-group n whose approximate power reaches the target.

    The lower tail's (negligible) contribution is ignored, matching the
    textbook formula 2 (z_{1-alpha/2} + z_{power})^2 / d^2.

    Raises:
        ValidationError: If effect_size is 0 (no finite n suffices)
    """
    power = check_probability(power, "power")
    alpha = check_probability(alpha, "alpha")
    tails = _check_tails(tails)
    if effect_size == 0 or not math.isfinite(effect_size):
        raise ValidationError(
            f"effect_size: must be finite and non-zero, got {effect_size}"
        )

    z_crit = sp_stats.norm.isf(alpha / tails)
    z_power = sp_stats.norm.ppf(power)
    n = 2.0 * ((z_crit + z_power) / abs(effect_size)) ** 2
    # guard against 63.0000000001 from floating point
    return int(math.ceil(n - 1e-9))
