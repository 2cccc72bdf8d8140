"""
Percentile confidence interval from replicates.

CI = [Q(alpha/2), Q(1 - alpha/2)] with linear interpolation between order
statistics (numpy's 'linear' method), so the interval moves smoothly as
replicates arrive instead of jumping between order statistics.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pystatbook.core.validation import check_array, check_probability


def percentile_ci(values: ArrayLike, conf_level: float = 0.95) -> tuple[float, float]:
    """
    Percentile interval of the finite values.

    Returns:
        (lower, upper); (nan, nan) when there are no finite values
    """
    conf_level = check_probability(conf_level, "conf_level")
    arr = check_array(values, "values").ravel()
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return float('nan'), float('nan')

    alpha = 1.0 - conf_level
    lower, upper = np.quantile(arr, [alpha / 2.0, 1.0 - alpha / 2.0], method='linear')
    return float(lower), float(upper)
