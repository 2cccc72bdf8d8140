"""
Fixed-count histogram binning.

Bins are [left, right) except the last, which also includes its right
edge. Values outside [lower, upper] and non-finite values are not counted.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_array, check_positive_int
from pystatbook.montecarlo._common import HistogramBin


def histogram_bins(
    values: ArrayLike,
    n_bins: int,
    lower: float | None = None,
    upper: float | None = None,
) -> tuple[HistogramBin, ...]:
    """
    Count values into n_bins equal-width bins.

    Args:
        values: Data (nan / inf ignored)
        n_bins: Number of bins
        lower: Left edge; data minimum when None
        upper: Right edge; data maximum when None

    Returns:
        Tuple of HistogramBin. Empty when the range must come from the
        data and there is none. With a single distinct value, each edge
        taken from the data is widened by 0.5.

    Raises:
        ValidationError: If an explicit range has lower >= upper
    """
    n_bins = check_positive_int(n_bins, "n_bins")
    arr = check_array(values, "values").ravel()
    arr = arr[np.isfinite(arr)]

    if lower is None or upper is None:
        if arr.size == 0:
            return ()
        data_lo = float(arr.min())
        data_hi = float(arr.max())
        if data_lo == data_hi:
            data_lo -= 0.5
            data_hi += 0.5
        lower = data_lo if lower is None else float(lower)
        upper = data_hi if upper is None else float(upper)

    lower = float(lower)
    upper = float(upper)
    if not (math.isfinite(lower) and math.isfinite(upper)) or lower >= upper:
        raise ValidationError(
            f"histogram range: need finite lower < upper, got [{lower}, {upper}]"
        )

    width = (upper - lower) / n_bins
    inside = arr[(arr >= lower) & (arr <= upper)]
    idx = np.floor((inside - lower) / width).astype(np.intp)
    idx = np.clip(idx, 0, n_bins - 1)
    counts = np.bincount(idx, minlength=n_bins)

    return tuple(
        HistogramBin(
            left=lower + i * width,
            right=upper if i == n_bins - 1 else lower + (i + 1) * width,
            count=int(counts[i]),
        )
        for i in range(n_bins)
    )
