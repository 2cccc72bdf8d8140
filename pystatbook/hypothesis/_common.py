"""
Common types for hypothesis testing.

HTestParams follows R's htest structure, so every test (Welch, Sobel,
spotlight) shares one solution type. The Johnson-Neyman solver has its own
payload because it returns boundaries rather than a single statistic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Attributes
    ----------
    statistic : float
        Test statistic value (nan when undefined).
    statistic_name : str
        "t" or "z".
    parameter : dict or None
        Distribution parameters, e.g. {"df": 17.4}. None for z tests.
    p_value : float
        p-value of the test.
    conf_int : ndarray or None
        Confidence interval for the estimate, shape (2,).
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    alternative : str
        "two.sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data.
    std_error : float
        Standard error of the tested quantity.
    extras : dict or None
        Test-specific additional outputs.
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    conf_int: NDArray[np.floating[Any]] | None
    conf_level: float
    estimate: dict[str, float]
    null_value: dict[str, float] | None
    alternative: str
    method: str
    data_name: str
    std_error: float
    extras: dict[str, Any] | None = None


@dataclass(frozen=True)
class SignificanceRegion:
    """Interval of the moderator over which the simple effect is (not) significant."""
    lower: float
    upper: float
    significant: bool

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper


@dataclass(frozen=True)
class JohnsonNeymanBoundary:
    """
    A moderator value where the simple effect's CI touches zero.

    significant_side is 'below', 'above', 'both' or 'neither': the side(s)
    of the boundary on which the simple effect is significant.
    """
    value: float
    significant_side: str


@dataclass(frozen=True)
class JohnsonNeymanParams:
    """
    Solution of (b + d x)^2 = t_crit^2 Var(b + d x).

    The quadratic A x^2 + B x + C is positive exactly where the simple
    effect is significant.
    """
    boundaries: tuple[JohnsonNeymanBoundary, ...]
    regions: tuple[SignificanceRegion, ...]
    quadratic: tuple[float, float, float]
    t_critical: float
    alpha: float
    df: float
    b: float
    d: float


@dataclass(frozen=True)
class MarginalEffectBand:
    """
    Simple effect b + d x with its pointwise confidence band.

    All arrays are aligned with x.
    """
    x: NDArray[np.floating[Any]]
    effect: NDArray[np.floating[Any]]
    std_error: NDArray[np.floating[Any]]
    lower: NDArray[np.floating[Any]]
    upper: NDArray[np.floating[Any]]
    conf_level: float
