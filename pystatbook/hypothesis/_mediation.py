"""
Sobel test of an indirect effect a*b.

    SE(ab) = sqrt(a^2 SE_b^2 + b^2 SE_a^2),  z = ab / SE(ab)

The normal reference distribution is exactly what the product-of-
coefficients simulation in montecarlo shows to be wrong in small samples.
"""

import math

import numpy as np
from scipy import stats as sp_stats

from pystatbook.core.result import Result
from pystatbook.hypothesis._common import HTestParams


def sobel(a: float, b: float, se_a: float, se_b: float, conf_level: float) -> Result[HTestParams]:
    ab = a * b
    se = math.sqrt(a * a * se_b * se_b + b * b * se_a * se_a)
    warnings_list = []

    if se > 0:
        z = ab / se
        p_value = float(2.0 * sp_stats.norm.sf(abs(z)))
        z_crit = float(sp_stats.norm.isf((1.0 - conf_level) / 2.0))
        conf_int = (ab - z_crit * se, ab + z_crit * se)
    else:
        warnings_list.append("Standard error of a*b is zero; Sobel z is undefined")
        z = p_value = float('nan')
        conf_int = (float('nan'), float('nan'))

    params = HTestParams(
        statistic=z,
        statistic_name="z",
        parameter=None,
        p_value=p_value,
        conf_int=np.array(conf_int),
        conf_level=conf_level,
        estimate={"indirect effect": ab},
        null_value={"indirect effect": 0.0},
        alternative="two.sided",
        method="Sobel test of the indirect effect",
        data_name=f"a = {a:.4g} (SE {se_a:.4g}), b = {b:.4g} (SE {se_b:.4g})",
        std_error=se,
        extras={"a": a, "b": b, "se_a": se_a, "se_b": se_b},
    )
    return Result(
        params=params,
        info={},
        timing=None,
        method="sobel",
        warnings=tuple(warnings_list),
    )
