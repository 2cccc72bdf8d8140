"""
Distribution functions used throughout the lessons.

Normal, Student's t and F densities, distribution functions, p-values and
critical values. All accept scalars or arrays.
"""

from pystatbook.distributions.functions import (
    normal_pdf,
    normal_cdf,
    normal_quantile,
    standard_error,
    sampling_distribution_pdf,
    t_pdf,
    t_cdf,
    t_p_value,
    t_critical,
    f_pdf,
    f_cdf,
    f_p_value,
    f_critical,
)

__all__ = [
    "normal_pdf",
    "normal_cdf",
    "normal_quantile",
    "standard_error",
    "sampling_distribution_pdf",
    "t_pdf",
    "t_cdf",
    "t_p_value",
    "t_critical",
    "f_pdf",
    "f_cdf",
    "f_p_value",
    "f_critical",
]
