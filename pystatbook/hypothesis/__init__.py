"""
Hypothesis tests.

Public API:
    welch_t_test(x, y)                          - Welch / pooled two-sample t
    sobel_test(a, b, se_a, se_b)                - indirect effect z test
    simple_effect_test(b, d, ..., x0, df)       - spotlight t test
    spotlight_test(model, x0)                   - spotlight from a moderated fit
    johnson_neyman(b, d, ..., df, alpha)        - regions of significance
    johnson_neyman_from_model(model, alpha)
    marginal_effect_band(b, d, ..., x_values)   - CI band of the simple effect

One-way and repeated-measures ANOVA live in pystatbook.anova.
"""

from pystatbook.hypothesis._common import (
    HTestParams,
    JohnsonNeymanParams,
    JohnsonNeymanBoundary,
    SignificanceRegion,
    MarginalEffectBand,
)
from pystatbook.hypothesis.solution import HTestSolution, JohnsonNeymanSolution
from pystatbook.hypothesis.solvers import (
    welch_t_test,
    sobel_test,
    simple_effect_test,
    spotlight_test,
    johnson_neyman,
    johnson_neyman_from_model,
    marginal_effect_band,
)

__all__ = [
    "welch_t_test",
    "sobel_test",
    "simple_effect_test",
    "spotlight_test",
    "johnson_neyman",
    "johnson_neyman_from_model",
    "marginal_effect_band",
    "HTestParams",
    "HTestSolution",
    "JohnsonNeymanParams",
    "JohnsonNeymanBoundary",
    "JohnsonNeymanSolution",
    "SignificanceRegion",
    "MarginalEffectBand",
]
