"""
ANOVA and planned contrasts.

Public API:
    anova_oneway(groups)                    - one-way ANOVA
    anova_rm(data)                          - repeated-measures ANOVA
    anova_factorial(cells, factor_names)    - two-way between-subjects ANOVA
    anova_mixed(groups, factor_names)       - between x within ANOVA
    ancova(groups, covariates)              - one-way ANCOVA, adjusted means
    compute_contrast(weights, means)        - psi estimate
    validate_contrast_weights(weights)      - sum and validity flag
    contrast_f_test(weights, means, n, ms_within, df_within)
    are_contrasts_orthogonal(w1, w2, ns)    - (dot_product, is_orthogonal)
"""

from pystatbook.anova._common import (
    AnovaTableRow,
    AnovaParams,
    AnovaRMParams,
    FactorialParams,
    AnovaMixedParams,
    AncovaParams,
    ContrastValidation,
    ContrastTest,
    OrthogonalityCheck,
)
from pystatbook.anova._contrasts import (
    compute_contrast,
    validate_contrast_weights,
    contrast_f_test,
    are_contrasts_orthogonal,
)
from pystatbook.anova.solution import (
    AnovaSolution,
    AnovaRMSolution,
    AnovaFactorialSolution,
    AnovaMixedSolution,
    AncovaSolution,
)
from pystatbook.anova.solvers import (
    anova_oneway,
    anova_rm,
    anova_factorial,
    anova_mixed,
    ancova,
)

__all__ = [
    "anova_oneway",
    "anova_rm",
    "anova_factorial",
    "anova_mixed",
    "ancova",
    "compute_contrast",
    "validate_contrast_weights",
    "contrast_f_test",
    "are_contrasts_orthogonal",
    "AnovaSolution",
    "AnovaRMSolution",
    "AnovaFactorialSolution",
    "AnovaMixedSolution",
    "AncovaSolution",
    "AnovaTableRow",
    "AnovaParams",
    "AnovaRMParams",
    "FactorialParams",
    "AnovaMixedParams",
    "AncovaParams",
    "ContrastValidation",
    "ContrastTest",
    "OrthogonalityCheck",
]
