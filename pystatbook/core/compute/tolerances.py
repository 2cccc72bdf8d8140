"""
Numerical tolerances shared across the engine.

Teaching data are small (n <= a few hundred) and well scaled, so a single
double-precision tier suffices. The constants below are the only
"configuration" the engine has; everything else is a keyword argument.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference comparisons against scipy / numpy.linalg in the test suite
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='double precision, matches scipy reference',
)

# Sum-of-squares identities (SS_total = SS_between + SS_within, ...)
SS_IDENTITY = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='ss_identity',
    description='variance decomposition identities',
)

# Contrast weights must sum to zero within this absolute tolerance.
CONTRAST_SUM_TOL = 1e-9

# Two contrasts are orthogonal when |dot product| is below this.
ORTHOGONALITY_TOL = 1e-9

# Design matrices with cond(X) above this are treated as singular.
# cond(X) = 1e10 means cond(X'X) = 1e20, beyond float64 resolution.
CONDITION_THRESHOLD = 1e10

# Box-Muller floor for u1 so that log(u1) stays finite.
MIN_UNIFORM = 1e-10

# f_pdf evaluates here instead of at x = 0 when df1 < 2 (divergent density).
F_PDF_MIN_X = 1e-8
