"""
pystatbook: the numerical engine of an interactive statistics textbook.

Every stochastic routine draws from a seeded mulberry32 stream, so the
same seed reproduces the same figure, table and simulation on every run.

Submodules:
    rng: Seeded random number generation and data generators
    descriptive: Means, SDs, group statistics, sums of squares, quartiles
    distributions: Normal, t and F densities, CDFs and quantiles
    regression: Small OLS models (simple, two-predictor, moderated)
    hypothesis: Welch t, Sobel, spotlight and Johnson-Neyman tests
    anova: One-way, repeated-measures, factorial, mixed-design ANOVA, ANCOVA,
           planned contrasts
    montecarlo: Bootstrap of the indirect effect, product distribution
    sequential: Group-sequential designs and peeking simulations
    power: Effect sizes, power and sample size
    outliers: Outlier thresholds and screening
"""

__version__ = "0.1.0"

from pystatbook import rng
from pystatbook import descriptive
from pystatbook import distributions
from pystatbook import regression
from pystatbook import hypothesis
from pystatbook import anova
from pystatbook import montecarlo
from pystatbook import sequential
from pystatbook import power
from pystatbook import outliers

__all__ = [
    "__version__",
    "rng",
    "descriptive",
    "distributions",
    "regression",
    "hypothesis",
    "anova",
    "montecarlo",
    "sequential",
    "power",
    "outliers",
]
