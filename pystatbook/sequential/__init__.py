"""
Group-sequential testing.

Public API:
    POCOCK_THRESHOLDS, OBRIEN_FLEMING_THRESHOLDS
    pocock_thresholds(n_stages), obrien_fleming_thresholds(n_stages)
    get_thresholds(n_stages, kind)
    simulate_sequential_test(effect_size, n_per_stage, n_stages, thresholds, seed)
    simulate_sequential_trials(..., n_trials, seed)
    peeking_type1_error(n_looks, alpha)
    overall_alpha(thresholds)
"""

from pystatbook.sequential._common import SequentialTrial, SequentialSimParams
from pystatbook.sequential._thresholds import (
    POCOCK_THRESHOLDS,
    OBRIEN_FLEMING_THRESHOLDS,
    THRESHOLD_KINDS,
    pocock_thresholds,
    obrien_fleming_thresholds,
    get_thresholds,
)
from pystatbook.sequential.solution import SequentialSimSolution
from pystatbook.sequential.solvers import (
    simulate_sequential_test,
    simulate_sequential_trials,
    peeking_type1_error,
    overall_alpha,
)

__all__ = [
    "POCOCK_THRESHOLDS",
    "OBRIEN_FLEMING_THRESHOLDS",
    "THRESHOLD_KINDS",
    "pocock_thresholds",
    "obrien_fleming_thresholds",
    "get_thresholds",
    "simulate_sequential_test",
    "simulate_sequential_trials",
    "peeking_type1_error",
    "overall_alpha",
    "SequentialTrial",
    "SequentialSimParams",
    "SequentialSimSolution",
]
