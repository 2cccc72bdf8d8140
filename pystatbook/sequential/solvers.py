"""
Sequential-testing entry points.

    simulate_sequential_test(...)    - one simulated multi-stage experiment
    simulate_sequential_trials(...)  - a seeded batch of them
    peeking_type1_error(n_looks)     - false-positive rate of naive peeking
    overall_alpha(thresholds)        - overall Type I error of any schedule
"""

from __future__ import annotations

from typing import Sequence

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_positive_int, check_probability, check_seed
from pystatbook.rng import SeededRandom
from pystatbook.sequential._common import SequentialTrial
from pystatbook.sequential._crossing import crossing_probabilities, DEFAULT_GRID_SIZE
from pystatbook.sequential._simulation import run_trial, run_trials
from pystatbook.sequential._thresholds import get_thresholds
from pystatbook.sequential.solution import SequentialSimSolution


def _resolve_thresholds(
    thresholds: Sequence[float] | str,
    n_stages: int,
) -> tuple[float, ...]:
    n_stages = check_positive_int(n_stages, "n_stages")
    if isinstance(thresholds, str):
        return get_thresholds(n_stages, thresholds)
    values = tuple(float(t) for t in thresholds)
    if len(values) != n_stages:
        raise ValidationError(
            f"thresholds: expected {n_stages} values, got {len(values)}"
        )
    for t in values:
        check_probability(t, "thresholds")
    return values


def simulate_sequential_test(
    effect_size: float,
    n_per_stage: int,
    n_stages: int,
    thresholds: Sequence[float] | str,
    seed: int,
    *,
    stop_on_rejection: bool = True,
) -> SequentialTrial:
    """
    Simulate one group-sequential experiment.

    Args:
        effect_size: True standardized mean difference d
        n_per_stage: New observations per group at every stage
        n_stages: Number of looks
        thresholds: Per-stage p thresholds, or 'pocock' / 'obrien_fleming'
        seed: PRNG seed
        stop_on_rejection: Stop at the first rejection. With False every
            stage is run (the p-value path of a naive peeker) and
            stopped_at is the final stage.

    Returns:
        SequentialTrial with the stopping stage, total n across both
        groups, the reject decision and each stage's p-value
    """
    stages = _resolve_thresholds(thresholds, n_stages)
    n_per_stage = check_positive_int(n_per_stage, "n_per_stage", minimum=2)
    rng = SeededRandom(check_seed(seed))
    return run_trial(rng, float(effect_size), n_per_stage, stages, stop_on_rejection)


def simulate_sequential_trials(
    effect_size: float,
    n_per_stage: int,
    n_stages: int,
    thresholds: Sequence[float] | str,
    n_trials: int,
    seed: int,
) -> SequentialSimSolution:
    """
    Run a bounded batch of sequential experiments from one seeded stream.

    With effect_size = 0 the rejection rate estimates the overall Type I
    error of the threshold schedule.
    """
    stages = _resolve_thresholds(thresholds, n_stages)
    n_per_stage = check_positive_int(n_per_stage, "n_per_stage", minimum=2)
    n_trials = check_positive_int(n_trials, "n_trials")
    seed = check_seed(seed)
    return SequentialSimSolution(
        _result=run_trials(float(effect_size), n_per_stage, stages, n_trials, seed)
    )


def overall_alpha(
    thresholds: Sequence[float],
    *,
    grid_size: int = DEFAULT_GRID_SIZE,
) -> float:
    """
    Overall Type I error of a per-look threshold schedule.

    Assumes equal information per look and a z test on the cumulative
    data; computed by recursive numerical integration, not simulation.
    """
    values = tuple(float(t) for t in thresholds)
    if not values:
        raise ValidationError("thresholds: at least one look is required")
    for t in values:
        check_probability(t, "thresholds")
    if grid_size < 3 or grid_size % 2 == 0:
        raise ValidationError(f"grid_size: must be an odd integer >= 3, got {grid_size}")
    return float(crossing_probabilities(values, grid_size).sum())


def peeking_type1_error(n_looks: int, alpha: float = 0.05) -> float:
    """
    Probability that at least one of n_looks unadjusted looks at nominal
    alpha falsely rejects.

    Equals alpha for one look and grows with every added look
    (about .083 for 2 looks and .142 for 5 at alpha = .05).

    Examples:
        >>> round(peeking_type1_error(5), 3)
        0.142
    """
    n_looks = check_positive_int(n_looks, "n_looks")
    alpha = check_probability(alpha, "alpha")
    return overall_alpha((alpha,) * n_looks)
