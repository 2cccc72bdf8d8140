"""
Simulated group-sequential experiments.

Each stage draws n_per_stage treatment values from N(effect_size, 1) and
n_per_stage control values from N(0, 1), appends them to the running
samples, and runs a Welch test on everything so far. The trial stops at
the first stage whose p-value is below that stage's threshold.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pystatbook.core.compute.timing import Timer
from pystatbook.core.result import Result
from pystatbook.hypothesis import welch_t_test
from pystatbook.rng import SeededRandom
from pystatbook.sequential._common import SequentialTrial, SequentialSimParams


def run_trial(
    rng: SeededRandom,
    effect_size: float,
    n_per_stage: int,
    thresholds: Sequence[float],
    stop_on_rejection: bool = True,
) -> SequentialTrial:
    treatment = np.empty(0)
    control = np.empty(0)
    p_values = []
    rejected_at = None

    for stage, threshold in enumerate(thresholds, start=1):
        treatment = np.concatenate([treatment, rng.normal(n_per_stage, effect_size, 1.0)])
        control = np.concatenate([control, rng.normal(n_per_stage, 0.0, 1.0)])
        p = welch_t_test(treatment, control).p_value
        p_values.append(p)

        if rejected_at is None and p < threshold:
            rejected_at = stage
            if stop_on_rejection:
                break

    stopped_at = rejected_at if (rejected_at is not None and stop_on_rejection) else len(p_values)
    return SequentialTrial(
        stopped_at=stopped_at,
        total_n=2 * n_per_stage * stopped_at,
        rejected=rejected_at is not None,
        p_values=tuple(p_values),
        thresholds=tuple(thresholds),
    )


def run_trials(
    effect_size: float,
    n_per_stage: int,
    thresholds: tuple[float, ...],
    n_trials: int,
    seed: int,
) -> Result[SequentialSimParams]:
    timer = Timer()
    timer.start()

    rng = SeededRandom(seed)
    with timer.section('trials'):
        trials = tuple(
            run_trial(rng, effect_size, n_per_stage, thresholds)
            for _ in range(n_trials)
        )

    stops = np.array([t.stopped_at for t in trials], dtype=np.intp)
    stop_counts = np.bincount(stops, minlength=len(thresholds) + 1)[1:]
    rejection_rate = float(np.mean([t.rejected for t in trials]))
    mean_total_n = float(np.mean([t.total_n for t in trials]))

    timer.stop()

    params = SequentialSimParams(
        trials=trials,
        rejection_rate=rejection_rate,
        stop_counts=stop_counts,
        mean_total_n=mean_total_n,
        effect_size=effect_size,
        n_per_stage=n_per_stage,
        thresholds=thresholds,
        seed=seed,
    )
    return Result(
        params=params,
        info={'n_trials': n_trials, 'n_stages': len(thresholds)},
        timing=timer.result(),
        method='sequential_simulation',
        warnings=(),
    )
