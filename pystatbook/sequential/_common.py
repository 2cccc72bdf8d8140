"""
Result payloads for sequential testing.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SequentialTrial:
    """
    One simulated multi-stage experiment.

    stopped_at is the 1-based stage of the last test run: the rejecting
    stage, or the final stage when no threshold was crossed. total_n counts
    both groups up to that stage. p_values holds one Welch p per stage run.
    """
    stopped_at: int
    total_n: int
    rejected: bool
    p_values: tuple[float, ...]
    thresholds: tuple[float, ...]


@dataclass(frozen=True)
class SequentialSimParams:
    """Parameter payload for a batch of simulated sequential trials."""
    trials: tuple[SequentialTrial, ...]
    rejection_rate: float
    stop_counts: NDArray[np.intp]      # trials stopping at stage 1..K
    mean_total_n: float
    effect_size: float
    n_per_stage: int
    thresholds: tuple[float, ...]
    seed: int
