"""
Solution wrapper for batches of simulated sequential trials.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystatbook.core.result import Result
from pystatbook.sequential._common import SequentialSimParams, SequentialTrial


@dataclass
class SequentialSimSolution:
    """
    A batch of simulated sequential experiments.

    Under a true null (effect_size = 0) rejection_rate estimates the
    design's overall Type I error.
    """
    _result: Result[SequentialSimParams]

    @property
    def trials(self) -> tuple[SequentialTrial, ...]:
        return self._result.params.trials

    @property
    def n_trials(self) -> int:
        return len(self._result.params.trials)

    @property
    def rejection_rate(self) -> float:
        return self._result.params.rejection_rate

    @property
    def stop_counts(self) -> NDArray[np.intp]:
        """Number of trials that stopped at stage 1, 2, ..., K."""
        return self._result.params.stop_counts

    @property
    def mean_total_n(self) -> float:
        """Average observations used (both groups) per trial."""
        return self._result.params.mean_total_n

    @property
    def max_total_n(self) -> int:
        p = self._result.params
        return 2 * p.n_per_stage * len(p.thresholds)

    @property
    def thresholds(self) -> tuple[float, ...]:
        return self._result.params.thresholds

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        return self._result.to_dict()

    def summary(self) -> str:
        p = self._result.params
        lines = [
            "Simulated Sequential Tests",
            "=" * 72,
            f"Effect size d = {p.effect_size:g}, n per group per stage = {p.n_per_stage}",
            "Thresholds: " + ", ".join(f"{t:.4f}" for t in p.thresholds),
            f"Trials: {self.n_trials}, seed {p.seed}",
            "",
            f"Rejection rate: {self.rejection_rate:.4f}",
            f"Mean total N: {self.mean_total_n:.1f} of {self.max_total_n}",
            "Stopped at stage: " + ", ".join(
                f"{i}: {c}" for i, c in enumerate(self.stop_counts, start=1)
            ),
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SequentialSimSolution(n_trials={self.n_trials}, "
            f"rejection_rate={self.rejection_rate:.4f})"
        )
