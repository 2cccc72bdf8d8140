"""
Generic result container for all pystatbook computations.

The Result class is the standardized envelope every solver returns inside
its Solution wrapper. Payloads are flat frozen dataclasses, so the whole
envelope can be turned into JSON-safe data for display or snapshot tests.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method details, seeds, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, statistics, etc.)
        info: Structured metadata (seed, batch size, design details)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RegressionParams(...),
        ...     info={'model': 'moderated'},
        ...     timing={'total_seconds': 0.001},
        ...     method='ols_qr',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the envelope to plain Python data.

        numpy arrays become lists, numpy scalars become floats/ints and
        NaN/inf become None so the output is valid JSON. Private info keys
        (leading underscore) are dropped.
        """
        return {
            'params': _to_plain(self.params),
            'info': {
                k: _to_plain(v) for k, v in self.info.items()
                if not k.startswith('_')
            },
            'timing': dict(self.timing) if self.timing is not None else None,
            'method': self.method,
            'warnings': list(self.warnings),
        }


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_plain(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, np.ndarray):
        return [_to_plain(v) for v in value.tolist()]
    if isinstance(value, dict):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    if isinstance(value, (np.bool_, bool)):
        return bool(value)
    if isinstance(value, (np.integer, int)):
        return int(value)
    if isinstance(value, (np.floating, float)):
        f = float(value)
        return f if math.isfinite(f) else None
    return value
