"""
Group-sequential stage thresholds.

Two-sided nominal p-value thresholds per look for Pocock and
O'Brien-Fleming boundaries at overall alpha = .05, as tabulated for
two- to four-stage designs. They are displayed to learners, so they are
kept as literal constants rather than re-derived.
"""

from __future__ import annotations

from pystatbook.core.exceptions import ValidationError

POCOCK_THRESHOLDS: dict[int, tuple[float, ...]] = {
    2: (0.0294, 0.0294),
    3: (0.0220, 0.0220, 0.0220),
    4: (0.0182, 0.0182, 0.0182, 0.0182),
}

OBRIEN_FLEMING_THRESHOLDS: dict[int, tuple[float, ...]] = {
    2: (0.0052, 0.0480),
    3: (0.0005, 0.0137, 0.0452),
    4: (0.0001, 0.0042, 0.0194, 0.0429),
}

THRESHOLD_KINDS = ('pocock', 'obrien_fleming')


def _lookup(table: dict[int, tuple[float, ...]], n_stages: int, name: str) -> tuple[float, ...]:
    try:
        return table[n_stages]
    except (KeyError, TypeError):
        raise ValidationError(
            f"{name} thresholds are tabulated for 2-4 stages, got n_stages={n_stages!r}"
        ) from None


def pocock_thresholds(n_stages: int) -> tuple[float, ...]:
    """Equal per-stage thresholds."""
    return _lookup(POCOCK_THRESHOLDS, n_stages, "Pocock")


def obrien_fleming_thresholds(n_stages: int) -> tuple[float, ...]:
    """Very strict early thresholds, final threshold near .05."""
    return _lookup(OBRIEN_FLEMING_THRESHOLDS, n_stages, "O'Brien-Fleming")


def get_thresholds(n_stages: int, kind: str) -> tuple[float, ...]:
    """
    Thresholds by name.

    Args:
        n_stages: 2, 3 or 4
        kind: 'pocock' or 'obrien_fleming'

    Raises:
        ValidationError: For an unknown kind or unsupported stage count
    """
    if kind == 'pocock':
        return pocock_thresholds(n_stages)
    if kind == 'obrien_fleming':
        return obrien_fleming_thresholds(n_stages)
    raise ValidationError(f"kind: must be one of {THRESHOLD_KINDS}, got {kind!r}")
