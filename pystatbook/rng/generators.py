"""
Seeded data generators for lesson demonstrations.

Every generator builds its own SeededRandom from the seed it is given, so
the same arguments always reproduce the same data.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pystatbook.core.exceptions import ValidationError
from pystatbook.core.validation import check_positive_int
from pystatbook.rng._mulberry import SeededRandom

POPULATION_KINDS = ('normal', 'uniform', 'skewed', 'bimodal')


def generate_normal_sample(
    n: int,
    mean: float,
    sd: float,
    seed: int,
) -> NDArray[np.floating[Any]]:
    """
    Draw n values mean + sd * z from a fresh seeded stream.

    Examples:
        >>> a = generate_normal_sample(30, 100.0, 15.0, seed=7)
        >>> b = generate_normal_sample(30, 100.0, 15.0, seed=7)
        >>> bool((a == b).all())
        True
    """
    n = check_positive_int(n, "n", minimum=0)
    return SeededRandom(seed).normal(n, mean, sd)


def _broadcast(value: float | Sequence[float], k: int, name: str) -> list:
    if np.isscalar(value):
        return [value] * k
    values = list(value)
    if len(values) != k:
        raise ValidationError(
            f"{name}: expected a scalar or {k} values, got {len(values)}"
        )
    return values


def generate_group_data(
    means: Sequence[float],
    sds: float | Sequence[float],
    ns: int | Sequence[int],
    seed: int,
) -> list[NDArray[np.floating[Any]]]:
    """
    Generate one normal sample per group from a single seeded stream.

    Args:
        means: Population mean of each group
        sds: Common SD or one SD per group
        ns: Common size or one size per group
        seed: PRNG seed

    Returns:
        List of 1D arrays, group i drawn after group i-1
    """
    k = len(means)
    if k == 0:
        raise ValidationError("means: at least one group mean is required")
    sds = _broadcast(sds, k, "sds")
    ns = [check_positive_int(n, "ns", minimum=0) for n in _broadcast(ns, k, "ns")]

    rng = SeededRandom(seed)
    return [rng.normal(n, m, s) for m, s, n in zip(means, sds, ns)]


def generate_within_subjects_data(
    n_subjects: int,
    condition_means: Sequence[float],
    subject_sd: float,
    error_sd: float,
    seed: int,
) -> NDArray[np.floating[Any]]:
    """
    Generate an (n_subjects x k) repeated-measures matrix.

    Each subject draws one random offset (SD subject_sd) shared across
    conditions; each cell adds independent error (SD error_sd).
    """
    n_subjects = check_positive_int(n_subjects, "n_subjects")
    means = np.asarray(condition_means, dtype=np.float64)
    if means.ndim != 1 or means.size == 0:
        raise ValidationError("condition_means: expected a non-empty 1D sequence")

    rng = SeededRandom(seed)
    data = np.empty((n_subjects, means.size), dtype=np.float64)
    for i in range(n_subjects):
        offset = subject_sd * rng.next_normal()
        for j in range(means.size):
            data[i, j] = means[j] + offset + error_sd * rng.next_normal()
    return data


def generate_mediation_data(
    n: int,
    a: float,
    b: float,
    c_prime: float,
    intercept_m: float = 0.0,
    intercept_y: float = 0.0,
    sd_m: float = 1.0,
    sd_y: float = 1.0,
    *,
    seed: int,
) -> tuple[NDArray, NDArray, NDArray]:
    """
    Simulate a simple mediation model X -> M -> Y.

    X is standard normal; M = i_M + aX + e_M; Y = i_Y + c'X + bM + e_Y.

    Returns:
        (x, m, y) arrays of length n
    """
    n = check_positive_int(n, "n")
    rng = SeededRandom(seed)
    x = np.empty(n)
    m = np.empty(n)
    y = np.empty(n)
    for i in range(n):
        x[i] = rng.next_normal()
        m[i] = intercept_m + a * x[i] + sd_m * rng.next_normal()
        y[i] = intercept_y + c_prime * x[i] + b * m[i] + sd_y * rng.next_normal()
    return x, m, y


def generate_moderation_data(
    n: int,
    a: float,
    b: float,
    c: float,
    d: float,
    residual_sd: float = 1.0,
    x_mean: float = 0.0,
    x_sd: float = 1.0,
    *,
    seed: int,
) -> tuple[NDArray, NDArray, NDArray]:
    """
    Simulate Y = a + bZ + cX + dZX + e with a binary Z.

    Z is 0 for the first n // 2 observations and 1 for the rest.

    Returns:
        (z, x, y) arrays of length n
    """
    n = check_positive_int(n, "n")
    rng = SeededRandom(seed)
    z = np.where(np.arange(n) < n // 2, 0.0, 1.0)
    x = np.empty(n)
    y = np.empty(n)
    for i in range(n):
        x[i] = x_mean + x_sd * rng.next_normal()
        y[i] = (a + b * z[i] + c * x[i] + d * z[i] * x[i]
                + residual_sd * rng.next_normal())
    return z, x, y


def _population_quantiles(kind: str, mean: float, sd: float, size: int) -> NDArray:
    i = np.arange(1, size + 1)
    p = i / (size + 1)

    if kind == 'normal':
        return sp_stats.norm.ppf(p, loc=mean, scale=sd)
    if kind == 'uniform':
        width = sd * np.sqrt(12.0)
        return sp_stats.uniform.ppf(p, loc=mean - width / 2, scale=width)
    if kind == 'skewed':
        # gamma(shape=2) shifted so its mean is `mean`
        shape = 2.0
        scale = sd / np.sqrt(shape)
        return sp_stats.gamma.ppf(p, shape, scale=scale) + (mean - shape * scale)

    # bimodal: each half spans its own mode's full quantile range
    half = size / 2
    left = i <= half
    values = np.empty(size)
    values[left] = sp_stats.norm.ppf(
        (2 * i[left] - 1) / size, loc=mean - sd, scale=0.5 * sd
    )
    values[~left] = sp_stats.norm.ppf(
        (2 * (i[~left] - half) - 1) / size, loc=mean + sd, scale=0.5 * sd
    )
    return values


def generate_population(
    kind: str,
    mean: float,
    sd: float,
    size: int = 500,
    *,
    seed: int,
) -> NDArray[np.floating[Any]]:
    """
    Build a deterministic population that matches a theoretical shape.

    Values are the inverse CDF evaluated at i / (size + 1) for
    i = 1..size, then put in random order with a seeded Fisher-Yates
    shuffle so that drawing a prefix is still a random sample.

    Args:
        kind: One of 'normal', 'uniform', 'skewed', 'bimodal'
        mean: Population mean
        sd: Population standard deviation
        size: Number of values
        seed: Shuffle seed (the textbook's sampling lessons use 42)

    Raises:
        ValidationError: If kind is unknown
    """
    if kind not in POPULATION_KINDS:
        raise ValidationError(
            f"kind: must be one of {POPULATION_KINDS}, got {kind!r}"
        )
    size = check_positive_int(size, "size")
    values = _population_quantiles(kind, mean, sd, size)
    return SeededRandom(seed).shuffle(values)


def draw_sample_indices(
    population_size: int,
    sample_size: int,
    seed: int,
) -> NDArray[np.intp]:
    """Draw min(sample_size, population_size) distinct indices, in draw order."""
    population_size = check_positive_int(population_size, "population_size", minimum=0)
    sample_size = check_positive_int(sample_size, "sample_size", minimum=0)

    rng = SeededRandom(seed)
    available = list(range(population_size))
    drawn = []
    while available and len(drawn) < sample_size:
        j = int(rng.next() * len(available))
        drawn.append(available.pop(j))
    return np.array(drawn, dtype=np.intp)
