"""
Deterministic random generation.

All stochastic code in pystatbook draws from SeededRandom, an explicit
generator object created from an integer seed. No global random state is
read or written.
"""

from pystatbook.rng._mulberry import SeededRandom
from pystatbook.rng.generators import (
    POPULATION_KINDS,
    generate_normal_sample,
    generate_group_data,
    generate_within_subjects_data,
    generate_mediation_data,
    generate_moderation_data,
    generate_population,
    draw_sample_indices,
)

__all__ = [
    "SeededRandom",
    "POPULATION_KINDS",
    "generate_normal_sample",
    "generate_group_data",
    "generate_within_subjects_data",
    "generate_mediation_data",
    "generate_moderation_data",
    "generate_population",
    "draw_sample_indices",
]
