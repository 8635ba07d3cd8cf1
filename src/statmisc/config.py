"""
Project: StatMisc
File Name: config.py
Description:
    Default constants shared by the statistical routines.
    Function signatures read their defaults from ``DEFAULTS`` so a caller
    can build a custom ``StatDefaults`` and pass its fields explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatDefaults:
    """Default settings for resampling, tests and verification helpers."""

    nsamp: int = 10000
    lower_q: float = 0.025
    upper_q: float = 0.975
    coverage: float = 0.95  # ellipsoid probability mass
    chk_dp: int = 9
    matcheck_dp: int = 12  # significant figures
    matcheck_seed: int = 1
    matrix_size: int = 3
    weight_atol: float = 1e-9  # tolerance on sum(weights) == 1


# Default settings, used when no overrides are supplied.
DEFAULTS = StatDefaults()
