"""
Project: StatMisc
File Name: models.py
Description:
    Immutable result types returned by the statistical routines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np
from scipy import stats


class Significance(IntEnum):
    """Where a target value falls relative to a bootstrap interval.

    Integer values follow interval indexing: 0 below the lower quantile,
    1 inside (boundaries included), 2 above the upper quantile.
    """

    LOWER = 0
    NONE = 1
    UPPER = 2


@dataclass(frozen=True)
class PointMembership:
    """A tested point and whether it lies inside the ellipsoid."""

    point: np.ndarray
    inside: bool

    def __iter__(self):
        # Unpacks as (point, inside)
        yield self.point
        yield self.inside


@dataclass(frozen=True)
class MixtureMoments:
    """First two moments of a collapsed mixture."""

    mean: np.ndarray
    var: np.ndarray

    def __iter__(self):
        yield self.mean
        yield self.var


@dataclass(frozen=True)
class GammaParams:
    """Shape/rate parameterization of a Gamma distribution."""

    shape: float
    rate: float

    @property
    def scale(self) -> float:
        return 1.0 / self.rate

    @property
    def mean(self) -> float:
        return self.shape / self.rate

    @property
    def variance(self) -> float:
        return self.shape / self.rate**2

    @property
    def mode(self) -> float:
        """Mode of the density; 0 when shape < 1 (density peaks at the origin)."""
        return max(self.shape - 1.0, 0.0) / self.rate

    def frozen(self):
        """Equivalent ``scipy.stats.gamma`` frozen distribution."""
        return stats.gamma(a=self.shape, scale=self.scale)

    def __iter__(self):
        yield self.shape
        yield self.rate
