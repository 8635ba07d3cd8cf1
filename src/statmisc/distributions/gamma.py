"""Gamma shape/rate parameters from a mode or mean and a variance."""

from __future__ import annotations

import logging
import math

from statmisc.errors import GammaParameterError
from statmisc.models import GammaParams

logger = logging.getLogger(__name__)


def gamma_from_mode(mode: float, var: float) -> GammaParams:
    """Shape/rate of the Gamma distribution with the given mode and variance.

    Solves mode = (shape - 1) / rate and var = shape / rate^2 for shape >= 1:
        rate  = (mode + sqrt(mode^2 + 4 var)) / (2 var)
        shape = 1 + mode * rate
    """
    if not (var > 0 and math.isfinite(var)):
        raise GammaParameterError(f"Variance must be strictly positive and finite, got {var}")
    if not (mode >= 0 and math.isfinite(mode)):
        raise GammaParameterError(f"Mode of a Gamma distribution must be non-negative and finite, got {mode}")

    rate = (mode + math.sqrt(mode**2 + 4 * var)) / (2 * var)
    return GammaParams(shape=1 + mode * rate, rate=rate)


def gamma_from_mean(mean: float, var: float) -> GammaParams:
    """Shape/rate by moment matching: shape = mean^2 / var, rate = mean / var."""
    if not (var > 0 and math.isfinite(var)):
        raise GammaParameterError(f"Variance must be strictly positive and finite, got {var}")
    if not (mean > 0 and math.isfinite(mean)):
        raise GammaParameterError(f"Mean of a Gamma distribution must be positive and finite, got {mean}")

    return GammaParams(shape=mean**2 / var, rate=mean / var)


def gamma_params(mode_or_mean: float, var: float, is_mode: bool = True) -> GammaParams:
    """Gamma parameters given a specified mode (default) or mean, and variance."""
    params = gamma_from_mode(mode_or_mean, var) if is_mode else gamma_from_mean(mode_or_mean, var)
    logger.debug(
        "Gamma from %s=%.6g, var=%.6g -> shape=%.6g, rate=%.6g",
        "mode" if is_mode else "mean", mode_or_mean, var, params.shape, params.rate,
    )
    return params
