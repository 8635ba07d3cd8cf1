"""
Nonparametric bootstrap — resampling engine and tail-quantile significance.

The resampler draws every index up front as an ``(nsamp, n)`` matrix, one
row per resample, then reduces each row with the supplied statistic.
Randomness comes only from the generator passed in, so a fixed seed
reproduces the whole distribution.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable

import numpy as np

from statmisc.config import DEFAULTS
from statmisc.models import Significance

logger = logging.getLogger(__name__)

Statistic = Callable[[np.ndarray], float]


def corrected_mean(values: np.ndarray) -> float:
    """Arithmetic mean with one refinement pass.

    Adding back the mean residual cancels the rounding error of the plain
    sum; a constant sample returns exactly its value.
    """
    m = values.mean()
    return float(m + (values - m).mean())


def bootstrap(
    x,
    nsamp: int = DEFAULTS.nsamp,
    fn: Statistic = corrected_mean,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Bootstrap distribution of a statistic over a set of values.

    Args:
        x: Vector or array of values; flattened before resampling.
        nsamp: Number of bootstrap samples to produce; a positive integer.
        fn: Statistic computed on each resample; defaults to the mean.
            Must accept duplicates.
        rng: Generator, integer seed, or None for fresh entropy.

    Returns:
        Array of ``nsamp`` statistics in draw order.

    Raises:
        ValueError: If ``x`` is empty, ``nsamp < 1`` or ``fn`` is not scalar.
    """
    values = np.ravel(np.asarray(x))
    n = values.size
    if n == 0:
        msg = "Cannot bootstrap an empty sample"
        raise ValueError(msg)
    if isinstance(nsamp, bool) or not isinstance(nsamp, numbers.Integral) or nsamp < 1:
        msg = f"nsamp must be a positive integer, got {nsamp!r}"
        raise ValueError(msg)

    gen = np.random.default_rng(rng)
    idx = gen.integers(0, n, size=(nsamp, n))
    logger.debug("Bootstrapping n=%d values, nsamp=%d", n, nsamp)

    out = np.empty(nsamp, dtype=float)
    for j, ind in enumerate(idx):
        stat = np.asarray(fn(values[ind]))
        if stat.size != 1:
            msg = f"Statistic must return a scalar, got shape {stat.shape}"
            raise ValueError(msg)
        out[j] = stat.item()
    return out


def boot_quantiles(
    boot_samp,
    q1: float = DEFAULTS.lower_q,
    q2: float = DEFAULTS.upper_q,
) -> tuple[float, float]:
    """Lower/upper type-7 (linear interpolation) quantiles of a bootstrap sample."""
    samp = np.ravel(np.asarray(boot_samp, dtype=float))
    if samp.size == 0:
        msg = "Bootstrap sample is empty"
        raise ValueError(msg)
    if not (0.0 <= q1 <= 1.0 and 0.0 <= q2 <= 1.0):
        msg = f"Quantile probabilities must lie in [0, 1], got q1={q1}, q2={q2}"
        raise ValueError(msg)
    if q1 > q2:
        msg = f"Lower probability q1={q1} exceeds upper q2={q2}"
        raise ValueError(msg)

    lower, upper = np.quantile(samp, [q1, q2], method="linear")
    return float(lower), float(upper)


def boot_sig(
    boot_samp,
    target: float = 0.0,
    q1: float = DEFAULTS.lower_q,
    q2: float = DEFAULTS.upper_q,
) -> Significance:
    """Check where a target value falls within a bootstrap sample.

    A target exactly on either quantile counts as not significant.

    Returns:
        ``Significance.LOWER`` (0) if the target is in the lower tail,
        ``Significance.NONE`` (1) if not significant,
        ``Significance.UPPER`` (2) if in the upper tail.
    """
    lower, upper = boot_quantiles(boot_samp, q1, q2)
    logger.debug("Interval [%.6g, %.6g] for target %.6g", lower, upper, target)

    if target < lower:
        return Significance.LOWER
    if target > upper:
        return Significance.UPPER
    return Significance.NONE
