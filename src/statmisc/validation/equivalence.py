"""
Equivalence checkers — developer aids for confirming that two numeric
results, or two matrix identities, agree to a fixed precision.

``matcheck`` evaluates two callables on the same set of random symmetric
3x3 matrices, so an algebraic identity such as (AB)^T == B^T A^T can be
checked numerically without symbolic tooling.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from statmisc.config import DEFAULTS
from statmisc.validation.rstream import RStream

logger = logging.getLogger(__name__)

MatrixExpr = Callable[[np.ndarray, np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Smallest power of ten that is a normal double
_MIN_POW10 = -307.0


def _flatten_pair(o1, o2) -> tuple[np.ndarray, np.ndarray]:
    a = np.ravel(np.asarray(o1, dtype=float))
    b = np.ravel(np.asarray(o2, dtype=float))
    if a.size != b.size:
        msg = f"Cannot compare objects with {a.size} and {b.size} elements"
        raise ValueError(msg)
    return a, b


def signif(x, digits: int) -> np.ndarray:
    """Round to ``digits`` significant figures; zeros and non-finite values pass through."""
    digits = max(int(digits), 1)
    arr = np.asarray(x, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        magnitude = np.floor(np.log10(np.abs(arr)))
    magnitude = np.where(np.isfinite(magnitude), magnitude, 0.0)
    # Subnormals share the smallest normal power of ten so the scale never hits 0
    magnitude = np.maximum(magnitude, _MIN_POW10)
    scale = 10.0**magnitude
    out = np.round(arr / scale, digits - 1) * scale
    return np.where(np.isfinite(arr), out, arr)


def chk(o1, o2, dp: int = DEFAULTS.chk_dp) -> bool:
    """Check equivalence of two objects to ``dp`` decimal places."""
    a, b = _flatten_pair(o1, o2)
    return bool(np.all(np.round(a, dp) == np.round(b, dp)))


def random_symmetric_matrices(
    seed: int = DEFAULTS.matcheck_seed,
    count: int = 4,
    size: int = DEFAULTS.matrix_size,
    r_compatible: bool = False,
) -> list[np.ndarray]:
    """Random symmetric matrices drawn in a fixed order from one seeded generator.

    For each matrix in turn: off-diagonal entries ~ Uniform(0, 2), filled in
    upper-triangle row order and mirrored, then diagonal entries ~ Normal(2, 1).
    With ``r_compatible`` the draws come from ``RStream``, giving the same
    matrices as R after ``set.seed(seed)``.
    """
    rng = RStream(seed) if r_compatible else np.random.default_rng(seed)
    iu = np.triu_indices(size, k=1)

    matrices = []
    for _ in range(count):
        mat = np.empty((size, size))
        off = rng.uniform(0.0, 2.0, size=len(iu[0]))
        mat[iu] = off
        mat[iu[1], iu[0]] = off
        mat[np.diag_indices(size)] = rng.normal(2.0, 1.0, size=size)
        matrices.append(mat)
    return matrices


def matcheck(
    expr1: MatrixExpr,
    expr2: MatrixExpr,
    dp: int = DEFAULTS.matcheck_dp,
    seed: int = DEFAULTS.matcheck_seed,
    r_compatible: bool = False,
) -> bool:
    """Confirm whether two matrix expressions produce identical output.

    Args:
        expr1: Function of (A, B, C, D) returning a matrix or scalar.
        expr2: Second function of (A, B, C, D).
        dp: Number of significant figures to compare.
        seed: Seed used to generate the random matrices.
        r_compatible: Draw the matrices from R's seeded generator.

    Returns:
        True if both results agree to ``dp`` significant figures.
    """
    a, b, c, d = random_symmetric_matrices(seed, r_compatible=r_compatible)
    ev1, ev2 = _flatten_pair(expr1(a, b, c, d), expr2(a, b, c, d))
    same = bool(np.all(signif(ev1, dp) == signif(ev2, dp)))
    if not same:
        logger.debug("Max abs difference %.3g (seed=%d)", np.max(np.abs(ev1 - ev2)), seed)
    return same
