"""
Project: StatMisc
File Name: ellipsoid.py
Description:
    Confidence-ellipsoid membership via a whitening transform.

    Sigma = V diag(lam) V^T is factored into its symmetric square root
    S = V diag(sqrt(lam)) V^T. Points are mapped to z with S z = x - mu, so
    sum(z^2) is the squared Mahalanobis distance. A point is inside when that
    distance is below the chi-square quantile chi2_df(p), df = dimension.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy import linalg
from scipy import stats

from statmisc.config import DEFAULTS
from statmisc.errors import EllipsoidError
from statmisc.models import PointMembership

logger = logging.getLogger(__name__)

# Tolerance for the symmetry check, relative to the largest entry of Sigma
_SYMMETRY_RTOL = 1e-8


def _as_points(points, dim: int) -> np.ndarray:
    """Coerce a single point or an (n, d) array into 2-D float form."""
    arr = np.atleast_2d(np.asarray(points, dtype=float))
    if arr.ndim != 2 or arr.shape[1] != dim:
        raise EllipsoidError(
            f"Points must have {dim} coordinates, got array of shape {np.shape(points)}"
        )
    return arr


def _sqrt_sigma(mu, sigma) -> tuple[np.ndarray, np.ndarray]:
    """Validate the ellipsoid and return (mu, symmetric square root of Sigma)."""
    mu = np.ravel(np.asarray(mu, dtype=float))
    sigma = np.asarray(sigma, dtype=float)
    dim = mu.size
    if dim == 0:
        raise EllipsoidError("mu must have at least one coordinate")

    if sigma.ndim != 2 or sigma.shape[0] != sigma.shape[1]:
        raise EllipsoidError(f"Sigma must be a square matrix, got shape {sigma.shape}")
    if sigma.shape[0] != dim:
        raise EllipsoidError(
            f"Sigma is {sigma.shape[0]}x{sigma.shape[1]} but mu has {dim} elements"
        )
    scale = float(np.abs(sigma).max())
    if not np.allclose(sigma, sigma.T, rtol=_SYMMETRY_RTOL, atol=_SYMMETRY_RTOL * scale):
        raise EllipsoidError("Sigma must be symmetric")

    eigvals, eigvecs = np.linalg.eigh(sigma)
    # Eigenvalues within rounding of zero count as singular
    tol = max(float(eigvals.max()), 0.0) * dim * np.finfo(float).eps
    if np.any(eigvals <= tol):
        raise EllipsoidError(
            f"Sigma must be positive-definite; smallest eigenvalue is {eigvals.min():.6g}"
        )

    root = eigvecs @ np.diag(np.sqrt(eigvals)) @ eigvecs.T
    return mu, root


def whiten(points, mu, sigma) -> np.ndarray:
    """Map points into the space where Sigma becomes the identity.

    Solves ``S z = x - mu`` for every point instead of forming ``S^-1``.

    Returns:
        Array of shape (n, d) with one whitened row per point.
    """
    mu, root = _sqrt_sigma(mu, sigma)
    pts = _as_points(points, mu.size)
    # One solve with the deviations as right-hand-side columns
    z = linalg.solve(root, (pts - mu).T, assume_a="pos")
    return z.T


def mahalanobis_sq(points, mu, sigma) -> np.ndarray:
    """Squared Mahalanobis distance of each point from ``mu``."""
    z = whiten(points, mu, sigma)
    return np.sum(z**2, axis=1)


def points_in_ellipse(
    points,
    mu,
    sigma,
    p: float = DEFAULTS.coverage,
) -> list[PointMembership]:
    """Identify whether points fall within an ellipsoid.

    Args:
        points: Points to be tested: one 1-D point or an (n, d) array.
        mu: Centre of the ellipsoid.
        sigma: Covariance matrix describing the ellipsoid.
        p: Proportion of probability mass the ellipsoid encloses.

    Returns:
        One ``PointMembership`` per input point, in input order.

    Raises:
        EllipsoidError: On invalid ``p``, shapes, or a covariance that is
            not symmetric positive-definite.
    """
    if not (0.0 < p < 1.0):
        raise EllipsoidError(f"p must be in (0, 1), got {p}")

    # Private copy so results do not alias the caller's array
    pts = np.atleast_2d(np.array(points, dtype=float))
    d2 = mahalanobis_sq(pts, mu, sigma)
    radius = float(stats.chi2.ppf(p, df=pts.shape[1]))
    inside = d2 < radius
    logger.debug(
        "Ellipsoid test: %d points, df=%d, chi2 radius=%.6g, %d inside",
        len(pts), pts.shape[1], radius, int(inside.sum()),
    )

    return [PointMembership(point=pt, inside=bool(flag)) for pt, flag in zip(pts, inside)]
