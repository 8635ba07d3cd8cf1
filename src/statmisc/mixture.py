"""
Moment matching for mixtures — collapse M weighted components into one
mean vector and covariance matrix via the law of total variance:

    mean = sum_i w_i mu_i
    var  = sum_i w_i Sigma_i  +  sum_i w_i (mu_i - mean)(mu_i - mean)^T

The result is exact for the first two moments whatever the family of the
individual components.
"""

from __future__ import annotations

import logging

import numpy as np

from statmisc.config import DEFAULTS
from statmisc.errors import MixtureError
from statmisc.models import MixtureMoments

logger = logging.getLogger(__name__)


def _stack_components(means, covariances) -> tuple[np.ndarray, np.ndarray]:
    """Stack component moments into (M, d) and (M, d, d) arrays."""
    mu = np.asarray(means, dtype=float)
    sig = np.asarray(covariances, dtype=float)

    if mu.ndim == 1:
        # Scalar components: one value per component
        mu = mu[:, np.newaxis]
        if sig.ndim == 1:
            sig = sig[:, np.newaxis, np.newaxis]

    if mu.ndim != 2 or mu.shape[0] == 0:
        raise MixtureError(f"means must be a non-empty list of vectors, got shape {mu.shape}")
    m, d = mu.shape
    if sig.shape != (m, d, d):
        raise MixtureError(
            f"Expected {m} covariance matrices of shape ({d}, {d}), got array of shape {sig.shape}"
        )
    return mu, sig


def mixture_params(means, covariances, weights=None) -> MixtureMoments:
    """Parameters of a mixture of Gaussian distributions.

    Args:
        means: Sequence of M component mean vectors (or M scalars).
        covariances: Sequence of M component covariance matrices (or M scalars).
        weights: Mixture weights; uniform ``1/M`` when omitted.

    Returns:
        ``MixtureMoments`` holding the overall mean and variance.

    Raises:
        MixtureError: If components or weights have inconsistent shapes,
            or a weight is negative.
    """
    mu, sig = _stack_components(means, covariances)
    m = mu.shape[0]

    if weights is None:
        w = np.full(m, 1.0 / m)
    else:
        w = np.ravel(np.asarray(weights, dtype=float))
        if w.size != m:
            raise MixtureError(f"Got {w.size} weights for {m} components")
        if np.any(w < 0):
            raise MixtureError("Mixture weights must be non-negative")
        if not np.isclose(w.sum(), 1.0, rtol=0.0, atol=DEFAULTS.weight_atol):
            logger.warning("Mixture weights sum to %.12g, not 1", w.sum())

    mu_bar = w @ mu
    e_var = np.einsum("i,ijk->jk", w, sig)
    dev = mu - mu_bar
    v_exp = np.einsum("i,ij,ik->jk", w, dev, dev)
    logger.debug("Collapsed %d components of dimension %d", m, mu.shape[1])

    return MixtureMoments(mean=mu_bar, var=e_var + v_exp)
