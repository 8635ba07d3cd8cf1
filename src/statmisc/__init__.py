"""
StatMisc — small statistical utility routines.

Usage::

    from statmisc import (
        bootstrap, boot_sig, boot_quantiles,
        points_in_ellipse, mahalanobis_sq,
        mixture_params, gamma_params,
        chk, matcheck,
    )
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("statmisc")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

# Configuration
from statmisc.config import DEFAULTS, StatDefaults

# Errors
from statmisc.errors import DomainError, EllipsoidError, GammaParameterError, MixtureError

# Result types
from statmisc.models import GammaParams, MixtureMoments, PointMembership, Significance

# Routines
from statmisc.distributions.gamma import gamma_from_mean, gamma_from_mode, gamma_params
from statmisc.geometry.ellipsoid import mahalanobis_sq, points_in_ellipse, whiten
from statmisc.mixture import mixture_params
from statmisc.resampling.bootstrap import boot_quantiles, boot_sig, bootstrap, corrected_mean
from statmisc.validation.equivalence import chk, matcheck, random_symmetric_matrices, signif
from statmisc.validation.rstream import RStream

__all__ = [
    # Config
    "DEFAULTS",
    "StatDefaults",
    # Errors
    "DomainError",
    "EllipsoidError",
    "GammaParameterError",
    "MixtureError",
    # Models
    "GammaParams",
    "MixtureMoments",
    "PointMembership",
    "Significance",
    # Resampling
    "boot_quantiles",
    "boot_sig",
    "bootstrap",
    "corrected_mean",
    # Geometry
    "mahalanobis_sq",
    "points_in_ellipse",
    "whiten",
    # Mixture
    "mixture_params",
    # Distributions
    "gamma_from_mean",
    "gamma_from_mode",
    "gamma_params",
    # Validation
    "RStream",
    "chk",
    "matcheck",
    "random_symmetric_matrices",
    "signif",
]
