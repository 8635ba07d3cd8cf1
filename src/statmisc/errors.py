"""Exceptions raised when inputs violate a routine's preconditions."""

from __future__ import annotations


class DomainError(ValueError):
    """Input lies outside the domain where the computation is defined."""


class EllipsoidError(DomainError):
    """Covariance is not symmetric positive-definite, or shapes disagree."""


class MixtureError(DomainError):
    """Mixture components or weights have inconsistent shapes."""


class GammaParameterError(DomainError):
    """Mode/mean and variance do not define a valid Gamma distribution."""
