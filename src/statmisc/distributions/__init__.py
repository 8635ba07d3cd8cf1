"""Distribution parameterizations."""

from statmisc.distributions.gamma import gamma_from_mean, gamma_from_mode, gamma_params

__all__ = ["gamma_from_mean", "gamma_from_mode", "gamma_params"]
