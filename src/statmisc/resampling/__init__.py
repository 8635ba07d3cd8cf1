"""Bootstrap resampling and significance classification."""

from statmisc.resampling.bootstrap import boot_quantiles, boot_sig, bootstrap, corrected_mean

__all__ = ["boot_quantiles", "boot_sig", "bootstrap", "corrected_mean"]
