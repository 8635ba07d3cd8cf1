"""Numeric equivalence checks."""

from statmisc.validation.equivalence import chk, matcheck, random_symmetric_matrices, signif
from statmisc.validation.rstream import RStream

__all__ = ["RStream", "chk", "matcheck", "random_symmetric_matrices", "signif"]
