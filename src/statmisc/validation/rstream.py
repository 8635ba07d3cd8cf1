"""
Random stream reproducing R's default generator for ``set.seed(seed)``.

R seeds its Mersenne-Twister by scrambling the integer seed with the LCG
``seed = 69069 * seed + 1`` (50 rounds), then filling the 625-word seed
table with further LCG steps; word 0 is the position counter (reset to 624)
and words 1..624 are the MT state. numpy's ``MT19937`` accepts that state
directly, and its raw 32-bit outputs are R's ``MT_genrand`` integers.

``uniform`` follows ``runif`` and ``normal`` follows ``rnorm`` with R's
default "Inversion" normal kind (two uniforms per draw).
"""

from __future__ import annotations

import numpy as np
from scipy import special

_MASK32 = 0xFFFFFFFF
_MT_N = 624
_TO_UNIT = 2.3283064365386963e-10  # 1 / 2^32
_I2_32M1 = 2.328306437080797e-10  # 1 / (2^32 - 1)
_BIG = 134217728  # 2^27


def _r_seed_table(seed: int) -> np.ndarray:
    """The 625-word ``.Random.seed`` table R builds for ``set.seed(seed)``."""
    s = int(seed) & _MASK32
    for _ in range(50):
        s = (69069 * s + 1) & _MASK32
    table = np.empty(_MT_N + 1, dtype=np.uint32)
    for j in range(_MT_N + 1):
        s = (69069 * s + 1) & _MASK32
        table[j] = s
    table[0] = _MT_N
    return table


class RStream:
    """Uniform and normal draws matching R after ``set.seed(seed)``."""

    def __init__(self, seed: int):
        table = _r_seed_table(seed)
        self._bitgen = np.random.MT19937()
        self._bitgen.state = {
            "bit_generator": "MT19937",
            "state": {"key": table[1:], "pos": _MT_N},
        }

    def _unif(self, n: int) -> np.ndarray:
        u = self._bitgen.random_raw(n).astype(float) * _TO_UNIT
        # R keeps draws strictly inside (0, 1)
        u[u <= 0.0] = 0.5 * _I2_32M1
        u[(1.0 - u) <= 0.0] = 1.0 - 0.5 * _I2_32M1
        return u

    def uniform(self, low: float = 0.0, high: float = 1.0, size: int = 1) -> np.ndarray:
        return low + (high - low) * self._unif(size)

    def normal(self, loc: float = 0.0, scale: float = 1.0, size: int = 1) -> np.ndarray:
        u = self._unif(2 * size).reshape(size, 2)
        v = np.floor(_BIG * u[:, 0]) + u[:, 1]
        return loc + scale * special.ndtri(v / _BIG)
