#!/usr/bin/env python3
"""
Check a table of matrix identities on random symmetric matrices.

Each identity is evaluated on the same four seeded 3x3 matrices A, B, C, D
and compared to a fixed number of significant figures.

Usage:
    python scripts/check_identities.py
    python scripts/check_identities.py --seed 3 --dp 10
    python scripts/check_identities.py --r-compatible --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

_src_root = Path(__file__).resolve().parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

import numpy as np  # noqa: E402

from statmisc import DEFAULTS, matcheck  # noqa: E402

inv = np.linalg.inv

IDENTITIES = [
    ("(AB)^T = B^T A^T", lambda A, B, C, D: (A @ B).T, lambda A, B, C, D: B.T @ A.T),
    ("(AB)^-1 = B^-1 A^-1", lambda A, B, C, D: inv(A @ B), lambda A, B, C, D: inv(B) @ inv(A)),
    ("A(C + D) = AC + AD", lambda A, B, C, D: A @ (C + D), lambda A, B, C, D: A @ C + A @ D),
    ("tr(AB) = tr(BA)", lambda A, B, C, D: np.trace(A @ B), lambda A, B, C, D: np.trace(B @ A)),
    ("det(AB) = det(A)det(B)",
     lambda A, B, C, D: np.linalg.det(A @ B),
     lambda A, B, C, D: np.linalg.det(A) * np.linalg.det(B)),
    # Woodbury: (A + B C B^T)^-1
    ("Woodbury identity",
     lambda A, B, C, D: inv(A + B @ C @ B.T),
     lambda A, B, C, D: inv(A) - inv(A) @ B @ inv(inv(C) + B.T @ inv(A) @ B) @ B.T @ inv(A)),
    ("AB = BA (expected to fail)", lambda A, B, C, D: A @ B, lambda A, B, C, D: B @ A),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Numerically check matrix identities")
    parser.add_argument(
        "--dp", type=int, default=8,
        help="Significant figures to compare (default: 8)",
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULTS.matcheck_seed,
        help=f"Seed for the random matrices (default: {DEFAULTS.matcheck_seed})",
    )
    parser.add_argument(
        "--r-compatible", action="store_true",
        help="Draw the matrices as R does after set.seed(seed)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    width = max(len(name) for name, _, _ in IDENTITIES)
    for name, lhs, rhs in IDENTITIES:
        ok = matcheck(lhs, rhs, dp=args.dp, seed=args.seed, r_compatible=args.r_compatible)
        print(f"  {name:<{width}}  {'holds' if ok else 'FAILS'}")


if __name__ == "__main__":
    main()
