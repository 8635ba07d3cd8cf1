#!/usr/bin/env python3
"""
Bootstrap summary — CLI entry point.

Bootstraps a statistic over a list of numbers, then reports the percentile
interval and where a target value falls relative to it.

Usage:
    python scripts/bootstrap_summary.py 4.8 5.1 5.3 4.9 5.0
    python scripts/bootstrap_summary.py 1 2 3 4 5 --target 3 --stat median
    python scripts/bootstrap_summary.py 1 2 3 --nsamp 500 --seed 7 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the package is importable when run from a source checkout
_src_root = Path(__file__).resolve().parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

import numpy as np  # noqa: E402

from statmisc import DEFAULTS, boot_quantiles, boot_sig, bootstrap, corrected_mean  # noqa: E402

_STATISTICS = {
    "mean": corrected_mean,
    "median": np.median,
    "std": np.std,
}

_LABELS = {
    0: "lower tail (significant)",
    1: "not significant",
    2: "upper tail (significant)",
}


def _kv(key: str, value) -> str:
    return f"  {key:<24} {value}"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Bootstrap a statistic and classify a target value",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("values", type=float, nargs="+", help="Observed values")
    parser.add_argument(
        "--stat", choices=sorted(_STATISTICS), default="mean",
        help="Statistic computed on each resample (default: mean)",
    )
    parser.add_argument(
        "--nsamp", type=int, default=DEFAULTS.nsamp,
        help=f"Number of bootstrap samples (default: {DEFAULTS.nsamp})",
    )
    parser.add_argument("--target", type=float, default=0.0, help="Target value (default: 0)")
    parser.add_argument("--q1", type=float, default=DEFAULTS.lower_q, help="Lower probability")
    parser.add_argument("--q2", type=float, default=DEFAULTS.upper_q, help="Upper probability")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        dist = bootstrap(args.values, nsamp=args.nsamp, fn=_STATISTICS[args.stat], rng=args.seed)
        lower, upper = boot_quantiles(dist, args.q1, args.q2)
        sig = boot_sig(dist, target=args.target, q1=args.q1, q2=args.q2)
    except ValueError as exc:
        parser.error(str(exc))

    print(_kv("Observations", len(args.values)))
    print(_kv(f"Observed {args.stat}", f"{_STATISTICS[args.stat](np.asarray(args.values)):.6g}"))
    print(_kv("Bootstrap samples", args.nsamp))
    print(_kv(f"[{args.q1}, {args.q2}] interval", f"[{lower:.6g}, {upper:.6g}]"))
    print(_kv(f"Target {args.target:g}", f"{int(sig)}, {_LABELS[int(sig)]}"))


if __name__ == "__main__":
    main()
