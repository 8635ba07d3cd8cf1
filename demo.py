"""StatMisc Demo — one worked example per routine.

Usage:
    uv run python demo.py
"""

import numpy as np

from statmisc import (
    boot_quantiles,
    boot_sig,
    bootstrap,
    chk,
    gamma_params,
    matcheck,
    mixture_params,
    points_in_ellipse,
)


def main():
    rng = np.random.default_rng(2024)

    # Bootstrap the mean of a small sample
    x = np.array([1, 2, 3, 4, 5])
    dist = bootstrap(x, nsamp=1000, rng=rng)
    lower, upper = boot_quantiles(dist)
    print("=" * 60)
    print("BOOTSTRAP")
    print("=" * 60)
    print(f"  Sample: {x.tolist()}")
    print(f"  Bootstrap mean: {dist.mean():.3f}  95% interval: [{lower:.3f}, {upper:.3f}]")
    for target in (0.0, 3.0, 6.0):
        print(f"  boot_sig(target={target}): {int(boot_sig(dist, target=target))}")

    # Ellipsoid membership
    mu = np.array([0.0, 0.0])
    sigma = np.array([[2.0, 0.8], [0.8, 1.0]])
    points = np.array([[0.0, 0.0], [1.0, 1.0], [3.0, -2.0]])
    print("\n" + "=" * 60)
    print("ELLIPSOID (p = 0.95)")
    print("=" * 60)
    for point, inside in points_in_ellipse(points, mu, sigma):
        print(f"  {point.tolist()}: {'inside' if inside else 'outside'}")

    # Mixture moments
    mean, var = mixture_params(
        [[0.0, 0.0], [4.0, 2.0]],
        [np.eye(2), 2 * np.eye(2)],
        weights=[0.75, 0.25],
    )
    print("\n" + "=" * 60)
    print("MIXTURE")
    print("=" * 60)
    print(f"  Mean: {mean.tolist()}")
    print(f"  Variance:\n{var}")

    # Gamma parameters
    by_mode = gamma_params(2.0, 1.0)
    by_mean = gamma_params(2.0, 1.0, is_mode=False)
    print("\n" + "=" * 60)
    print("GAMMA")
    print("=" * 60)
    print(f"  mode=2, var=1 -> shape={by_mode.shape:.4f}, rate={by_mode.rate:.4f}")
    print(f"  mean=2, var=1 -> shape={by_mean.shape:.4f}, rate={by_mean.rate:.4f}")

    # Verification helpers
    print("\n" + "=" * 60)
    print("CHECKS")
    print("=" * 60)
    print(f"  chk(pi, 3.14159, dp=5): {chk(np.pi, 3.14159, dp=5)}")
    print(f"  (AB)^T == B^T A^T: {matcheck(lambda A, B, C, D: (A @ B).T, lambda A, B, C, D: B.T @ A.T)}")


if __name__ == "__main__":
    main()
