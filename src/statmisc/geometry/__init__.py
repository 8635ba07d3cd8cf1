"""Ellipsoid-region geometry."""

from statmisc.geometry.ellipsoid import mahalanobis_sq, points_in_ellipse, whiten

__all__ = ["mahalanobis_sq", "points_in_ellipse", "whiten"]
