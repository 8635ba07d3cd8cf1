"""
Project: StatMisc
File Name: test_ellipsoid.py
Description:
    Tests for whitening, Mahalanobis distance and ellipsoid membership.
"""

import math

import numpy as np
import pytest

from statmisc.errors import DomainError, EllipsoidError
from statmisc.geometry.ellipsoid import mahalanobis_sq, points_in_ellipse, whiten


SIGMA = np.array([[2.0, 0.6], [0.6, 1.0]])
MU = np.array([1.0, -1.0])


class TestWhiten:
    def test_identity_covariance_is_translation(self):
        z = whiten([[3.0, 4.0]], [1.0, 1.0], np.eye(2))
        np.testing.assert_allclose(z, [[2.0, 3.0]])

    def test_diagonal_covariance_scales(self):
        z = whiten([4.0, 9.0], [0.0, 0.0], np.diag([4.0, 9.0]))
        np.testing.assert_allclose(z, [[2.0, 3.0]])

    def test_whitened_cloud_has_identity_covariance(self):
        rng = np.random.default_rng(0)
        pts = rng.multivariate_normal(MU, SIGMA, size=20000)
        z = whiten(pts, MU, SIGMA)
        np.testing.assert_allclose(np.cov(z.T), np.eye(2), atol=0.05)


class TestMahalanobis:
    def test_matches_inverse_quadratic_form(self):
        pts = np.array([[0.0, 0.0], [2.5, 1.0], [-1.0, -3.0]])
        inv = np.linalg.inv(SIGMA)
        expected = [float((p - MU) @ inv @ (p - MU)) for p in pts]
        np.testing.assert_allclose(mahalanobis_sq(pts, MU, SIGMA), expected)

    def test_centre_is_zero(self):
        assert mahalanobis_sq(MU, MU, SIGMA)[0] == pytest.approx(0.0)


class TestPointsInEllipse:
    def test_centre_inside_for_any_p(self):
        for p in (0.01, 0.5, 0.95, 0.999):
            [(point, inside)] = points_in_ellipse(MU, MU, SIGMA, p=p)
            assert inside
            np.testing.assert_array_equal(point, MU)

    def test_order_and_flags(self):
        pts = np.array([[1.0, -1.0], [20.0, 20.0], [1.5, -0.5]])
        result = points_in_ellipse(pts, MU, SIGMA)
        assert [r.inside for r in result] == [True, False, True]
        for r, p in zip(result, pts):
            np.testing.assert_array_equal(r.point, p)

    def test_radius_is_chi_square_quantile(self):
        # Unit covariance in 1-D: inside iff x^2 < 3.841...
        result = points_in_ellipse([[1.95], [1.97]], [0.0], [[1.0]], p=0.95)
        assert [r.inside for r in result] == [True, False]

    def test_three_dimensions(self):
        result = points_in_ellipse([[0, 0, 0], [5, 5, 5]], [0, 0, 0], np.eye(3))
        assert [r.inside for r in result] == [True, False]

    def test_monotone_in_p(self):
        rng = np.random.default_rng(1)
        pts = rng.normal(size=(200, 2)) * 2
        previous = np.zeros(len(pts), dtype=bool)
        for p in (0.1, 0.5, 0.8, 0.95, 0.99):
            flags = np.array([r.inside for r in points_in_ellipse(pts, MU, SIGMA, p=p)])
            assert np.all(flags[previous])
            previous = flags

    def test_coverage_matches_p(self):
        rng = np.random.default_rng(2)
        pts = rng.multivariate_normal(MU, SIGMA, size=20000)
        frac = np.mean([r.inside for r in points_in_ellipse(pts, MU, SIGMA, p=0.9)])
        assert math.isclose(frac, 0.9, abs_tol=0.01)

    def test_not_positive_definite_raises(self):
        with pytest.raises(EllipsoidError):
            points_in_ellipse([[0, 0]], [0, 0], [[1.0, 2.0], [2.0, 1.0]])

    def test_singular_raises(self):
        with pytest.raises(EllipsoidError):
            points_in_ellipse([[0, 0]], [0, 0], [[1.0, 1.0], [1.0, 1.0]])

    def test_asymmetric_raises(self):
        with pytest.raises(EllipsoidError):
            points_in_ellipse([[0, 0]], [0, 0], [[1.0, 0.5], [0.0, 1.0]])

    def test_dimension_mismatch_raises(self):
        with pytest.raises(EllipsoidError):
            points_in_ellipse([[0, 0, 0]], [0, 0], np.eye(2))
        with pytest.raises(EllipsoidError):
            points_in_ellipse([[0, 0]], [0, 0, 0], np.eye(2))

    def test_invalid_p_raises(self):
        with pytest.raises(DomainError):
            points_in_ellipse([[0, 0]], [0, 0], np.eye(2), p=1.0)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            points_in_ellipse([[0, 0]], [0, 0], -np.eye(2))


class TestResultIsolation:
    def test_points_do_not_alias_input(self):
        pts = np.array([[1.0, -1.0], [20.0, 20.0]])
        result = points_in_ellipse(pts, MU, SIGMA)
        pts[0, 0] = 99.0
        np.testing.assert_array_equal(result[0].point, [1.0, -1.0])
