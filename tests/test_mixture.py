"""
Project: StatMisc
File Name: test_mixture.py
Description:
    Tests for collapsing mixture components into overall mean and variance.
"""

import logging

import numpy as np
import pytest

from statmisc.errors import MixtureError
from statmisc.mixture import mixture_params


class TestMixtureParams:
    def test_single_component_unchanged(self):
        mu = np.array([1.0, 2.0])
        sig = np.array([[2.0, 0.3], [0.3, 1.0]])
        mean, var = mixture_params([mu], [sig])
        np.testing.assert_allclose(mean, mu)
        np.testing.assert_allclose(var, sig)

    def test_uniform_weights_by_default(self):
        result = mixture_params([[0.0], [2.0]], [[[1.0]], [[1.0]]])
        np.testing.assert_allclose(result.mean, [1.0])
        # E[var] = 1, Var[mean] = 1
        np.testing.assert_allclose(result.var, [[2.0]])

    def test_weighted_two_components(self):
        means = [[0.0, 0.0], [4.0, 2.0]]
        covs = [np.eye(2), 2 * np.eye(2)]
        result = mixture_params(means, covs, weights=[0.75, 0.25])

        np.testing.assert_allclose(result.mean, [1.0, 0.5])
        e_var = 0.75 * np.eye(2) + 0.25 * 2 * np.eye(2)
        d0 = np.array([-1.0, -0.5])
        d1 = np.array([3.0, 1.5])
        v_exp = 0.75 * np.outer(d0, d0) + 0.25 * np.outer(d1, d1)
        np.testing.assert_allclose(result.var, e_var + v_exp)

    def test_identical_means_give_average_covariance(self):
        covs = [np.diag([1.0, 3.0]), np.diag([3.0, 1.0])]
        result = mixture_params([[5.0, 5.0], [5.0, 5.0]], covs)
        np.testing.assert_allclose(result.var, 2 * np.eye(2))

    def test_scalar_components(self):
        result = mixture_params([0.0, 10.0], [1.0, 4.0], weights=[0.5, 0.5])
        np.testing.assert_allclose(result.mean, [5.0])
        np.testing.assert_allclose(result.var, [[2.5 + 25.0]])

    def test_matches_sampled_mixture(self):
        rng = np.random.default_rng(0)
        means = [np.array([0.0, 0.0]), np.array([3.0, -1.0])]
        covs = [np.eye(2), np.array([[1.0, 0.8], [0.8, 2.0]])]
        w = [0.3, 0.7]
        comp = rng.choice(2, size=100000, p=w)
        samples = np.vstack([
            rng.multivariate_normal(means[k], covs[k], size=int(np.sum(comp == k))) for k in (0, 1)
        ])
        result = mixture_params(means, covs, weights=w)
        np.testing.assert_allclose(samples.mean(axis=0), result.mean, atol=0.03)
        np.testing.assert_allclose(np.cov(samples.T), result.var, atol=0.06)

    def test_weights_not_summing_to_one_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="statmisc.mixture"):
            mixture_params([[0.0], [1.0]], [[[1.0]], [[1.0]]], weights=[0.5, 0.6])
        assert "not 1" in caplog.text

    def test_weight_count_mismatch_raises(self):
        with pytest.raises(MixtureError):
            mixture_params([[0.0], [1.0]], [[[1.0]], [[1.0]]], weights=[1.0])

    def test_negative_weight_raises(self):
        with pytest.raises(MixtureError):
            mixture_params([[0.0], [1.0]], [[[1.0]], [[1.0]]], weights=[1.5, -0.5])

    def test_covariance_shape_mismatch_raises(self):
        with pytest.raises(MixtureError):
            mixture_params([[0.0, 0.0]], [np.eye(3)])

    def test_empty_raises(self):
        with pytest.raises(MixtureError):
            mixture_params([], [])
