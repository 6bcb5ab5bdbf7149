"""
Unit tests for the reference Gaussian process (unittest version).
"""

import math
import unittest

import numpy as np
import scipy.stats as stats

import gpcheck as gc
import gpcheck.num as gnp
from gpcheck.config import get_config
from gpcheck.core import GP, FiniteGP, PosteriorGP, elbo, dtc, posterior


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def kernel(x, y, covparam, pairwise=False):
    p = 1
    return gc.kernel.maternp_covariance(x, y, p, covparam, pairwise)


def quadratic_mean(x, meanparam):
    return meanparam[0] + meanparam[1] * x[:, 0] ** 2


COVPARAM = gnp.array([math.log(1.5), math.log(1 / 0.5)])
X = [0.1, 0.5, 0.9]
Z = [-0.3, 0.2, 0.7, 1.2, 1.6]


# ======================================================================
#                           Test cases
# ======================================================================
class TestGP(unittest.TestCase):

    def setUp(self):
        self.f = GP(None, kernel, covparam=COVPARAM)
        self.g = GP(quadratic_mean, kernel, meanparam=[1.0, -2.0], covparam=COVPARAM)

    def test_invalid_covariance(self):
        with self.assertRaises(TypeError):
            GP(None, "matern")

    def test_invalid_mean(self):
        with self.assertRaises(TypeError):
            GP(3.0, kernel)

    def test_shapes(self):
        self.assertEqual(self.f.mean(X).shape, (3,))
        self.assertEqual(self.f.cov(X).shape, (3, 3))
        self.assertEqual(self.f.cov(X, Z).shape, (3, 5))
        self.assertEqual(self.f.var(Z).shape, (5,))

    def test_mean_function(self):
        m = self.g.mean(X)
        np.testing.assert_allclose(m, 1.0 - 2.0 * np.asarray(X) ** 2)
        np.testing.assert_array_equal(self.f.mean(X), np.zeros(3))

    def test_var_is_diag_cov(self):
        np.testing.assert_allclose(self.f.var(Z), np.diag(self.f.cov(Z)))
        np.testing.assert_allclose(self.f.var(Z), 1.5 * np.ones(5))

    def test_cross_covariance_transpose(self):
        np.testing.assert_allclose(self.f.cov(X, Z), self.f.cov(Z, X).T)

    def test_column_mismatch(self):
        with self.assertRaises(ValueError):
            self.f.cov(X, [[0.0, 1.0]])

    def test_index_set_validation(self):
        with self.assertRaises(ValueError):
            self.f.mean(0.5)
        with self.assertRaises(ValueError):
            self.f.mean(np.zeros((2, 2, 2)))

    def test_capability_sets(self):
        self.assertTrue(gc.interface.implements_process(self.f))
        self.assertTrue(gc.interface.implements_finite(self.f(X), secondary=True))
        self.assertFalse(gc.interface.implements_finite(self.f))
        self.assertEqual(
            gc.interface.missing_operations(self.f, ("mean", "rand")), ["rand"]
        )

    def test_str(self):
        s = str(self.g)
        self.assertIn("quadratic_mean", s)
        self.assertIn("kernel", s)
        self.assertIn("Zero Mean", str(self.f))


class TestFiniteGP(unittest.TestCase):

    def setUp(self):
        gnp.set_seed(1234)
        self.f = GP(quadratic_mean, kernel, meanparam=[1.0, -2.0], covparam=COVPARAM)

    def tearDown(self):
        gnp.set_seed(1234)

    def test_default_noise_is_jitter(self):
        fx = self.f(X)
        np.testing.assert_array_equal(fx.noise, get_config().jitter * np.ones(3))

    def test_noise_validation(self):
        with self.assertRaises(ValueError):
            self.f(X, [0.1, 0.2])
        with self.assertRaises(ValueError):
            self.f(X, -1.0)

    def test_cov_adds_noise(self):
        fx = self.f(X, [0.1, 0.2, 0.3])
        np.testing.assert_allclose(fx.cov(), self.f.cov(X) + np.diag([0.1, 0.2, 0.3]))
        np.testing.assert_allclose(fx.var(), self.f.var(X) + np.array([0.1, 0.2, 0.3]))

    def test_marginals(self):
        fx = self.f(X, 0.1)
        ms = fx.marginals()
        self.assertEqual(len(ms), 3)
        for mi, m, v in zip(ms, fx.mean(), fx.var()):
            self.assertEqual(mi.dist.name, "norm")
            self.assertAlmostEqual(mi.mean(), m)
            self.assertAlmostEqual(mi.var(), v)

    def test_logpdf_matches_scipy(self):
        fx = self.f(Z, 0.05)
        y = np.array([0.3, -0.1, 0.8, 1.1, -0.4])
        expected = stats.multivariate_normal(mean=fx.mean(), cov=fx.cov()).logpdf(y)
        self.assertAlmostEqual(fx.logpdf(y), expected, places=10)
        self.assertIsInstance(fx.logpdf(y), float)

    def test_logpdf_batch(self):
        fx = self.f(Z, 0.05)
        Y = fx.rand(gnp.default_rng(3), 4)
        logp = fx.logpdf(Y)
        self.assertEqual(logp.shape, (4,))
        for k in range(4):
            self.assertAlmostEqual(logp[k], fx.logpdf(Y[:, k]), places=10)

    def test_logpdf_wrong_length(self):
        with self.assertRaises(ValueError):
            self.f(X).logpdf([0.0, 1.0])

    def test_rand_shapes(self):
        fx = self.f(Z, 1e-9)
        self.assertEqual(fx.rand().shape, (5,))
        self.assertEqual(fx.rand(gnp.default_rng(0), 7).shape, (5, 7))

    def test_rand_with_explicit_generator_is_reproducible(self):
        fx = self.f(Z, 1e-9)
        np.testing.assert_array_equal(
            fx.rand(gnp.default_rng(11)), fx.rand(gnp.default_rng(11))
        )

    def test_default_generator_reseeding(self):
        fx = self.f(Z, 1e-9)
        gnp.set_seed(7)
        y1 = fx.rand()
        gnp.set_seed(7)
        y2 = fx.rand()
        np.testing.assert_array_equal(y1, y2)
        self.assertEqual(get_config().seed, 7)

    def test_rand_into(self):
        fx = self.f(Z, 1e-9)
        out = np.zeros(5)
        res = fx.rand_into(out, gnp.default_rng(5))
        self.assertIs(res, out)
        np.testing.assert_array_equal(out, fx.rand(gnp.default_rng(5)))
        out = np.zeros((5, 2))
        fx.rand_into(out, gnp.default_rng(5))
        np.testing.assert_array_equal(out, fx.rand(gnp.default_rng(5), 2))
        with self.assertRaises(ValueError):
            fx.rand_into(np.zeros(4))

    def test_sample_statistics(self):
        fx = self.f([0.0, 0.4], 0.1)
        Y = fx.rand(gnp.default_rng(0), 20000)
        np.testing.assert_allclose(Y.mean(axis=1), fx.mean(), atol=0.05)
        np.testing.assert_allclose(np.cov(Y), fx.cov(), atol=0.08)


class TestPosteriorGP(unittest.TestCase):

    def setUp(self):
        self.f = GP(quadratic_mean, kernel, meanparam=[1.0, -2.0], covparam=COVPARAM)
        self.fx = self.f(X, 1e-6)
        self.y = np.array([0.5, -0.2, 1.3])

    def test_type(self):
        post = self.fx.posterior(self.y)
        self.assertIsInstance(post, PosteriorGP)
        self.assertIsInstance(posterior(self.fx, self.y), PosteriorGP)
        self.assertIsInstance(post(Z), FiniteGP)

    def test_interpolation(self):
        post = self.fx.posterior(self.y)
        np.testing.assert_allclose(post.mean(X), self.y, atol=1e-4)
        np.testing.assert_allclose(post.var(X), np.zeros(3), atol=1e-4)

    def test_variance_reduction(self):
        post = self.fx.posterior(self.y)
        v = post.var(Z)
        self.assertTrue(np.all(v <= self.f.var(Z) + 1e-12))
        self.assertTrue(np.all(v > -1e-10))

    def test_cross_covariance(self):
        post = self.fx.posterior(self.y)
        np.testing.assert_allclose(post.cov(X, Z), post.cov(Z, X).T, atol=1e-10)
        np.testing.assert_allclose(np.diag(post.cov(Z)), post.var(Z), atol=1e-10)

    def test_column_outcome(self):
        post = self.fx.posterior(self.y.reshape(-1, 1))
        np.testing.assert_allclose(post.mean(Z), self.fx.posterior(self.y).mean(Z))

    def test_outcome_validation(self):
        with self.assertRaises(ValueError):
            self.fx.posterior([0.0, 1.0])
        with self.assertRaises(ValueError):
            self.fx.posterior(np.zeros((3, 2)))

    def test_sequential_conditioning(self):
        # conditioning on x[:2] then x[2:] equals conditioning on x
        xs = np.asarray(X)
        noise = 0.01
        post = self.f(xs, noise).posterior(self.y)
        post1 = self.f(xs[:2], noise).posterior(self.y[:2])
        post2 = post1(xs[2:], noise).posterior(self.y[2:])
        np.testing.assert_allclose(post2.mean(Z), post.mean(Z), atol=1e-10)
        np.testing.assert_allclose(post2.cov(Z), post.cov(Z), atol=1e-10)


class TestApproximations(unittest.TestCase):

    def setUp(self):
        self.f = GP(None, kernel, covparam=COVPARAM)
        self.fx = self.f(Z, 0.1)
        self.y = self.fx.rand(gnp.default_rng(2))

    def test_exact_with_all_inducing_points(self):
        logp = self.fx.logpdf(self.y)
        self.assertAlmostEqual(dtc(self.fx, self.y, self.f(Z)), logp, places=6)
        self.assertAlmostEqual(elbo(self.fx, self.y, self.f(Z)), logp, places=6)

    def test_methods_delegate(self):
        fz = self.f(X)
        self.assertEqual(self.f.elbo(self.fx, self.y, fz), elbo(self.fx, self.y, fz))
        self.assertEqual(self.f.dtc(self.fx, self.y, fz), dtc(self.fx, self.y, fz))

    def test_elbo_is_a_lower_bound(self):
        logp = self.fx.logpdf(self.y)
        for z in ([0.5], X, [-0.2, 0.4, 1.0, 1.4]):
            fz = self.f(z)
            lb = elbo(self.fx, self.y, fz)
            self.assertLessEqual(lb, logp)
            self.assertLessEqual(lb, dtc(self.fx, self.y, fz))

    def test_elbo_needs_positive_noise(self):
        fx = self.f(Z, [0.1, 0.0, 0.1, 0.1, 0.1])
        with self.assertRaises(ValueError):
            elbo(fx, self.y, self.f(X))


class TestKernels(unittest.TestCase):

    def test_maternp_one_is_matern32(self):
        h = np.linspace(0.0, 3.0, 31)
        np.testing.assert_allclose(
            gc.kernel.maternp_kernel(1, h), gc.kernel.matern32_kernel(h)
        )

    def test_maternp_zero_is_exponential(self):
        h = np.linspace(0.0, 3.0, 31)
        np.testing.assert_allclose(
            gc.kernel.maternp_kernel(0, h), np.exp(-math.sqrt(2.0) * h)
        )

    def test_pairwise_is_diagonal(self):
        x = np.array([[0.0], [0.3], [1.1]])
        y = np.array([[0.2], [0.3], [0.0]])
        for p in (0, 1, 2):
            K = gc.kernel.maternp_covariance(x, y, p, COVPARAM)
            k = gc.kernel.maternp_covariance(x, y, p, COVPARAM, pairwise=True)
            np.testing.assert_allclose(k, np.diag(K))

    def test_variance_at_zero_distance(self):
        x = np.array([[0.0, 1.0], [2.0, 3.0]])
        param = [math.log(2.5), 0.0, 0.0]
        np.testing.assert_allclose(
            gc.kernel.gaussian_covariance(x, None, param, pairwise=True), [2.5, 2.5]
        )
        np.testing.assert_allclose(
            gc.kernel.maternp_covariance(x, None, 2, param, pairwise=True), [2.5, 2.5]
        )


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = get_config()
        self.assertEqual(config.noise_variance, 1e-9)
        self.assertEqual(config.tolerance, 1e-12)
        self.assertEqual(config.jitter, 1e-18)

    def test_update(self):
        config = get_config()
        config.update(tolerance=1e-10)
        try:
            self.assertEqual(get_config().tolerance, 1e-10)
        finally:
            config.update(tolerance=1e-12)

    def test_unknown_entry(self):
        with self.assertRaises(AttributeError):
            get_config().update(no_such_entry=1.0)

    def test_version(self):
        self.assertEqual(gc.__version__, get_config().version)


# ----------------------------------------------------------------------
# Run tests
# ----------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main(verbosity=2)
