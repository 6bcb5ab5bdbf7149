# gpcheck/testutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Consistency tests for implementations of the GP API.

Three entry points, one per capability tier (see `gpcheck.interface`):

verify_finite_primary(rng, fx, tolerance=None)
    Primary public API of a finite distribution.
verify_finite_full(rng, fx, tolerance=None)
    Primary and secondary public APIs; runs `verify_finite_primary`.
verify_process(rng, f, x, z, tolerance=None, noise_variance=None)
    Internal process API; runs `verify_finite_full` on f(x, noise_variance).

These are consistency checks, not correctness tests in the absolute
sense: for instance, samples are checked for shape and type, not for
their distribution. Each function raises AssertionError on the first
violated property and returns None otherwise. Errors raised by the
object under test propagate unchanged.

Examples
--------
>>> import gpcheck as gc
>>> import gpcheck.num as gnp
>>> def covariance(x, y, covparam, pairwise=False):
...     return gc.kernel.maternp_covariance(x, y, 1, covparam, pairwise)
>>> f = gc.GP(None, covariance, covparam=[0.0, 0.0])
>>> rng = gnp.default_rng(0)
>>> gc.verify_process(rng, f, [0.1, 0.5, 0.9], [-0.2, 0.3, 0.7, 1.1, 1.4])
"""
import gpcheck.num as gnp
from gpcheck.config import get_config, get_logger

from .interface import (
    PROCESS_INTERFACE,
    FINITE_PRIMARY_INTERFACE,
    FINITE_SECONDARY_INTERFACE,
    missing_operations,
    implements_process,
)

N_SAMPLES = 3

_logger = get_logger()


def _check(condition, message):
    if not condition:
        raise AssertionError(message)


def _check_operations(obj, operations, what):
    missing = missing_operations(obj, operations)
    _check(not missing, f"{what} does not implement: {', '.join(missing)}")


def isapprox(a, b, rtol=None, atol=0.0):
    """Approximate equality of two arrays (or scalars) of the same shape.

    Returns True if ``norm(a - b) <= max(atol, rtol * max(norm(a), norm(b)))``.
    When `rtol` is None, it defaults to sqrt(eps) if atol is zero and to
    zero otherwise.
    """
    a = gnp.asarray(a)
    b = gnp.asarray(b)
    if a.shape != b.shape:
        return False
    if rtol is None:
        rtol = gnp.sqrt(gnp.eps) if atol == 0.0 else 0.0
    d = gnp.norm(a - b)
    return bool(d <= max(atol, rtol * max(gnp.norm(a), gnp.norm(b))))


def _is_normal(d):
    # frozen scipy.stats distributions carry their family in d.dist.name
    dist = getattr(d, "dist", None)
    return getattr(dist, "name", None) == "norm"


def _resolve_defaults(tolerance, noise_variance=None):
    config = get_config()
    if tolerance is None:
        tolerance = config.tolerance
    if noise_variance is None:
        noise_variance = config.noise_variance
    return tolerance, noise_variance


def verify_finite_primary(rng, fx, tolerance=None):
    """Basic consistency tests for the primary public finite-distribution API.

    Run these tests if you only implement the primary public API.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random source used for the explicit-source sampling calls.
    fx : object
        Finite distribution implementing FINITE_PRIMARY_INTERFACE.
    tolerance : float, optional
        Variances must exceed -tolerance. Defaults to 1e-12
        (`gpcheck.config`).

    Raises
    ------
    AssertionError
        On the first violated property.
    """
    tolerance, _ = _resolve_defaults(tolerance)
    _check_operations(fx, FINITE_PRIMARY_INTERFACE, "fx")
    n = len(fx)
    _logger.debug("Checking primary finite API (n=%d)", n)

    y = fx.rand(rng)
    _check(gnp.isreal_array(y, 1), "rand(rng, fx) should return a 1D real array")
    _check(y.shape == (n,), f"rand(rng, fx) has shape {y.shape}, expected ({n},)")

    y = fx.rand()
    _check(gnp.isreal_array(y, 1), "rand(fx) should return a 1D real array")
    _check(y.shape == (n,), f"rand(fx) has shape {y.shape}, expected ({n},)")

    fx.rand_into(y, rng)
    fx.rand_into(y)
    _check(y.shape == (n,), "rand_into(fx, y) changed the shape of y")
    _check(bool(gnp.all(gnp.isfinite(y))), "rand_into(fx, y) left non-finite values in y")

    Y = fx.rand(rng, N_SAMPLES)
    _check(gnp.isreal_array(Y, 2), "rand(rng, fx, n) should return a 2D real array")
    _check(
        Y.shape == (n, N_SAMPLES),
        f"rand(rng, fx, n) has shape {Y.shape}, expected ({n}, {N_SAMPLES})",
    )

    Y = fx.rand(n=N_SAMPLES)
    _check(gnp.isreal_array(Y, 2), "rand(fx, n) should return a 2D real array")
    _check(
        Y.shape == (n, N_SAMPLES),
        f"rand(fx, n) has shape {Y.shape}, expected ({n}, {N_SAMPLES})",
    )

    fx.rand_into(Y, rng)
    fx.rand_into(Y)
    _check(Y.shape == (n, N_SAMPLES), "rand_into(fx, Y) changed the shape of Y")

    ms = fx.marginals()
    _check(len(ms) == n, f"marginals(fx) has {len(ms)} elements, expected {n}")
    _check(all(_is_normal(m) for m in ms), "marginals(fx) should be normal distributions")

    m = fx.mean()
    v = fx.var()
    _check(isapprox(m, [mi.mean() for mi in ms]), "mean(fx) is inconsistent with marginals(fx)")
    _check(isapprox(v, [mi.var() for mi in ms]), "var(fx) is inconsistent with marginals(fx)")
    m_joint, v_joint = fx.mean_and_var()
    _check(isapprox(m_joint, m), "mean_and_var(fx)[0] is inconsistent with mean(fx)")
    _check(isapprox(v_joint, v), "mean_and_var(fx)[1] is inconsistent with var(fx)")

    _check(bool(gnp.all(gnp.asarray(v) > -tolerance)), "var(fx) has negative entries")

    _check(gnp.isreal_scalar(fx.logpdf(y)), "logpdf(fx, y) should be a real scalar")

    _check(implements_process(fx.posterior(y)), "posterior(fx, y) should be a process")


def verify_finite_full(rng, fx, tolerance=None):
    """Consistency tests for the primary and secondary public finite APIs.

    Runs `verify_finite_primary`, then checks `cov` and `mean_and_cov`
    against `var` and `mean`, and that cov(fx) is symmetric positive
    semi-definite. Parameters as in `verify_finite_primary`.
    """
    tolerance, _ = _resolve_defaults(tolerance)
    verify_finite_primary(rng, fx, tolerance=tolerance)

    _check_operations(fx, FINITE_SECONDARY_INTERFACE, "fx")
    _logger.debug("Checking secondary finite API (n=%d)", len(fx))

    C = gnp.asarray(fx.cov())
    _check(isapprox(gnp.diag(C), fx.var()), "diag(cov(fx)) is inconsistent with var(fx)")

    m_joint, C_joint = fx.mean_and_cov()
    _check(isapprox(m_joint, fx.mean()), "mean_and_cov(fx)[0] is inconsistent with mean(fx)")
    _check(isapprox(C_joint, C), "mean_and_cov(fx)[1] is inconsistent with cov(fx)")

    _check(gnp.eigmin(C) > -tolerance, "cov(fx) is not positive semi-definite")
    _check(isapprox(C, C.T), "cov(fx) is not symmetric")


def verify_process(rng, f, x, z, tolerance=None, noise_variance=None):
    """Consistency tests for the internal process API.

    Runs `verify_finite_full` on f(x, noise_variance), and compares the
    elbo and dtc approximations with the exact log-likelihood.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random source.
    f : object
        Process implementing PROCESS_INTERFACE.
    x, z : array_like
        Index sets of different lengths.
    tolerance : float, optional
        Eigenvalue / variance tolerance, defaults to 1e-12.
    noise_variance : float, optional
        Observation noise used to restrict f, defaults to 1e-9.

    Raises
    ------
    ValueError
        If x and z have the same length (checked before anything else).
    AssertionError
        On the first violated property.
    """
    if len(x) == len(z):
        raise ValueError("x and z should be of different lengths.")
    tolerance, noise_variance = _resolve_defaults(tolerance, noise_variance)
    _check_operations(f, PROCESS_INTERFACE, "f")
    nx, nz = len(x), len(z)
    _logger.debug("Checking process API (len(x)=%d, len(z)=%d)", nx, nz)

    m = f.mean(x)
    _check(gnp.isreal_array(m, 1), "mean(f, x) should be a 1D real array")
    _check(m.shape == (nx,), f"mean(f, x) has shape {m.shape}, expected ({nx},)")

    C_xz = f.cov(x, z)
    _check(gnp.isreal_array(C_xz, 2), "cov(f, x, z) should be a 2D real array")
    _check(C_xz.shape == (nx, nz), f"cov(f, x, z) has shape {C_xz.shape}, expected ({nx}, {nz})")
    _check(isapprox(C_xz, gnp.asarray(f.cov(z, x)).T), "cov(f, x, z) is not cov(f, z, x)^T")

    C_xx = f.cov(x)
    _check(gnp.isreal_array(C_xx, 2), "cov(f, x) should be a 2D real array")
    _check(C_xx.shape == (nx, nx), f"cov(f, x) has shape {C_xx.shape}, expected ({nx}, {nx})")
    _check(gnp.eigmin(C_xx) > -tolerance, "cov(f, x) is not positive semi-definite")
    _check(isapprox(C_xx, f.cov(x, x)), "cov(f, x) is inconsistent with cov(f, x, x)")

    v = f.var(x)
    _check(gnp.isreal_array(v, 1), "var(f, x) should be a 1D real array")
    _check(v.shape == (nx,), f"var(f, x) has shape {v.shape}, expected ({nx},)")
    _check(isapprox(v, gnp.diag(C_xx)), "var(f, x) is inconsistent with diag(cov(f, x))")

    m_joint, C_joint = f.mean_and_cov(x)
    _check(isapprox(m_joint, m), "mean_and_cov(f, x)[0] is inconsistent with mean(f, x)")
    _check(isapprox(C_joint, C_xx), "mean_and_cov(f, x)[1] is inconsistent with cov(f, x)")

    m_joint, v_joint = f.mean_and_var(x)
    _check(isapprox(m_joint, m), "mean_and_var(f, x)[0] is inconsistent with mean(f, x)")
    _check(isapprox(v_joint, v), "mean_and_var(f, x)[1] is inconsistent with var(f, x)")

    verify_finite_full(rng, f(x, noise_variance), tolerance=tolerance)

    fx = f(x, noise_variance)
    fz = f(z, noise_variance)

    # restriction commutes with the process-level accessors
    _check(isapprox(fx.mean(), m), "mean(f(x, s)) is inconsistent with mean(f, x)")
    _check(
        isapprox(fx.cov(), C_xx + noise_variance * gnp.eye(nx)),
        "cov(f(x, s)) is inconsistent with cov(f, x) + s I",
    )
    _check(isapprox(fx.var(), v + noise_variance), "var(f(x, s)) is inconsistent with var(f, x) + s")

    y = fx.rand(rng)
    _check(len(y) == nx, f"rand(f(x, s)) has length {len(y)}, expected {nx}")
    logp = fx.logpdf(y)
    _check(gnp.isreal_scalar(logp), "logpdf(f(x, s), y) should be a real scalar")

    rtol, atol = get_config().bound_rtol, get_config().bound_atol
    elbo_x = f.elbo(fx, y, f(x))
    elbo_z = f.elbo(fx, y, fz)
    dtc_x = f.dtc(fx, y, f(x))
    _logger.debug(
        "logpdf=%.10g, elbo(f(x))=%.10g, elbo(f(z))=%.10g, dtc(f(x))=%.10g",
        logp, elbo_x, elbo_z, dtc_x,
    )
    _check(
        isapprox(elbo_x, logp, rtol=rtol, atol=atol),
        f"elbo(fx, y, f(x)) = {elbo_x} differs from logpdf(fx, y) = {logp}",
    )
    _check(
        elbo_z <= logp,
        f"elbo(fx, y, f(z)) = {elbo_z} exceeds logpdf(fx, y) = {logp}",
    )
    _check(
        isapprox(dtc_x, logp, rtol=rtol, atol=atol),
        f"dtc(fx, y, f(x)) = {dtc_x} differs from logpdf(fx, y) = {logp}",
    )
