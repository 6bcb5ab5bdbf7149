# gpcheck/core/approx.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Inducing-point approximations of the log-likelihood of a FiniteGP.

Given fx = f(x, S) with S = diag(noise), an observation y, and an
inducing distribution fz = f(z, noise_z), define

    Kzz = cov(fz) (includes noise_z),   Kzx = cov(f, z, x)
    Q   = Kzx^T Kzz^{-1} Kzx = V^T V,   V = Lz^{-1} Kzx

dtc
    log N(y; m(x), Q + S), the deterministic training conditional
    (Seeger et al., 2003).
elbo
    dtc - tr(S^{-1} (Kxx - Q)) / 2, the variational free energy lower
    bound of Titsias (2009). elbo <= logpdf(fx, y), with equality when z
    equals x and noise_z is negligible.

Q + S is factorized directly as an (n, n) matrix, so the cost is O(n^3)
whatever the number of inducing points.
"""
import gpcheck.num as gnp

from .utils import ensure_outcome


def _nystrom_terms(fx, fz):
    """Return V = Lz^{-1} Kzx, shape (m, n)."""
    Kzz = fz.cov()
    Lz = gnp.cholesky(Kzz, name="cov(fz)")
    Kzx = fx.f.cov(fz.x, fx.x)
    return gnp.solve_triangular(Lz, Kzx, lower=True)


def _gaussian_logpdf(y, m, C, name):
    L = gnp.cholesky(C, name=name)
    alpha = gnp.solve_triangular(L, y - m, lower=True)
    norm2 = gnp.einsum("i, i", alpha, alpha)
    ldet = gnp.logdet_from_chol(L)
    return -0.5 * (y.shape[0] * gnp.log(2.0 * gnp.pi) + ldet + norm2)


def _dtc(fx, y, V):
    Q = gnp.matmul(V.T, V)
    C = gnp.symmetrize(Q) + gnp.diag(fx.noise)
    return _gaussian_logpdf(y, fx.mean(), C, name="Q + S")


def dtc(fx, y, fz):
    """Deterministic training conditional approximation of ``fx.logpdf(y)``.

    Parameters
    ----------
    fx : FiniteGP
        Distribution of the observations (noise must be positive).
    y : array_like, shape (n,)
        Observed outcome.
    fz : FiniteGP
        Inducing distribution, a restriction of the same process.

    Returns
    -------
    float
    """
    y = ensure_outcome(y, len(fx))
    V = _nystrom_terms(fx, fz)
    return float(_dtc(fx, y, V))


def elbo(fx, y, fz):
    """Variational free energy lower bound of ``fx.logpdf(y)``.

    Parameters and return value as in `dtc`. The noise of fx must be
    strictly positive.
    """
    y = ensure_outcome(y, len(fx))
    if gnp.any(fx.noise <= 0.0):
        raise ValueError("elbo needs strictly positive observation noise in fx")
    V = _nystrom_terms(fx, fz)
    # tr(S^{-1} (Kxx - Q))
    trace_term = gnp.sum((fx.f.var(fx.x) - gnp.sum(V**2, axis=0)) / fx.noise)
    return float(_dtc(fx, y, V) - 0.5 * trace_term)
