# gpcheck/core/posterior.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Exact posterior process.

Given a FiniteGP fx = f(x, noise) and an observation y of fx, the
posterior of f is the Gaussian process with

    m_post(t)    = m(t) + k(t, x) C^{-1} (y - m(x))
    k_post(t, s) = k(t, s) - k(t, x) C^{-1} k(x, s)

where C = k(x, x) + diag(noise). The posterior is itself a process, so it
can be restricted, conditioned again, or used in the bounds of
`gpcheck.core.approx`.
"""
import gpcheck.num as gnp

from .process import AbstractGP


class PosteriorGP(AbstractGP):
    """Posterior of ``fx.f`` given the observation ``y`` of ``fx``.

    Parameters
    ----------
    fx : FiniteGP
        Distribution of the observations.
    y : ndarray, shape (n,)
        Observed outcome.
    """

    def __init__(self, fx, y):
        self.prior = fx.f
        self.x = fx.x
        self.y = y
        m, C = fx.mean_and_cov()
        # alpha = C^{-1} (y - m), C = L L^T
        self.alpha, self.L = gnp.cholesky_solve(C, y - m, name="cov(fx)")

    def __repr__(self):
        return f"<gpcheck.core.PosteriorGP n={self.x.shape[0]}> " + hex(id(self))

    def _whiten(self, t):
        # L^{-1} k(x, t), shape (n, nt)
        return gnp.solve_triangular(self.L, self.prior.cov(self.x, t), lower=True)

    def _mean(self, t):
        return self.prior.mean(t) + gnp.matmul(self.prior.cov(t, self.x), self.alpha)

    def _cov(self, t, s=None):
        At = self._whiten(t)
        if s is None:
            return self.prior.cov(t) - gnp.matmul(At.T, At)
        As = self._whiten(s)
        return self.prior.cov(t, s) - gnp.matmul(At.T, As)

    def _var(self, t):
        At = self._whiten(t)
        return self.prior.var(t) - gnp.sum(At**2, axis=0)
