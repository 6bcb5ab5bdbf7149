# gpcheck/core/finite.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Finite-dimensional marginals of a Gaussian process.

A `FiniteGP` is the joint Gaussian distribution of a process restricted
to an index set x, with independent observation noise of variance
``noise[i]`` at x[i].
"""
import scipy.stats as stats
import gpcheck.num as gnp
from gpcheck.config import get_config

from .utils import ensure_index_set, ensure_noise, ensure_outcome


class FiniteGP:
    """Process ``f`` restricted to ``x`` with observation noise ``noise``.

    Parameters
    ----------
    f : AbstractGP
        Underlying process.
    x : array_like, shape (n,) or (n, d)
        Index set.
    noise : float or array_like, shape (n,), optional
        Observation noise variances. Defaults to the configured jitter.
    """

    def __init__(self, f, x, noise=None):
        self.f = f
        self.x = ensure_index_set(x)
        if noise is None:
            noise = get_config().jitter
        self.noise = ensure_noise(noise, self.x.shape[0])

    def __len__(self):
        return self.x.shape[0]

    def __repr__(self):
        return f"<gpcheck.core.FiniteGP n={len(self)} d={self.x.shape[1]}> " + hex(id(self))

    # ------------------------------------------------------------------
    # Moments
    # ------------------------------------------------------------------
    def mean(self):
        return self.f.mean(self.x)

    def cov(self):
        return self.f.cov(self.x) + gnp.diag(self.noise)

    def var(self):
        return self.f.var(self.x) + self.noise

    def mean_and_cov(self):
        m, C = self.f.mean_and_cov(self.x)
        return m, C + gnp.diag(self.noise)

    def mean_and_var(self):
        m, v = self.f.mean_and_var(self.x)
        return m, v + self.noise

    def marginals(self):
        """Univariate marginals, as a list of frozen `scipy.stats.norm`."""
        m, v = self.mean_and_var()
        s = gnp.sqrt(gnp.maximum(v, 0.0))
        return [stats.norm(loc=m[i], scale=s[i]) for i in range(len(self))]

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def rand(self, rng=None, n=None):
        """Draw samples.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Random source. Defaults to the generator of `gpcheck.num`.
        n : int, optional
            Number of samples. If None, a single sample is drawn.

        Returns
        -------
        ndarray, shape (len(fx),) if n is None, else (len(fx), n)
        """
        m, C = self.mean_and_cov()
        L = gnp.cholesky(C, name="cov(fx)")
        if n is None:
            return m + gnp.matmul(L, gnp.randn(len(self), rng=rng))
        return m.reshape(-1, 1) + gnp.matmul(L, gnp.randn(len(self), n, rng=rng))

    def rand_into(self, out, rng=None):
        """Draw samples in place into ``out``, of shape (len(fx),) or (len(fx), n)."""
        if out.ndim not in (1, 2) or out.shape[0] != len(self):
            raise ValueError(
                f"out should have shape ({len(self)},) or ({len(self)}, n), got {out.shape}"
            )
        n = None if out.ndim == 1 else out.shape[1]
        out[...] = self.rand(rng=rng, n=n)
        return out

    # ------------------------------------------------------------------
    # Likelihood and conditioning
    # ------------------------------------------------------------------
    def logpdf(self, y):
        """Log-density at y.

        Parameters
        ----------
        y : array_like, shape (n,) or (n, k)
            One observation, or k observations stored column-wise.

        Returns
        -------
        float, or ndarray of shape (k,)
        """
        y = gnp.asarray(y)
        if y.ndim not in (1, 2) or y.shape[0] != len(self):
            raise ValueError(f"y should have {len(self)} rows, got shape {y.shape}")
        m, C = self.mean_and_cov()
        L = gnp.cholesky(C, name="cov(fx)")
        delta = y - m if y.ndim == 1 else y - m.reshape(-1, 1)
        alpha = gnp.solve_triangular(L, delta, lower=True)
        norm2 = gnp.sum(alpha**2, axis=0)
        ldetK = gnp.logdet_from_chol(L)
        logp = -0.5 * (len(self) * gnp.log(2.0 * gnp.pi) + ldetK + norm2)
        return float(logp) if y.ndim == 1 else logp

    def posterior(self, y):
        """Posterior process of ``f`` given the observation y of this distribution."""
        from .posterior import PosteriorGP

        return PosteriorGP(self, ensure_outcome(y, len(self)))
