# gpcheck/core/process.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Gaussian process classes.

`AbstractGP` implements the process-level API on top of three
primitives (`_mean`, `_cov`, `_var`) that subclasses provide. `GP` is
the prior process defined by a mean function and a covariance function.
"""
import gpcheck.num as gnp

from . import approx
from .finite import FiniteGP
from .utils import ensure_index_set, validate_mean_and_covariance


class AbstractGP:
    """Base class of the reference processes.

    Public API (methods)
    --------------------
    __call__
        Restriction to an index set with observation noise (FiniteGP).
    mean, cov, var
        Mean vector, (cross-)covariance matrix, variance vector.
    mean_and_cov, mean_and_var
        Joint accessors.
    elbo, dtc
        Approximate-inference bounds of the log-likelihood of a FiniteGP.
    """

    def __call__(self, x, noise=None):
        """Restrict the process to the index set x.

        Parameters
        ----------
        x : array_like, shape (n,) or (n, d)
            Index set.
        noise : float or array_like, shape (n,), optional
            Observation noise variance. None means the configured jitter
            (see `gpcheck.config`).

        Returns
        -------
        FiniteGP
        """
        return FiniteGP(self, x, noise)

    # primitives, x and z are (n, d) arrays
    def _mean(self, x):
        raise NotImplementedError

    def _cov(self, x, z=None):
        raise NotImplementedError

    def _var(self, x):
        raise NotImplementedError

    def mean(self, x):
        """Mean of the process at x, shape (n,)."""
        return self._mean(ensure_index_set(x))

    def cov(self, x, z=None):
        """Covariance matrix between x and z, shape (len(x), len(z)).

        If z is None, returns the (len(x), len(x)) auto-covariance of x.
        """
        x = ensure_index_set(x)
        if z is None:
            return self._cov(x)
        z = ensure_index_set(z)
        if x.shape[1] != z.shape[1]:
            raise ValueError("x and z must have the same number of columns")
        return self._cov(x, z)

    def var(self, x):
        """Variance of the process at x, shape (n,)."""
        return self._var(ensure_index_set(x))

    def mean_and_cov(self, x):
        x = ensure_index_set(x)
        return self._mean(x), self._cov(x)

    def mean_and_var(self, x):
        x = ensure_index_set(x)
        return self._mean(x), self._var(x)

    def elbo(self, fx, y, fz):
        """Variational free energy lower bound, see `gpcheck.core.approx.elbo`."""
        return approx.elbo(fx, y, fz)

    def dtc(self, fx, y, fz):
        """DTC approximation, see `gpcheck.core.approx.dtc`."""
        return approx.dtc(fx, y, fz)


class GP(AbstractGP):
    """Gaussian Process (GP) prior.

    Attributes
    ----------
    mean_function : callable or None
        Mean of the GP, called as ``m = mean_function(x, meanparam)``
        where `x` is an (n x d) array; returns an (n,) or (n, 1) array.
        None means zero mean.
    covariance : callable
        Covariance of the GP, called as

        K = covariance(x, y, covparam, pairwise),

        where x is (n x d) and y is either an (m x d) array or None,
        meaning y := x. Pairwise indicates if an (n x m) covariance
        matrix (pairwise == False) or an (n,) vector (n == m,
        pairwise = True) should be returned.
    meanparam : array_like, optional
        Parameters of the mean function.
    covparam : array_like, optional
        Parameters of the covariance function.

    Examples
    --------
    >>> import gpcheck as gc
    >>> def covariance(x, y, covparam, pairwise=False):
    ...     return gc.kernel.maternp_covariance(x, y, 1, covparam, pairwise)
    >>> f = gc.GP(None, covariance, covparam=[0.0, 0.0])
    >>> fx = f([0.1, 0.5, 0.9], 1e-9)
    >>> y = fx.rand()
    >>> fx.logpdf(y)
    """

    def __init__(self, mean, covariance, meanparam=None, covparam=None):
        validate_mean_and_covariance(mean, covariance)
        self.mean_function = mean
        self.covariance = covariance
        self.meanparam = meanparam
        self.covparam = covparam

    def __repr__(self):
        output = str("<gpcheck.core.GP object> " + hex(id(self)))
        return output

    def __str__(self):
        if self.mean_function is None:
            mean_desc = "Zero Mean"
        else:
            mean_desc = getattr(self.mean_function, "__name__", str(self.mean_function))
        cov_desc = getattr(self.covariance, "__name__", str(self.covariance))
        return (
            f"GP:\n"
            f"  Mean Function: {mean_desc}\n"
            f"  Mean Parameters: {self.meanparam}\n"
            f"  Covariance Function: {cov_desc}\n"
            f"  Covariance Parameters: {self.covparam}"
        )

    def _mean(self, x):
        if self.mean_function is None:
            return gnp.zeros((x.shape[0],))
        return gnp.asarray(self.mean_function(x, self.meanparam)).reshape(-1)

    def _cov(self, x, z=None):
        return self.covariance(x, z, self.covparam)

    def _var(self, x):
        return self.covariance(x, None, self.covparam, pairwise=True)
