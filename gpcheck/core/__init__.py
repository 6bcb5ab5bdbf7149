# gpcheck/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------

"""
Reference Gaussian process implementation.

This subpackage contains a small dense implementation of the GP API
checked by `gpcheck.testutils`: prior processes, their finite
restrictions, exact posteriors, and the DTC / VFE approximations of
the log-likelihood.

Public API
----------
GP : class
    Prior process defined by a mean and a covariance function.
FiniteGP : class
    Process restricted to an index set, with observation noise.
PosteriorGP : class
    Exact posterior process.
posterior : function
    Posterior process given a FiniteGP and an observation.
elbo, dtc : functions
    Approximations of the log-likelihood with an inducing distribution.
"""

from .finite import FiniteGP
from .process import AbstractGP, GP
from .posterior import PosteriorGP
from .approx import elbo, dtc


def posterior(fx, y):
    """Posterior process of ``fx.f`` given the observation y of ``fx``."""
    return fx.posterior(y)


__all__ = ["AbstractGP", "GP", "FiniteGP", "PosteriorGP", "posterior", "elbo", "dtc"]
