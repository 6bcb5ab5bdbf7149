# gpcheck/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Small utilities used across `gpcheck.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for index sets, noise
  levels and observed outcomes
- Mean/covariance validation at construction time
"""
import gpcheck.num as gnp


def ensure_index_set(x):
    """Convert an index set to a 2D backend array.

    Parameters
    ----------
    x : array_like
        Index set, either a 1D sequence of n scalar locations or an
        (n, d) array of n points in dimension d.

    Returns
    -------
    ndarray, shape (n, d)

    Raises
    ------
    ValueError
        If x has more than two dimensions.
    """
    x = gnp.asarray(x)
    if x.ndim == 0:
        raise ValueError("index set must be a sequence of locations, got a scalar")
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    elif x.ndim != 2:
        raise ValueError("index set should be a 1D or a 2D array")
    return x


def ensure_noise(noise, n):
    """Return the (n,) vector of observation noise variances.

    Parameters
    ----------
    noise : float or array_like, shape (n,)
        Per-index noise variance.
    n : int
        Number of indices.

    Raises
    ------
    ValueError
        If the noise vector has the wrong length, or has negative entries.
    """
    noise = gnp.asarray(noise)
    if noise.ndim == 0:
        noise = noise * gnp.ones((n,))
    elif noise.ndim != 1 or noise.shape[0] != n:
        raise ValueError(
            f"noise should be a scalar or a vector of length {n}, got shape {noise.shape}"
        )
    if gnp.any(noise < 0.0):
        raise ValueError("noise variances must be nonnegative")
    return noise


def ensure_outcome(y, n):
    """Validate an observed outcome of a n-dimensional finite distribution.

    Parameters
    ----------
    y : array_like, shape (n,) or (n, 1)

    Returns
    -------
    ndarray, shape (n,)
    """
    y = gnp.asarray(y)
    if y.ndim == 2:
        if y.shape[1] != 1:
            raise ValueError("y should only have one column if it's a 2D array")
        y = y.reshape(-1)
    if y.ndim != 1:
        raise ValueError("y should be 1D or a 2D column array")
    if y.shape[0] != n:
        raise ValueError(f"y should have length {n}, got {y.shape[0]}")
    return y


def validate_mean_and_covariance(mean, covariance):
    """Validate GP initialization inputs.

    Raises
    ------
    TypeError
        If `covariance` is not callable, or if `mean` is neither None
        nor callable.
    """
    if not callable(covariance):
        raise TypeError("covariance must be a callable function")
    if mean is not None and not callable(mean):
        raise TypeError("mean must be None (zero mean) or a callable function")
