# gpcheck/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
from math import sqrt
from scipy.special import gammaln
import gpcheck.num as gnp


def matern32_kernel(h):
    """Matérn 3/2 kernel.

    .. math::
        K(h) = (1 + 2\\sqrt{3/2}\\,h) \\exp(-2\\sqrt{3/2}\\,h)

    Parameters
    ----------
    h : ndarray
        Distances between points.

    Returns
    -------
    ndarray
        Kernel values.
    """
    nu = 3.0 / 2.0
    c = 2.0 * sqrt(nu)
    t = c * h
    return (1.0 + t) * gnp.exp(-t)


def maternp_kernel(p: int, h):
    """Matérn kernel with half-integer regularity :math:`\\nu = p + 1/2`.

    .. math::
        K(h) = \\exp(-2\\sqrt{\\nu}\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(4\\sqrt{\\nu}h)^{\\,p-i}

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : ndarray
        Distances.

    Returns
    -------
    ndarray
        Kernel values.
    """
    gln = gammaln(gnp.arange(2 * p + 2))
    h = gnp.inftobigf(h)
    c = 2.0 * sqrt(p + 0.5)
    twoch = 2.0 * c * h
    polynomial = gnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = gnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return gnp.exp(-c * h) * polynomial


def maternp_covariance(x, y, p, param, pairwise=False):
    """Matérn covariance (:math:`\\nu = p+1/2`).

    .. math::
        k(x, y) = \\sigma^2 K(h(x, y))

    where h is the distance scaled by the length scales :math:`\\rho_j`.

    Parameters
    ----------
    x : ndarray, shape (nx, d)
    y : ndarray, shape (ny, d), or None
        None means y := x.
    p : int
        Half-integer regularity :math:`\\nu = p + 1/2`.
    param : ndarray, shape (1 + d,)
        [log(sigma2), log(1/rho_j)].
    pairwise : bool
        If True, return the (n,) vector k(x_i, y_i); else the (nx, ny) matrix.

    Returns
    -------
    ndarray
    """
    param = gnp.asarray(param)
    sigma2 = gnp.exp(param[0])
    loginvrho = param[1:]
    if y is None:
        y = x
    if pairwise:
        D = gnp.scaled_distance_elementwise(loginvrho, x, y)
    else:
        D = gnp.scaled_distance(loginvrho, x, y)
    return sigma2 * maternp_kernel(p, D)
