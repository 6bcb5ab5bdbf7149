# gpcheck/kernel/gaussian.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
import gpcheck.num as gnp


def gaussian_kernel(h):
    """Gaussian (squared exponential) kernel.

    .. math::
        K(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h : ndarray
        Distances between points.

    Returns
    -------
    ndarray
        Kernel values.
    """
    return gnp.exp(-0.5 * h**2)


def gaussian_covariance(x, y, param, pairwise=False):
    """Gaussian covariance :math:`\\sigma^2 \\exp(-h^2/2)`.

    Same calling convention as ``maternp_covariance``: ``param`` is
    [log(sigma2), log(1/rho_j)] and ``y=None`` means y := x.
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
    return sigma2 * gaussian_kernel(D)
