# gpcheck/num.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""NumPy numerical layer for gpcheck.

All numerical code of the package goes through this module
(``import gpcheck.num as gnp``). It also owns the process-wide default
random generator used when no random source is given to a sampling
routine.
"""

from typing import Any, Optional

from gpcheck.config import get_config, get_logger

ArrayLike = Any

_config = get_config()
_logger = get_logger()

import numpy
from numpy import (
    where,
    any,
    all,
    isfinite,
    allclose,
    eye,
    diag,
    arange,
    sqrt,
    exp,
    sin,
    log,
    sum,
    maximum,
    einsum,
    matmul,
    pi,
    finfo,
)
from numpy.linalg import norm, LinAlgError
from scipy.linalg import solve_triangular, eigvalsh
from scipy.spatial.distance import cdist

_np_dtype = numpy.float64
eps = finfo(_np_dtype).eps
fmax = finfo(_np_dtype).max


def array(x, dtype=None):
    return numpy.array(x, dtype=_np_dtype if dtype is None else dtype)


def asarray(x, dtype=None):
    if dtype is None:
        x = numpy.asarray(x)
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x
        return x.astype(_np_dtype)
    return numpy.asarray(x, dtype=dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True):
    return numpy.linspace(start, stop, num=num, endpoint=endpoint, dtype=_np_dtype)


def isreal_scalar(x):
    """True if x is a real-valued scalar (Python number or 0-d array)."""
    if isinstance(x, bool):
        return False
    if isinstance(x, (int, float, numpy.integer, numpy.floating)):
        return True
    return (
        isinstance(x, numpy.ndarray)
        and x.ndim == 0
        and numpy.issubdtype(x.dtype, numpy.number)
        and not numpy.iscomplexobj(x)
    )


def isreal_array(x, ndim):
    """True if x is a real-valued ndarray with ``ndim`` dimensions."""
    return (
        isinstance(x, numpy.ndarray)
        and x.ndim == ndim
        and (
            numpy.issubdtype(x.dtype, numpy.floating)
            or numpy.issubdtype(x.dtype, numpy.integer)
        )
    )


def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a


def symmetrize(A):
    return 0.5 * (A + A.T)


def eigmin(A):
    """Smallest eigenvalue of the symmetric part of A."""
    return eigvalsh(symmetrize(asarray(A)))[0]


# ..................................................


def scaled_distance(loginvrho: ArrayLike, x: ArrayLike, y: ArrayLike) -> ArrayLike:
    invrho = exp(loginvrho)
    xs = invrho * x
    ys = invrho * y
    return cdist(xs, ys)


def scaled_distance_elementwise(
    loginvrho: ArrayLike, x: ArrayLike, y: Optional[ArrayLike]
) -> ArrayLike:
    if x is y or y is None:
        d = zeros((x.shape[0],))
    else:
        invrho = exp(loginvrho)
        d = sqrt(sum((invrho * (x - y)) ** 2, axis=1))
    return d


# ..................................................


def cholesky(A, name="matrix"):
    """Lower Cholesky factor of A.

    Raises
    ------
    numpy.linalg.LinAlgError
        If A is not (numerically) positive definite.
    """
    try:
        return numpy.linalg.cholesky(A)
    except LinAlgError as e:
        raise LinAlgError(
            f"Cholesky factorization of {name} failed ({e}). "
            "Consider adding observation noise or jitter."
        ) from e


def cholesky_solve(A, b, name="matrix"):
    L = cholesky(A, name=name)
    y = solve_triangular(L, b, lower=True)
    x = solve_triangular(L.T, y, lower=False)
    return x, L


def logdet_from_chol(L):
    return 2.0 * sum(log(diag(L)))


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)
    _logger.debug("Default generator reseeded with seed=%d", seed)


def default_rng(seed=None):
    return numpy.random.default_rng(seed)


def resolve_rng(rng=None):
    return _np_rng if rng is None else rng


def randn(*shape: int, rng=None) -> ArrayLike:
    return resolve_rng(rng).standard_normal(size=shape, dtype=_np_dtype)

