# gpcheck/plot/recipes.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Plotting recipes for Gaussian processes.

A recipe is a pure function from a GP-like object and style options to
a `Series`, a drawable description (x-coordinates, y-values, optional
ribbon half-width, style attributes). Recipes do not import matplotlib;
rendering lives in `gpcheck.plot.plotutils`.

ribbon_series
    Marginal mean with a ribbon of one standard deviation, for a finite
    distribution over a one-dimensional index set.
process_series
    Same, for a process over an index set or over [xmin, xmax].
sample_series
    Sample paths of a process at the index set of a finite distribution.
"""
import warnings
from dataclasses import dataclass, field
from typing import Any, Optional

import gpcheck.num as gnp
from gpcheck.config import get_config

RIBBON_DEFAULTS = {
    "fillalpha": 0.3,
    "linewidth": 2,
    "seriescolor": None,
    "label": None,
}

SAMPLE_DEFAULTS = {
    "seriestype": "line",
    "linealpha": 0.2,
    "linewidth": 1,
    "markershape": "o",
    "markerstrokewidth": 0.0,
    "markersize": 0.5,
    "markeralpha": 0.3,
    "seriescolor": "red",
    "label": "",
}

SERIES_TYPES = ("line", "scatter")

N_POINTS = 1000


@dataclass
class Series:
    """Drawable description of one plot series.

    Attributes
    ----------
    x : ndarray, shape (n,)
        Abscissas.
    y : ndarray, shape (n,) or (n, k)
        Ordinates; k columns are k curves sharing the abscissas.
    ribbon : ndarray, shape (n,), optional
        Half-width of a band drawn around y.
    kind : str
        "ribbon" or "samples".
    style : dict
        Style attributes (see RIBBON_DEFAULTS and SAMPLE_DEFAULTS).
    """

    x: Any
    y: Any
    ribbon: Optional[Any] = None
    kind: str = "ribbon"
    style: dict = field(default_factory=dict)


def _merge_style(defaults, overrides):
    unknown = sorted(set(overrides) - set(defaults))
    if unknown:
        raise ValueError(
            f"unknown style option(s) {unknown}; valid options are {sorted(defaults)}"
        )
    style = dict(defaults)
    style.update(overrides)
    return style


def _abscissas(x):
    x = gnp.asarray(x)
    if x.ndim == 2:
        if x.shape[1] != 1:
            raise ValueError("plot recipes need a one-dimensional index set")
        x = x.reshape(-1)
    return x


def ribbon_series(fx, **style):
    """Mean ± one standard deviation of the marginals of fx.

    Parameters
    ----------
    fx : finite distribution
        Must expose its index set as ``fx.x`` (one-dimensional inputs)
        and ``fx.marginals()``.
    **style
        Overrides of RIBBON_DEFAULTS (fillalpha=0.3, linewidth=2,
        seriescolor, label).

    Returns
    -------
    Series
    """
    style = _merge_style(RIBBON_DEFAULTS, style)
    x = _abscissas(fx.x)
    ms = fx.marginals()
    mu = gnp.array([m.mean() for m in ms])
    variance = gnp.array([m.var() for m in ms])
    if gnp.any(variance < 0.0):
        warnings.warn(
            "Negative marginal variances detected, clipped to zero.", RuntimeWarning
        )
    sigma = gnp.sqrt(gnp.maximum(variance, 0.0))
    return Series(x=x, y=mu, ribbon=sigma, kind="ribbon", style=style)


def process_series(f, *args, n_points=N_POINTS, **style):
    """Ribbon series of a process.

    Call as ``process_series(f, x)`` with an index set x, or as
    ``process_series(f, xmin, xmax)`` for ``n_points`` (default 1000)
    equally spaced locations in [xmin, xmax]. The process is restricted
    with the default jitter.
    """
    if len(args) == 1:
        x = args[0]
    elif len(args) == 2:
        xmin, xmax = args
        if not xmin < xmax:
            raise ValueError("xmin should be smaller than xmax")
        x = gnp.linspace(xmin, xmax, n_points)
    else:
        raise TypeError("process_series expects (f, x) or (f, xmin, xmax)")
    return ribbon_series(f(x), **style)


def sample_series(fx, n_samples, rng=None, **style):
    """Sample paths of ``fx.f`` at ``fx.x``.

    The paths are drawn from ``fx.f(fx.x, noise_variance)`` where
    noise_variance is the configured default (1e-9), whatever the noise
    of fx.

    Parameters
    ----------
    fx : finite distribution
        Must expose ``fx.f`` and ``fx.x``.
    n_samples : int
        Number of sample paths.
    rng : numpy.random.Generator, optional
        Random source; defaults to the generator of `gpcheck.num`.
    **style
        Overrides of SAMPLE_DEFAULTS.

    Returns
    -------
    Series
        ``y`` has shape (len(fx), n_samples).
    """
    if int(n_samples) != n_samples or n_samples < 1:
        raise ValueError("n_samples should be a positive integer")
    style = _merge_style(SAMPLE_DEFAULTS, style)
    if style["seriestype"] not in SERIES_TYPES:
        raise ValueError(f"seriestype should be one of {SERIES_TYPES}")
    x = _abscissas(fx.x)
    samples = fx.f(fx.x, get_config().noise_variance).rand(rng, int(n_samples))
    return Series(x=x, y=samples, kind="samples", style=style)


def band(series):
    """Lower and upper bounds of a ribbon series."""
    if series.ribbon is None:
        raise ValueError("series has no ribbon")
    return series.y - series.ribbon, series.y + series.ribbon
