# gpcheck/plot/plotutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Matplotlib rendering of the series built by `gpcheck.plot.recipes`.
"""
import sys
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import interactive
from matplotlib.colors import to_rgba

from . import recipes

_MARKERS = {"circle": "o", "square": "s", "diamond": "D", "cross": "x", "none": ""}


class Figure:
    """Figures manager class.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
    axes : list of matplotlib.axes.Axes
    ax : matplotlib.axes.Axes
        Current axes.

    Methods
    -------
    plotseries(series)
        Draw a `recipes.Series`.
    plotgp(fx, **style)
        Draw the ribbon series of a finite distribution.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    # ------------------------------------------------------------------
    # Series rendering
    # ------------------------------------------------------------------
    def plotseries(self, series):
        """Draw a ribbon or samples series on the current axes.

        Returns the list of created artists.
        """
        if series.kind == "ribbon":
            return self._plot_ribbon(series)
        if series.kind == "samples":
            return self._plot_samples(series)
        raise ValueError(f"unknown series kind '{series.kind}'")

    def _plot_ribbon(self, series):
        style = series.style
        x = np.asarray(series.x)
        (line,) = self.ax.plot(
            x,
            series.y,
            color=style.get("seriescolor"),
            linewidth=style.get("linewidth", 2),
            label=style.get("label"),
        )
        lower, upper = recipes.band(series)
        fill = self.ax.fill_between(
            x,
            lower,
            upper,
            color=line.get_color(),
            alpha=style.get("fillalpha", 0.3),
            linewidth=0.0,
        )
        return [line, fill]

    def _plot_samples(self, series):
        style = series.style
        color = style.get("seriescolor", "red")
        marker = style.get("markershape", "o")
        marker = _MARKERS.get(marker, marker)
        linestyle = "-" if style.get("seriestype", "line") == "line" else "none"
        lines = self.ax.plot(
            np.asarray(series.x),
            np.asarray(series.y),
            color=to_rgba(color, style.get("linealpha", 0.2)),
            linestyle=linestyle,
            linewidth=style.get("linewidth", 1),
            marker=marker,
            markersize=style.get("markersize", 0.5),
            markeredgewidth=style.get("markerstrokewidth", 0.0),
            markerfacecolor=to_rgba(color, style.get("markeralpha", 0.3)),
        )
        label = style.get("label")
        if label and lines:
            lines[0].set_label(label)
        return lines

    def plotgp(self, fx, **style):
        """Mean ± one standard deviation of a finite distribution."""
        return self.plotseries(recipes.ribbon_series(fx, **style))


def plot_process(f, *args, fig=None, **style):
    """Plot a process as mean ± one standard deviation.

    Call as ``plot_process(f, x)`` or ``plot_process(f, xmin, xmax)``;
    see `recipes.process_series`. Returns the Figure.
    """
    if fig is None:
        fig = Figure(isinteractive=False)
    fig.plotseries(recipes.process_series(f, *args, **style))
    return fig


def sampleplot(fx, n_samples, fig=None, rng=None, **style):
    """Plot ``n_samples`` sample paths of the process of a finite distribution.

    Examples
    --------
    >>> fx = f(gnp.linspace(0.0, 1.0, 50))
    >>> sampleplot(fx, 10, markersize=5)

    plots 10 paths at 50 points, with a marker size of 5 instead of the
    default 0.5. Returns the Figure.
    """
    if fig is None:
        fig = Figure(isinteractive=False)
    fig.plotseries(recipes.sample_series(fx, n_samples, rng=rng, **style))
    return fig
