"""Plotting a GP and its sample paths

This script draws a prior GP as mean ± one standard deviation over an
interval, sample paths of the prior, and the posterior given a few
noisy observations.

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3

"""

import math
import gpcheck.num as gnp
import gpcheck as gc
import gpcheck.plot as gplot


def generate_data():
    xi = gnp.array([-0.8, -0.3, 0.1, 0.6, 0.9])
    zi = gnp.sin(3.0 * xi) + 0.3 * xi
    return xi, zi


def kernel(x, y, covparam, pairwise=False):
    p = 1
    return gc.kernel.maternp_covariance(x, y, p, covparam, pairwise)


def main():
    gnp.set_seed(1234)
    xi, zi = generate_data()

    covparam = gnp.array([math.log(0.5**2), math.log(1 / 0.4)])
    f = gc.GP(None, kernel, covparam=covparam)

    xt = gnp.linspace(-1.0, 1.0, 50)

    fig = gplot.Figure(nrows=1, ncols=2, isinteractive=True, figsize=(10, 4))

    # prior
    fig.subplot(1)
    gplot.plot_process(f, -1.0, 1.0, fig=fig, label="prior")
    gplot.sampleplot(f(xt), 10, fig=fig, seriestype="line", linealpha=0.5)
    fig.xylabels("x", "f(x)")
    fig.title("Prior")
    fig.legend()

    # posterior
    fig.subplot(2)
    post = f(xi, 1e-4).posterior(zi)
    gplot.plot_process(post, xt, fig=fig, label="posterior")
    gplot.sampleplot(post(xt), 10, fig=fig, seriescolor="C0", markersize=2)
    fig.plotdata(xi, zi)
    fig.xylabels("x", "f(x)")
    fig.title("Posterior")
    fig.legend()
    fig.show(grid=True)


if __name__ == "__main__":
    main()
