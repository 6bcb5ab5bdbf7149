"""Consistency checks of a GP implementation

This script builds a GP with a Matérn covariance function, runs the
three levels of consistency checks on the prior and on a posterior
process, and shows how a faulty implementation is reported.

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3

"""

import math
import gpcheck.num as gnp
import gpcheck as gc


def kernel(x, y, covparam, pairwise=False):
    p = 1
    return gc.kernel.maternp_covariance(x, y, p, covparam, pairwise)


def linear_mean(x, param):
    return param[0] + param[1] * x[:, 0]


class LooseElboGP(gc.GP):
    """A GP whose elbo is not a lower bound of the log-likelihood."""

    def elbo(self, fx, y, fz):
        return super().elbo(fx, y, fz) + 10.0


def main():
    gc.config.set_log_level("DEBUG")
    rng = gnp.default_rng(1234)

    meanparam = [0.5, -1.0]
    covparam = gnp.array([math.log(1.5), math.log(1 / 0.5)])
    f = gc.GP(linear_mean, kernel, meanparam, covparam)

    x = gnp.linspace(0.0, 1.0, 3)
    z = gnp.array([-0.3, 0.2, 0.7, 1.2, 1.6])

    # finite-dimensional checks
    fx = f(x, 0.1)
    gc.verify_finite_primary(rng, fx)
    gc.verify_finite_full(rng, fx)

    # process checks on the prior and on a posterior
    gc.verify_process(rng, f, x, z)
    post = fx.posterior(fx.rand(rng))
    gc.verify_process(rng, post, x, z, noise_variance=1e-6)
    print("The reference GP passes all checks.")

    g = LooseElboGP(linear_mean, kernel, meanparam, covparam)
    try:
        gc.verify_process(rng, g, x, z)
    except AssertionError as e:
        print(f"LooseElboGP fails: {e}")

    try:
        gc.verify_process(rng, f, x, x + 1.0)
    except ValueError as e:
        print(f"Invalid call: {e}")

    gc.config.set_log_level("INFO")


if __name__ == "__main__":
    main()
