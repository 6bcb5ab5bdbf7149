# gpcheck/interface.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Capability sets of the GP API.

Objects are duck-typed: a type conforms to a capability set when every
operation named in the set is a callable attribute.

Process (PROCESS_INTERFACE)
    f(x, noise=None) -> finite distribution, f.mean(x), f.cov(x, z=None),
    f.var(x), f.mean_and_cov(x), f.mean_and_var(x), f.elbo(fx, y, fz),
    f.dtc(fx, y, fz)
Primary public finite API (FINITE_PRIMARY_INTERFACE)
    len(fx), fx.rand(rng=None, n=None), fx.rand_into(out, rng=None),
    fx.marginals(), fx.mean(), fx.var(), fx.mean_and_var(),
    fx.logpdf(y), fx.posterior(y)
Secondary public finite API (FINITE_SECONDARY_INTERFACE)
    fx.cov(), fx.mean_and_cov()
"""

PROCESS_INTERFACE = (
    "__call__",
    "mean",
    "cov",
    "var",
    "mean_and_cov",
    "mean_and_var",
    "elbo",
    "dtc",
)

FINITE_PRIMARY_INTERFACE = (
    "__len__",
    "rand",
    "rand_into",
    "marginals",
    "mean",
    "var",
    "mean_and_var",
    "logpdf",
    "posterior",
)

FINITE_SECONDARY_INTERFACE = (
    "cov",
    "mean_and_cov",
)


def missing_operations(obj, operations):
    """Return the names in ``operations`` that are not callable on obj."""
    return [name for name in operations if not callable(getattr(obj, name, None))]


def implements_process(obj):
    return not missing_operations(obj, PROCESS_INTERFACE)


def implements_finite(obj, secondary=False):
    operations = FINITE_PRIMARY_INTERFACE
    if secondary:
        operations = operations + FINITE_SECONDARY_INTERFACE
    return not missing_operations(obj, operations)
