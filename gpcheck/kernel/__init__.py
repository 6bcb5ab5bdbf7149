# gpcheck/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
Covariance functions for the reference GP implementation.

Modules
-------
matern
    Matérn family of kernels with half-integer regularity.
gaussian
    Gaussian (squared exponential) kernel.

Public API
-----------
- Matérn kernels:
    matern32_kernel, maternp_kernel, maternp_covariance
- Gaussian kernel:
    gaussian_kernel, gaussian_covariance
"""

from .matern import matern32_kernel, maternp_kernel, maternp_covariance
from .gaussian import gaussian_kernel, gaussian_covariance

__all__ = [
    "matern32_kernel",
    "maternp_kernel",
    "maternp_covariance",
    "gaussian_kernel",
    "gaussian_covariance",
]
