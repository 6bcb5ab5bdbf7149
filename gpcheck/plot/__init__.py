# gpcheck/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
"""
gpcheck plotting utilities.

Importing `gpcheck` does not import matplotlib; importing
`gpcheck.plot` does.
"""

from .recipes import Series, ribbon_series, process_series, sample_series
from .plotutils import Figure, plot_process, sampleplot

__all__ = [
    "Series",
    "ribbon_series",
    "process_series",
    "sample_series",
    "Figure",
    "plot_process",
    "sampleplot",
]
