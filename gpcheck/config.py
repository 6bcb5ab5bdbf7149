# gpcheck/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPCheckConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.seed = 1234
        # noise used by f(x) when no noise is given
        self.jitter = 1e-18
        # defaults of the verification helpers
        self.tolerance = 1e-12
        self.noise_variance = 1e-9
        self.bound_rtol = 1e-5
        self.bound_atol = 1e-5
        # logger lives in config
        self.logger = logging.getLogger("gpcheck")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPCheckConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"jitter={self.jitter}, "
            f"tolerance={self.tolerance}, "
            f"noise_variance={self.noise_variance})"
        )

    def __repr__(self):
        return (
            f"<GPCheckConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"jitter={self.jitter!r}, "
            f"tolerance={self.tolerance!r}, "
            f"noise_variance={self.noise_variance!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GPCheckConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
