# gpcheck/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from . import interface
from . import testutils
from .core import GP, FiniteGP, PosteriorGP
from .testutils import verify_finite_primary, verify_finite_full, verify_process

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "GP",
    "FiniteGP",
    "PosteriorGP",
    "verify_finite_primary",
    "verify_finite_full",
    "verify_process",
    "__version__",
]
