"""
PySATL MCDist
=============

Univariate distributions sampled by Monte Carlo particle transport codes:
discrete, uniform, Maxwell and Watt fission spectra, tabular and equiprobable
bins, together with configuration-driven construction and reproducible
random sources.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .random_source import *
from .random_source import __all__ as _random_all
from .types import *
from .types import __all__ as _types_all
from .variants import *
from .variants import __all__ as _variants_all

__version__ = version("pysatl-mcdist")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_random_all,
    *_types_all,
    *_variants_all,
]

del _config_all
del _distr_all
del _random_all
del _types_all
del _variants_all
