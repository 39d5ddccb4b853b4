"""
Distribution Register Configuration
===================================

This module registers the built-in distribution builders in the global
:class:`DistributionRegister`:

- discrete, uniform, maxwell, watt, tabular and equiprobable.

Notes
-----
- Type discriminators are matched case-insensitively.
- Additional builders may be registered after configuration.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_mcdist.config.builders import configure_builtin_builders
from pysatl_mcdist.config.registry import DistributionRegister


@lru_cache(maxsize=1)
def configure_distributions_register() -> DistributionRegister:
    """
    Configure and register all built-in distribution builders.

    Returns
    -------
    DistributionRegister
        The global registry of distribution builders.
    """
    configure_builtin_builders()
    return DistributionRegister()


def reset_distributions_register() -> None:
    """
    Reset the cached distributions registry.
    """
    configure_distributions_register.cache_clear()
    DistributionRegister._reset()
