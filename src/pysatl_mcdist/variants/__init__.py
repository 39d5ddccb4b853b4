"""
Built-in distribution variants.

The set of variants is closed: :data:`AnyDistribution` is the union of the
six classes below, each a frozen dataclass carrying its own parameters.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TypeAlias

from pysatl_mcdist.variants.base import UnivariateDistribution
from pysatl_mcdist.variants.discrete import Discrete
from pysatl_mcdist.variants.equiprobable import Equiprobable
from pysatl_mcdist.variants.maxwell import Maxwell, maxwell_spectrum
from pysatl_mcdist.variants.tabular import Tabular
from pysatl_mcdist.variants.uniform import Uniform
from pysatl_mcdist.variants.watt import Watt

AnyDistribution: TypeAlias = Discrete | Uniform | Maxwell | Watt | Tabular | Equiprobable
"""Closed union of the built-in distribution variants."""

__all__ = [
    "AnyDistribution",
    "UnivariateDistribution",
    "Discrete",
    "Uniform",
    "Maxwell",
    "Watt",
    "Tabular",
    "Equiprobable",
    "maxwell_spectrum",
]
