"""
Distributions subpackage

Interfaces shared by all distribution variants:

- distribution protocol (:mod:`.distribution`);
- construction-time constraints and errors (:mod:`.constraints`);
- sample containers and batch sampling strategies (:mod:`.sampling`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .constraints import (
    ConstrainedParameters,
    DistributionConfigurationError,
    DistributionConstraint,
    constraint,
)
from .distribution import Distribution
from .sampling import (
    ArraySample,
    DefaultSamplingUnivariateStrategy,
    RejectionSamplingStrategy,
    Sample,
    SamplingStrategy,
)
from .support import ContinuousSupport, ExplicitTableDiscreteSupport, Support

__all__ = [
    # constraints
    "ConstrainedParameters",
    "DistributionConfigurationError",
    "DistributionConstraint",
    "constraint",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "RejectionSamplingStrategy",
    # support
    "Support",
    "ContinuousSupport",
    "ExplicitTableDiscreteSupport",
]
