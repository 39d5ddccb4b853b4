"""
Configuration subpackage

Turns distribution definitions read from XML or plain mappings into the
built-in distributions:

- configuration node adapters (:mod:`.nodes`);
- the builder register and its configuration (:mod:`.registry`,
  :mod:`.configuration`);
- the factory entry points (:mod:`.factory`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .builders import BUILTIN_BUILDERS
from .configuration import configure_distributions_register, reset_distributions_register
from .factory import distribution_from_mapping, distribution_from_node, distribution_from_xml
from .nodes import ConfigNode, MappingNode, XmlNode, as_node
from .registry import DistributionBuilder, DistributionRegister

__all__ = [
    "BUILTIN_BUILDERS",
    "ConfigNode",
    "MappingNode",
    "XmlNode",
    "as_node",
    "DistributionBuilder",
    "DistributionRegister",
    "configure_distributions_register",
    "reset_distributions_register",
    "distribution_from_node",
    "distribution_from_xml",
    "distribution_from_mapping",
]
