"""
Construction of distributions from configuration nodes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING, Any

from pysatl_mcdist.config.configuration import configure_distributions_register
from pysatl_mcdist.config.nodes import XmlNode, as_node, get_text
from pysatl_mcdist.distributions.constraints import DistributionConfigurationError

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from collections.abc import Mapping

    from pysatl_mcdist.config.nodes import ConfigNode
    from pysatl_mcdist.config.registry import DistributionRegister
    from pysatl_mcdist.variants import AnyDistribution

TYPE_KEY = "type"


def distribution_from_node(
    node: ConfigNode | Mapping[str, Any] | ET.Element | str,
    register: DistributionRegister | None = None,
) -> AnyDistribution:
    """
    Build a distribution from a configuration node.

    Parameters
    ----------
    node : ConfigNode, mapping, xml.etree.ElementTree.Element or str
        Definition carrying a ``type`` discriminator and the numeric payload.
        Strings are parsed as XML.
    register : DistributionRegister, optional
        Register to dispatch on. The configured global register by default.

    Returns
    -------
    AnyDistribution
        The constructed distribution.

    Raises
    ------
    DistributionConfigurationError
        If the discriminator is missing or unknown, or if the payload is
        malformed. Errors raised by the distribution constructors propagate
        unchanged.
    """
    node = as_node(node)
    if register is None:
        register = configure_distributions_register()

    kind = get_text(node, TYPE_KEY)
    if kind is None:
        raise DistributionConfigurationError("Distribution type must be specified.")
    kind = kind.lower()
    if not register.contains(kind):
        raise DistributionConfigurationError(f"Invalid distribution type: '{kind}'")

    builder = register.get(kind)
    ignored = [key for key in node.keys() if key != TYPE_KEY and key not in builder.keys]
    if ignored:
        warnings.warn(
            f"Ignoring unused entries {ignored} of '{kind}' distribution definition.",
            RuntimeWarning,
            stacklevel=2,
        )
    return builder(node)  # type: ignore[return-value]


def distribution_from_xml(element: ET.Element | str) -> AnyDistribution:
    """Build a distribution from an XML element or XML text."""
    node = XmlNode.from_string(element) if isinstance(element, str) else XmlNode(element)
    return distribution_from_node(node)


def distribution_from_mapping(mapping: Mapping[str, Any]) -> AnyDistribution:
    """Build a distribution from a mapping such as decoded JSON or YAML."""
    return distribution_from_node(mapping)
