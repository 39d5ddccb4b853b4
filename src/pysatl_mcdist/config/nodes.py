"""
Configuration node adapters.

A configuration node is anything exposing named entries: XML elements (an
entry is an attribute or the text of a child element of that name) and plain
mappings such as decoded JSON or YAML. Builders only see the
:class:`ConfigNode` protocol and the parsing helpers of this module, so the
sampling core never depends on a configuration format.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from pysatl_mcdist.distributions.constraints import DistributionConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_mcdist.types import FloatArray

_SEPARATORS = re.compile(r"[\s,]+")


@runtime_checkable
class ConfigNode(Protocol):
    """Named entries of one distribution definition."""

    def get(self, name: str) -> Any | None: ...

    def keys(self) -> Iterator[str]: ...


class MappingNode:
    """
    Node backed by a mapping.

    Parameters
    ----------
    data : Mapping[str, Any]
        Entries of the distribution definition.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def get(self, name: str) -> Any | None:
        return self._data.get(name)

    def keys(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MappingNode({dict(self._data)!r})"


class XmlNode:
    """
    Node backed by an XML element.

    An entry is the attribute of that name or, when there is none, the text
    of the first child element with that tag.

    Parameters
    ----------
    element : xml.etree.ElementTree.Element
        Element holding the distribution definition.
    """

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    @classmethod
    def from_string(cls, text: str) -> XmlNode:
        try:
            return cls(ET.fromstring(text))
        except ET.ParseError as exc:
            raise DistributionConfigurationError(f"Malformed distribution XML: {exc}") from exc

    def get(self, name: str) -> Any | None:
        value = self._element.get(name)
        if value is not None:
            return value
        child = self._element.find(name)
        if child is None:
            return None
        return child.text or ""

    def keys(self) -> Iterator[str]:
        seen = dict.fromkeys([*self._element.attrib, *(child.tag for child in self._element)])
        return iter(seen)

    def __repr__(self) -> str:
        return f"XmlNode(<{self._element.tag}>)"


def as_node(source: ConfigNode | Mapping[str, Any] | ET.Element | str) -> ConfigNode:
    """Wrap a mapping, an XML element or XML text into a :class:`ConfigNode`."""
    if isinstance(source, ET.Element):
        return XmlNode(source)
    if isinstance(source, str):
        return XmlNode.from_string(source)
    if isinstance(source, Mapping):
        return MappingNode(source)
    if isinstance(source, ConfigNode):
        return source
    raise TypeError(f"Cannot read a distribution definition from {type(source).__name__}")


def get_text(node: ConfigNode, name: str) -> str | None:
    """Entry ``name`` as stripped text, ``None`` when absent or blank."""
    value = node.get(name)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def get_array(node: ConfigNode, name: str, owner: str) -> FloatArray | None:
    """
    Entry ``name`` as a 1D float array.

    Text is split on whitespace and commas; sequences are converted as is.

    Raises
    ------
    DistributionConfigurationError
        If the entry holds anything but numbers.
    """
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        value = [token for token in _SEPARATORS.split(value.strip()) if token]
    try:
        arr = np.atleast_1d(np.asarray(value, dtype=np.float64))
    except (TypeError, ValueError) as exc:
        raise DistributionConfigurationError(
            f"{owner}: '{name}' must be a list of numbers, got {value!r}"
        ) from exc
    if arr.ndim != 1:
        raise DistributionConfigurationError(f"{owner}: '{name}' must be a flat list of numbers")
    return arr


def get_scalar(node: ConfigNode, name: str, owner: str) -> float | None:
    """
    Entry ``name`` as a single float.

    Raises
    ------
    DistributionConfigurationError
        If the entry is not exactly one number.
    """
    arr = get_array(node, name, owner)
    if arr is None:
        return None
    if arr.size != 1:
        raise DistributionConfigurationError(
            f"{owner}: '{name}' must be a single number, got {arr.size} values"
        )
    return float(arr[0])


__all__ = [
    "ConfigNode",
    "MappingNode",
    "XmlNode",
    "as_node",
    "get_text",
    "get_array",
    "get_scalar",
]
