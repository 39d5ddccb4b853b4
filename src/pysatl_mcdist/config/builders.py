"""
Builders of the built-in distributions from configuration nodes.

Every builder accepts either the packed ``parameters`` entry (a flat list of
numbers, e.g. ``x`` followed by ``p`` for tables) or named entries.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, TypeVar

from pysatl_mcdist.config.nodes import get_array, get_scalar, get_text
from pysatl_mcdist.config.registry import DistributionBuilder, DistributionRegister
from pysatl_mcdist.distributions.constraints import DistributionConfigurationError
from pysatl_mcdist.types import DistributionName, Interpolation
from pysatl_mcdist.variants import Discrete, Equiprobable, Maxwell, Tabular, Uniform, Watt

if TYPE_CHECKING:
    from pysatl_mcdist.config.nodes import ConfigNode
    from pysatl_mcdist.types import FloatArray

PARAMETERS = "parameters"

T = TypeVar("T")


def _require(value: T | None, name: str, owner: str) -> T:
    if value is None:
        raise DistributionConfigurationError(f"{owner}: missing parameter '{name}'")
    return value


def _packed_scalars(node: ConfigNode, owner: str, names: tuple[str, ...]) -> list[float] | None:
    packed = get_array(node, PARAMETERS, owner)
    if packed is None:
        return None
    if packed.size != len(names):
        raise DistributionConfigurationError(
            f"{owner}: '{PARAMETERS}' must hold {len(names)} value(s) "
            f"({', '.join(names)}), got {packed.size}"
        )
    return [float(v) for v in packed]


def _table_pair(node: ConfigNode, owner: str) -> tuple[FloatArray, FloatArray]:
    """``x`` and ``p`` from the packed form (``x`` then ``p``) or from named entries."""
    packed = get_array(node, PARAMETERS, owner)
    if packed is not None:
        if packed.size % 2 != 0:
            raise DistributionConfigurationError(
                f"{owner}: '{PARAMETERS}' must hold x followed by p, got an odd count "
                f"of {packed.size} values"
            )
        half = packed.size // 2
        return packed[:half], packed[half:]
    x = _require(get_array(node, "x", owner), "x", owner)
    p = _require(get_array(node, "p", owner), "p", owner)
    return x, p


def build_discrete(node: ConfigNode) -> Discrete:
    x, p = _table_pair(node, "Discrete")
    return Discrete(x=x, p=p)


def build_uniform(node: ConfigNode) -> Uniform:
    packed = _packed_scalars(node, "Uniform", ("a", "b"))
    if packed is not None:
        return Uniform(*packed)
    a = _require(get_scalar(node, "a", "Uniform"), "a", "Uniform")
    b = _require(get_scalar(node, "b", "Uniform"), "b", "Uniform")
    return Uniform(a=a, b=b)


def build_maxwell(node: ConfigNode) -> Maxwell:
    packed = _packed_scalars(node, "Maxwell", ("theta",))
    if packed is not None:
        return Maxwell(*packed)
    return Maxwell(theta=_require(get_scalar(node, "theta", "Maxwell"), "theta", "Maxwell"))


def build_watt(node: ConfigNode) -> Watt:
    packed = _packed_scalars(node, "Watt", ("a", "b"))
    if packed is not None:
        return Watt(*packed)
    a = _require(get_scalar(node, "a", "Watt"), "a", "Watt")
    b = _require(get_scalar(node, "b", "Watt"), "b", "Watt")
    return Watt(a=a, b=b)


def build_tabular(node: ConfigNode) -> Tabular:
    x, p = _table_pair(node, "Tabular")
    rule = get_text(node, "interpolation")
    interpolation = Interpolation.HISTOGRAM if rule is None else rule.lower()
    return Tabular(x=x, p=p, interpolation=interpolation, c=get_array(node, "c", "Tabular"))


def build_equiprobable(node: ConfigNode) -> Equiprobable:
    x = get_array(node, PARAMETERS, "Equiprobable")
    if x is None:
        x = _require(get_array(node, "x", "Equiprobable"), "x", "Equiprobable")
    return Equiprobable(x=x)


BUILTIN_BUILDERS: tuple[DistributionBuilder, ...] = (
    DistributionBuilder(
        DistributionName.DISCRETE, build_discrete, frozenset({PARAMETERS, "x", "p"})
    ),
    DistributionBuilder(
        DistributionName.UNIFORM, build_uniform, frozenset({PARAMETERS, "a", "b"})
    ),
    DistributionBuilder(
        DistributionName.MAXWELL, build_maxwell, frozenset({PARAMETERS, "theta"})
    ),
    DistributionBuilder(DistributionName.WATT, build_watt, frozenset({PARAMETERS, "a", "b"})),
    DistributionBuilder(
        DistributionName.TABULAR,
        build_tabular,
        frozenset({PARAMETERS, "x", "p", "c", "interpolation"}),
    ),
    DistributionBuilder(
        DistributionName.EQUIPROBABLE, build_equiprobable, frozenset({PARAMETERS, "x"})
    ),
)


def configure_builtin_builders() -> None:
    """Register the builders of the six built-in distributions."""
    for builder in BUILTIN_BUILDERS:
        DistributionRegister.register(builder)
