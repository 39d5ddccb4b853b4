"""
Global registry of distribution builders using singleton pattern.

This module implements a centralized registry that maps every type
discriminator accepted in configuration to the builder constructing that
distribution from a configuration node.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ClassVar

    from pysatl_mcdist.config.nodes import ConfigNode
    from pysatl_mcdist.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class DistributionBuilder:
    """
    Configuration-based constructor of one distribution variant.

    Parameters
    ----------
    name : str
        Lower-case type discriminator.
    build : Callable[[ConfigNode], Distribution]
        Function reading the node payload and constructing the distribution.
    keys : frozenset[str]
        Node entries the builder reads, besides ``type``.
    """

    name: str
    build: Callable[[ConfigNode], Distribution]
    keys: frozenset[str] = frozenset()

    def __call__(self, node: ConfigNode) -> Distribution:
        return self.build(node)


class DistributionRegister:
    """
    Singleton registry for distribution builders.

    Maintains a global registry of builders, allowing them to be accessed by
    type discriminator.
    """

    _instance: ClassVar[DistributionRegister | None] = None
    _registered_builders: dict[str, DistributionBuilder]

    def __new__(cls) -> DistributionRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_builders = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> DistributionBuilder:
        """
        Retrieve a builder by type discriminator.

        Parameters
        ----------
        name : str
            Type discriminator (case-insensitive).

        Returns
        -------
        DistributionBuilder
            The requested builder.

        Raises
        ------
        ValueError
            If no builder with the given name exists.
        """
        self = cls()
        key = name.lower()
        if key not in self._registered_builders:
            raise ValueError(f"No distribution {name} found in register")
        return self._registered_builders[key]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a builder is registered for ``name``."""
        return name.lower() in cls()._registered_builders

    @classmethod
    def register(cls, builder: DistributionBuilder) -> None:
        """
        Register a new builder.

        Parameters
        ----------
        builder : DistributionBuilder
            The builder to register.

        Raises
        ------
        ValueError
            If a builder with the same name is already registered.
        """
        self = cls()
        key = builder.name.lower()
        if key in self._registered_builders:
            raise ValueError(f"Distribution {builder.name} already found in register")
        self._registered_builders[key] = builder

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return the registered type discriminators in registration order."""
        return list(cls()._registered_builders)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
