"""
Construction-time constraints for distribution parameters.

Distributions declare their admissibility rules as predicate methods marked
with :func:`constraint`. The rules are collected per class, evaluated in
declaration order by :meth:`ConstrainedParameters.validate` and reported as
:class:`DistributionConfigurationError` on the first violation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from numpy.typing import ArrayLike

    from pysatl_mcdist.types import FloatArray


class DistributionConfigurationError(ValueError):
    """
    Raised when distribution parameters are malformed or inconsistent.

    This covers unknown type discriminators, mismatched array lengths,
    non-normalizable probability mass and non-monotonic grids. It is always
    raised at construction time, never while sampling.
    """


@dataclass(slots=True, frozen=True)
class DistributionConstraint:
    """
    Constraint on the parameters of a distribution.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type) -> list[DistributionConstraint]:
    """Collect constraint methods declared directly on ``cls``."""
    constraints: list[DistributionConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{name}' must be an instance method")
            continue

        func = attr if callable(attr) and isfunction(attr) else None
        if not func:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(DistributionConstraint(description=desc, check=func))
    return constraints


class ConstrainedParameters:
    """
    Mixin that validates ``@constraint`` methods of a distribution.

    Only constraints declared directly on the concrete class are collected.
    """

    __slots__ = ()

    _constraints: ClassVar[list[DistributionConstraint]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._constraints = _collect_constraints(cls)

    @property
    def constraints(self) -> list[DistributionConstraint]:
        """Get constraints for this distribution."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this distribution.

        Raises
        ------
        DistributionConfigurationError
            If any constraint is not satisfied.
        """
        for c in self._constraints:
            if not c.check(self):
                raise DistributionConfigurationError(
                    f'{type(self).__name__}: constraint "{c.description}" does not hold'
                )


def as_float_array(values: ArrayLike, name: str, owner: str) -> FloatArray:
    """
    Copy ``values`` into a read-only 1D float64 array.

    Raises
    ------
    DistributionConfigurationError
        If the values are not numeric or not one-dimensional.
    """
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DistributionConfigurationError(f"{owner}: '{name}' must be numeric") from exc
    if arr.ndim != 1:
        raise DistributionConfigurationError(
            f"{owner}: '{name}' must be one-dimensional, got shape {arr.shape}"
        )
    arr.flags.writeable = False
    return arr


def as_float(value: Any, name: str, owner: str) -> float:
    """
    Convert a scalar parameter to ``float``.

    Raises
    ------
    DistributionConfigurationError
        If the value is not a real number.
    """
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise DistributionConfigurationError(f"{owner}: '{name}' must be a real number") from exc


__all__ = [
    "DistributionConfigurationError",
    "DistributionConstraint",
    "ConstrainedParameters",
    "constraint",
    "as_float_array",
    "as_float",
]
