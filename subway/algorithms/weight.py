"""Weight algebra for path costs.

A weight is any totally ordered value with an ``add`` operation, an additive
identity (``zero``) and an absorbing maximum (``infinity``). Dijkstra's greedy
frontier is only correct when ``add`` is monotonic non-decreasing in both
operands, i.e. when no weight is negative.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from functools import total_ordering
from numbers import Real
from typing import Any, Optional, TypeVar, Union

W = TypeVar("W", bound="Weight")


@total_ordering
class Weight(ABC):
    """Abstract ordered, summable quantity.

    Subclasses implement ``add``, ``zero``, ``infinity``, ``is_infinity``,
    ``__lt__`` and ``__eq__``; the remaining comparisons are derived.
    Implementations must satisfy:

    - ``a.add(zero()) == a``
    - ``infinity().add(x).is_infinity()`` for every ``x``
    - ``infinity() > x`` for every finite ``x``
    - ``a.add(b) >= a`` and ``a.add(b) >= b``
    """

    __slots__ = ()

    @abstractmethod
    def add(self: W, other: W) -> W:
        """Return the weight of a path extended by ``other``."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def zero(cls: type[W]) -> W:
        """Return the additive identity."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def infinity(cls: type[W]) -> W:
        """Return the absorbing maximum (the weight of an unreachable vertex)."""
        raise NotImplementedError

    @abstractmethod
    def is_infinity(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __lt__(self, other: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __eq__(self, other: Any) -> bool:
        raise NotImplementedError

    def __add__(self: W, other: W) -> W:
        return self.add(other)


class ScalarWeight(Weight):
    """Non-negative real weight; infinity is ``math.inf``.

    Args:
        value: Non-negative int or float.

    Raises:
        ValueError: If ``value`` is negative or NaN.
        TypeError: If ``value`` is not a real number.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, float] = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Weight value must be a real number, got {value!r}.")
        if math.isnan(value):
            raise ValueError("Weight value must not be NaN.")
        if value < 0:
            raise ValueError(f"Weight value must be non-negative, got {value}.")
        self._value = value

    @property
    def value(self) -> Union[int, float]:
        return self._value

    @classmethod
    def coerce(cls, value: Union[ScalarWeight, int, float]) -> ScalarWeight:
        """Return ``value`` as a ScalarWeight, wrapping bare numbers."""
        if isinstance(value, ScalarWeight):
            return value
        return cls(value)

    def add(self, other: ScalarWeight) -> ScalarWeight:
        return ScalarWeight(self._value + other._value)

    @classmethod
    def zero(cls) -> ScalarWeight:
        return cls(0)

    @classmethod
    def infinity(cls) -> ScalarWeight:
        return cls(math.inf)

    def is_infinity(self) -> bool:
        return math.isinf(self._value)

    def __lt__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __eq__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return "ScalarWeight(inf)" if self.is_infinity() else f"ScalarWeight({self._value})"


def _comparable(other: Any) -> Optional[Union[int, float]]:
    """Return the raw value ScalarWeight compares against, or None if unsupported."""
    if isinstance(other, ScalarWeight):
        return other.value
    if isinstance(other, Real) and not isinstance(other, bool):
        return other  # type: ignore[return-value]
    return None
