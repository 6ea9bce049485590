"""Numeric capability set required of coordinate values.

Coordinates are generic over any scalar type supporting copy, ordering
comparison, ``+``, ``-``, ``*`` and an additive identity: ``int``, ``float``,
``fractions.Fraction``, ``decimal.Decimal`` and numpy scalars all qualify.
Nothing here special-cases floating point.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar


class CoordinateType(Protocol):
    """Structural type for coordinate scalars."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __ge__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=CoordinateType)


def zero_like(value: Optional[Any] = None) -> Any:
    """Additive identity of ``value``'s type; int 0 when there is no sample."""
    if value is None:
        return 0
    return type(value)(0)


def one_like(value: Optional[Any] = None) -> Any:
    """Unit constant of ``value``'s type; int 1 when there is no sample."""
    if value is None:
        return 1
    return type(value)(1)


def simple_min(a: T, b: T) -> T:
    """Branch-based minimum.

    Not interchangeable with builtin ``min``: when ``a <= b`` is false for
    any reason (including NaN on either side) ``b`` is returned.
    """
    if a <= b:
        return a
    return b


def simple_max(a: T, b: T) -> T:
    """Branch-based maximum; ``b`` is returned whenever ``a >= b`` is false."""
    if a >= b:
        return a
    return b


def is_comparable(value: Any) -> bool:
    """False for NaN-like values, which do not compare equal to themselves.

    Signalling comparisons (e.g. on ``Decimal('sNaN')``) also count as
    incomparable.
    """
    try:
        return bool(value == value)
    except ArithmeticError:
        return False


__all__ = ['CoordinateType', 'zero_like', 'one_like', 'simple_min', 'simple_max', 'is_comparable']
