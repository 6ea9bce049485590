"""Coordinate and Point value types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class Coordinate:
    """A plain (x, y) pair of some numeric type."""
    x: Any
    y: Any

    @classmethod
    def from_value(cls, value) -> 'Coordinate':
        """Convert a Coordinate, Point, 2-sequence or length-2 array."""
        if isinstance(value, Coordinate):
            return value
        if isinstance(value, Point):
            return value.coord
        if isinstance(value, np.ndarray):
            if value.shape != (2,):
                raise TypeError(f"Expected array of shape (2,), got {value.shape}")
            return cls(value[0], value[1])
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"Cannot convert {value!r} to a Coordinate") from None
        return cls(x, y)

    def x_y(self) -> Tuple[Any, Any]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __add__(self, other: 'Coordinate') -> 'Coordinate':
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Coordinate') -> 'Coordinate':
        return Coordinate(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Point:
    """A single Coordinate, as yielded by point iterators."""
    coord: Coordinate

    def __post_init__(self):
        if not isinstance(self.coord, Coordinate):
            object.__setattr__(self, 'coord', Coordinate.from_value(self.coord))

    @classmethod
    def new(cls, x, y) -> 'Point':
        return cls(Coordinate(x, y))

    @property
    def x(self):
        return self.coord.x

    @property
    def y(self):
        return self.coord.y

    def x_y(self) -> Tuple[Any, Any]:
        return self.coord.x_y()


__all__ = ['Coordinate', 'Point']
