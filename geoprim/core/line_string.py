"""Line segments and line strings.

A LineString is an ordered, mutable sequence of Coordinates. When its first
and last coordinates coincide it is treated as a ring by the winding
operations, but closure is never enforced.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from . import winding as _winding
from .coords import Coordinate
from .rect import Rect
from .winding import Points, Winding, WindingOrder


@dataclass(frozen=True)
class Line:
    start: Coordinate
    end: Coordinate

    def dx(self):
        return self.end.x - self.start.x

    def dy(self):
        return self.end.y - self.start.y

    def determinant(self):
        """2D cross product of the two endpoints (one shoelace term)."""
        return self.start.x * self.end.y - self.start.y * self.end.x


class LineString(Winding):
    """Ordered sequence of coordinates, optionally forming a closed ring."""

    __slots__ = ('coords',)

    def __init__(self, coords: Iterable = ()):
        if isinstance(coords, np.ndarray):
            coords = self._rows(coords)
        self.coords: List[Coordinate] = [Coordinate.from_value(c) for c in coords]

    @staticmethod
    def _rows(arr: np.ndarray):
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise TypeError(f"Expected an (N, 2) array, got shape {arr.shape}")
        return [Coordinate(row[0], row[1]) for row in arr]

    @classmethod
    def from_array(cls, arr) -> 'LineString':
        return cls(np.asarray(arr))

    def to_array(self, dtype=np.float64) -> np.ndarray:
        """Return the coordinates as an (N, 2) array."""
        if not self.coords:
            return np.empty((0, 2), dtype=dtype)
        return np.array([c.x_y() for c in self.coords], dtype=dtype)

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return LineString(self.coords[idx])
        return self.coords[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineString):
            return NotImplemented
        return self.coords == other.coords

    __hash__ = None

    def __copy__(self) -> 'LineString':
        return type(self)(self.coords)

    def clone(self) -> 'LineString':
        return self.__copy__()

    copy = clone

    def __repr__(self):
        return f"LineString({[c.x_y() for c in self.coords]!r})"

    # -- structure ---------------------------------------------------------

    def lines(self) -> Iterator[Line]:
        """Segments between consecutive coordinates; no closing segment is added."""
        for start, end in zip(self.coords, self.coords[1:]):
            yield Line(start, end)

    def points_iter(self) -> Points:
        return Points(self.coords)

    def is_closed(self) -> bool:
        if not self.coords:
            return True
        return self.coords[0] == self.coords[-1]

    def close(self) -> None:
        """Append the first coordinate if the sequence is not already closed."""
        if not self.is_closed():
            self.coords.append(self.coords[0])

    def bounding_rect(self) -> Optional[Rect]:
        return Rect.from_coords(self.coords)

    # -- Winding primitives ------------------------------------------------

    def winding_order(self) -> Optional[WindingOrder]:
        """Winding order of this ring; None when the signed area is zero."""
        return _winding.winding_order(self)

    def points_cw(self) -> Points:
        return _winding.points_cw(self)

    def points_ccw(self) -> Points:
        return _winding.points_ccw(self)

    def make_cw_winding(self) -> None:
        _winding.make_cw_winding(self)

    def make_ccw_winding(self) -> None:
        _winding.make_ccw_winding(self)


__all__ = ['Line', 'LineString']
