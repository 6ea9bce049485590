"""Axis-aligned bounding rectangles.

A Rect is a ``min``/``max`` Coordinate pair. Callers are expected to keep
``min <= max`` component-wise; it is not checked, and a violated rect simply
reports a negative width or height.

Merging uses ``simple_min``/``simple_max`` rather than builtin min/max. With
NaN coordinates the comparisons are false and the second operand wins, so
``a.combined(b)`` and ``b.combined(a)`` may differ once NaN is present.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .coords import Coordinate
from .numeric import one_like, simple_max, simple_min


@dataclass(frozen=True)
class Rect:
    min: Coordinate
    max: Coordinate

    def __post_init__(self):
        object.__setattr__(self, 'min', Coordinate.from_value(self.min))
        object.__setattr__(self, 'max', Coordinate.from_value(self.max))

    @classmethod
    def new(cls, min, max) -> 'Rect':
        """Build a Rect from two coordinate-convertible values, e.g. ``Rect.new((0, 0), (10, 10))``."""
        return cls(min, max)

    @classmethod
    def from_coords(cls, coords: Iterable) -> Optional['Rect']:
        """Bounding rect of a coordinate collection, or None when it is empty."""
        it = iter(coords)
        try:
            first = Coordinate.from_value(next(it))
        except StopIteration:
            return None
        rect = cls(first, first)
        for c in it:
            c = Coordinate.from_value(c)
            rect = rect.combined(cls(c, c))
        return rect

    def width(self):
        return self.max.x - self.min.x

    def height(self):
        return self.max.y - self.min.y

    def center(self) -> Coordinate:
        two = one_like(self.min.x) + one_like(self.min.x)
        return Coordinate((self.min.x + self.max.x) / two, (self.min.y + self.max.y) / two)

    def combined(self, other: 'Rect') -> 'Rect':
        """Return a new Rect which covers both ``self`` and ``other``.

        The result may include area belonging to neither input, e.g. for two
        diagonally offset rects.
        """
        return Rect(
            Coordinate(simple_min(self.min.x, other.min.x), simple_min(self.min.y, other.min.y)),
            Coordinate(simple_max(self.max.x, other.max.x), simple_max(self.max.y, other.max.y)),
        )

    def contains_coordinate(self, coord) -> bool:
        c = Coordinate.from_value(coord)
        return self.min.x <= c.x <= self.max.x and self.min.y <= c.y <= self.max.y

    def contains_rect(self, other: 'Rect') -> bool:
        return self.contains_coordinate(other.min) and self.contains_coordinate(other.max)

    def to_polygon_ring(self):
        """Closed counter-clockwise LineString through the four corners."""
        from .line_string import LineString
        (x0, y0), (x1, y1) = self.min, self.max
        return LineString([(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)])


def combine_rects(rects: Iterable[Rect]) -> Rect:
    """Fold ``Rect.combined`` over a non-empty iterable of rects."""
    it = iter(rects)
    try:
        acc = next(it)
    except StopIteration:
        raise ValueError("combine_rects() requires at least one Rect") from None
    for r in it:
        acc = acc.combined(r)
    return acc


__all__ = ['Rect', 'combine_rects']
