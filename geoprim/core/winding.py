"""Winding order of closed point sequences.

Classification uses the shoelace formula: the sum of the determinants of
every consecutive edge is twice the signed area of the ring, positive for a
counter-clockwise traversal and negative for a clockwise one. A zero sum
(collinear or degenerate ring) has no winding order.

The functions here work on any ring object exposing ``coords`` (a mutable
list of Coordinate) and ``lines()``; ``LineString`` is the concrete user and
gets the same operations as methods through the ``Winding`` base class.
"""
from __future__ import annotations

import copy
from enum import Enum
from typing import Iterator, Optional

from .config import NON_FINITE_RAISE, WindingConfig, active_winding_config
from .coords import Point
from .logging_utils import get_logger
from .numeric import is_comparable, one_like, zero_like

logger = get_logger(__name__)


class WindingOrder(Enum):
    """How a ring is wound. Undefined winding is ``None`` at the call site."""
    CLOCKWISE = 'clockwise'
    COUNTER_CLOCKWISE = 'counter_clockwise'

    def reversed(self) -> 'WindingOrder':
        if self is WindingOrder.CLOCKWISE:
            return WindingOrder.COUNTER_CLOCKWISE
        return WindingOrder.CLOCKWISE


def twice_signed_ring_area(ring):
    """Twice the signed area traced by the ring's consecutive points.

    Only the edges formed by adjacent points are summed; no closing edge is
    synthesized, so an open sequence is measured as-is. Sequences of zero or
    one point return the additive identity.
    """
    coords = ring.coords
    if len(coords) < 2:
        return zero_like(coords[0].x if coords else None)
    total = zero_like(coords[0].x)
    for line in ring.lines():
        total = total + line.determinant()
    return total


def signed_ring_area(ring):
    """Signed area of the ring (half the shoelace sum)."""
    twice = twice_signed_ring_area(ring)
    one = one_like(twice)
    return twice / (one + one)


def classify_twice_area(value, config: Optional[WindingConfig] = None) -> Optional[WindingOrder]:
    """Map a shoelace sum to a winding order.

    Negative is clockwise, positive counter-clockwise, exactly zero undefined.
    An incomparable sum (NaN) is handled according to ``config.non_finite``.
    """
    if not is_comparable(value):
        cfg = config if config is not None else active_winding_config()
        logger.warning("Shoelace sum %r is not comparable; ring has non-finite coordinates", value)
        if cfg.non_finite == NON_FINITE_RAISE:
            raise ValueError(f"Cannot classify winding order: signed area sum is {value!r}")
        return None
    zero = zero_like(value)
    if value < zero:
        return WindingOrder.CLOCKWISE
    if value > zero:
        return WindingOrder.COUNTER_CLOCKWISE
    return None


def winding_order(ring, config: Optional[WindingConfig] = None) -> Optional[WindingOrder]:
    return classify_twice_area(twice_signed_ring_area(ring), config)


class Points:
    """Lazy view over a ring's points in a fixed direction.

    The direction is chosen once, when the view is built; each iteration
    walks the ring's current coordinates again without copying them.
    """

    __slots__ = ('_coords', '_reverse')

    def __init__(self, coords, reverse: bool = False):
        self._coords = coords
        self._reverse = reverse

    @property
    def is_reversed(self) -> bool:
        return self._reverse

    def __iter__(self) -> Iterator[Point]:
        source = reversed(self._coords) if self._reverse else iter(self._coords)
        for c in source:
            yield Point(c)

    def __len__(self) -> int:
        return len(self._coords)

    def __repr__(self):
        direction = 'reversed' if self._reverse else 'forward'
        return f"Points({direction}, n={len(self._coords)})"


def points_cw(ring) -> Points:
    return Points(ring.coords, reverse=winding_order(ring) is WindingOrder.COUNTER_CLOCKWISE)


def points_ccw(ring) -> Points:
    return Points(ring.coords, reverse=winding_order(ring) is WindingOrder.CLOCKWISE)


def _reverse_if(ring, current: WindingOrder) -> None:
    if winding_order(ring) is not current:
        return
    ring.coords.reverse()
    if active_winding_config().log_reversals:
        logger.debug("Reversed %d-point ring from %s to %s",
                     len(ring.coords), current.value, current.reversed().value)


def make_cw_winding(ring) -> None:
    """Reverse the ring in place iff it is currently counter-clockwise."""
    _reverse_if(ring, WindingOrder.COUNTER_CLOCKWISE)


def make_ccw_winding(ring) -> None:
    """Reverse the ring in place iff it is currently clockwise."""
    _reverse_if(ring, WindingOrder.CLOCKWISE)


class Winding:
    """Winding interface.

    Concrete geometries implement ``winding_order``, ``points_cw``,
    ``points_ccw``, ``make_cw_winding`` and ``make_ccw_winding`` (and support
    ``copy.copy``); the remaining methods are derived from those.
    """

    __slots__ = ()

    def winding_order(self) -> Optional[WindingOrder]:
        raise NotImplementedError("Subclasses must implement winding_order")

    def points_cw(self) -> Points:
        raise NotImplementedError("Subclasses must implement points_cw")

    def points_ccw(self) -> Points:
        raise NotImplementedError("Subclasses must implement points_ccw")

    def make_cw_winding(self) -> None:
        raise NotImplementedError("Subclasses must implement make_cw_winding")

    def make_ccw_winding(self) -> None:
        raise NotImplementedError("Subclasses must implement make_ccw_winding")

    def is_cw(self) -> bool:
        return self.winding_order() is WindingOrder.CLOCKWISE

    def is_ccw(self) -> bool:
        return self.winding_order() is WindingOrder.COUNTER_CLOCKWISE

    def make_winding_order(self, order: WindingOrder) -> None:
        if order is WindingOrder.CLOCKWISE:
            self.make_cw_winding()
        elif order is WindingOrder.COUNTER_CLOCKWISE:
            self.make_ccw_winding()
        else:
            raise TypeError(f"Expected a WindingOrder, got {order!r}")

    def clone_to_winding_order(self, order: WindingOrder):
        """Return a copy wound in ``order``; ``self`` is left untouched."""
        new = copy.copy(self)
        new.make_winding_order(order)
        return new


__all__ = [
    'WindingOrder', 'Winding', 'Points',
    'twice_signed_ring_area', 'signed_ring_area', 'classify_twice_area', 'winding_order',
    'points_cw', 'points_ccw', 'make_cw_winding', 'make_ccw_winding',
]
