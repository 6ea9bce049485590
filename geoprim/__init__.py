"""Public package API for geoprim, a small 2D geometry primitives toolkit.

This facade flattens the internal ``geoprim.core`` package into a single
import surface.

Example
-------
    from geoprim import LineString, Rect, WindingOrder

    ring = LineString([(0, 0), (1, 2), (2, 0), (0, 0)])
    ring.winding_order()          # WindingOrder.CLOCKWISE
    ring.make_ccw_winding()

The deeper modules (``geoprim.core.*``) are considered internal.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("geoprim")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.coords import Coordinate, Point
from .core.line_string import Line, LineString
from .core.rect import Rect, combine_rects
from .core.winding import (
    Points,
    Winding,
    WindingOrder,
    classify_twice_area,
    signed_ring_area,
    twice_signed_ring_area,
)
from .core.vectorized import twice_signed_ring_area_array, twice_signed_ring_areas, winding_orders
from .core.config import WindingConfig, active_winding_config, winding_config
from .core.logging_utils import configure_logging, get_logger
from .core import numeric

__all__ = [
    '__version__',
    # primitives
    'Coordinate', 'Point', 'Line', 'LineString', 'Rect', 'combine_rects',
    # winding
    'WindingOrder', 'Winding', 'Points',
    'twice_signed_ring_area', 'signed_ring_area', 'classify_twice_area',
    'twice_signed_ring_area_array', 'twice_signed_ring_areas', 'winding_orders',
    # configuration / logging
    'WindingConfig', 'active_winding_config', 'winding_config',
    'configure_logging', 'get_logger',
    'numeric',
]
