"""Vectorized shoelace sums for float rings stored as numpy arrays.

These mirror ``winding.twice_signed_ring_area`` for the common float64 case:
only consecutive rows form edges, no closing edge is added.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .config import WindingConfig
from .winding import WindingOrder, classify_twice_area


def twice_signed_ring_area_array(coords) -> float:
    """Twice the signed area of an (N, 2) coordinate array; 0.0 when N < 2."""
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords must be an (N, 2) array, got shape {arr.shape}")
    if arr.shape[0] < 2:
        return 0.0
    x = arr[:, 0]; y = arr[:, 1]
    return float(np.dot(x[:-1], y[1:]) - np.dot(y[:-1], x[1:]))


def twice_signed_ring_areas(rings: Sequence) -> np.ndarray:
    """Per-ring shoelace sums for a batch of (N_i, 2) arrays."""
    return np.array([twice_signed_ring_area_array(r) for r in rings], dtype=np.float64)


def winding_orders(rings: Sequence, config: Optional[WindingConfig] = None) -> List[Optional[WindingOrder]]:
    """Winding order of each ring; None for degenerate rings."""
    return [classify_twice_area(a, config) for a in twice_signed_ring_areas(rings)]


__all__ = ['twice_signed_ring_area_array', 'twice_signed_ring_areas', 'winding_orders']
