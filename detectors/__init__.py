"""
Detectors Package

Contains the detection modules used in the intersection counting pipeline:
- Bounded flood fill (shape sampler)
- Junction classification from extremal pixels
- Strided candidate scanning
- End-to-end counting
"""

from .flood_fill import bounded_flood_fill
from .junction_classifier import (
    get_leftmost,
    get_rightmost,
    get_topmost,
    get_bottommost,
    get_extremal_pixels,
    is_junction_shape,
    is_intersection,
)
from .candidate_scanner import scan_candidates
from .intersection_counter import find_intersections, count_intersections

__all__ = [
    "bounded_flood_fill",
    "get_leftmost",
    "get_rightmost",
    "get_topmost",
    "get_bottommost",
    "get_extremal_pixels",
    "is_junction_shape",
    "is_intersection",
    "scan_candidates",
    "find_intersections",
    "count_intersections",
]
