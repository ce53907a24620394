"""
Visualization Tools

Provides drawing and saving utilities for detected intersections.
"""

from .draw_intersections import draw_intersections, to_bgr
from .save_outputs import save_all_outputs, save_intersections

__all__ = [
    "draw_intersections",
    "to_bgr",
    "save_all_outputs",
    "save_intersections",
]
