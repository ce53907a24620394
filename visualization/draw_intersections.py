"""
Visualization utilities for rendering detected intersections.

This module provides:
    • to_bgr(gray)
    • draw_intersections(img, intersections)

Used by:
    - save_outputs.py
"""

from typing import List

import cv2
import numpy as np

from models.pixel import Pixel
from config import get_active_params


def to_bgr(image: np.ndarray) -> np.ndarray:
    """
    Returns a 3-channel uint8 copy suitable for colour drawing.
    """
    if image.dtype != np.uint8:
        image = np.clip(image, 0, 255).astype(np.uint8)
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    return image.copy()


def draw_intersections(image, intersections: List[Pixel], color=None):
    """
    Draws a cross marker on every intersection (in place) and returns the image.

    Pixels are (row, col); OpenCV expects (x, y) = (col, row).
    """
    params = get_active_params()
    if color is None:
        color = params["COLOR_INTERSECTION"]

    for p in intersections:
        cv2.drawMarker(
            image,
            (int(p.col), int(p.row)),
            color,
            markerType=cv2.MARKER_CROSS,
            markerSize=params["MARKER_SIZE"],
            thickness=params["MARKER_THICKNESS"],
        )

        # Center dot
        cv2.circle(
            image,
            (int(p.col), int(p.row)),
            1,
            color,
            thickness=-1
        )

    return image
