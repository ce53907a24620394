"""
Output-saving utilities for the intersection counting pipeline.

This module provides:
    • save_intersections(...)
    • save_all_outputs(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import os
from typing import List, Optional

import numpy as np

from models.pixel import Pixel
from visualization.draw_intersections import draw_intersections, to_bgr
from utils.image_io import save_image, ensure_output_dir


def save_intersections(path: str, base_image: np.ndarray, intersections: List[Pixel]) -> bool:
    """
    Draw intersections on a BGR copy of the base image and save to disk.
    """
    vis = to_bgr(base_image)
    draw_intersections(vis, intersections)
    return save_image(path, vis)


def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    intersections: List[Pixel],
) -> Optional[str]:
    """
    Saves every output artifact for one processed image.

    Example output:
        <id>_intersections.png

    Returns the written path, or None when there is nothing to draw on
    (empty image) or OpenCV refused to write.
    """
    if base_image.size == 0:
        return None

    ensure_output_dir(output_dir)

    path = os.path.join(output_dir, f"{image_id}_intersections.png")
    if not save_intersections(path, base_image, intersections):
        return None
    return path
