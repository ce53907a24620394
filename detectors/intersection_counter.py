"""
Full detection chain for one grayscale image:

    grid -> BinaryImage -> scan_candidates -> deduplicate -> count
"""

from typing import List

import numpy as np

from models.pixel import Pixel
from models.binary_image import BinaryImage
from detectors.candidate_scanner import scan_candidates
from utils.clustering import deduplicate_candidates
from utils.image_io import to_grayscale


def find_intersections(
    gray: np.ndarray,
    step=None,
    row_skip=None,
    threshold=None,
    bounded=None,
    min_visits=None,
    max_visits=None,
) -> List[Pixel]:
    """
    Returns the deduplicated intersection positions, in scan order.

    `gray` may also be a BGR/BGRA image, it is converted first.
    """
    image = BinaryImage(to_grayscale(np.asarray(gray)))

    candidates = scan_candidates(
        image,
        step=step,
        row_skip=row_skip,
        threshold=threshold,
        bounded=bounded,
        min_visits=min_visits,
        max_visits=max_visits,
    )
    return deduplicate_candidates(candidates, threshold)


def count_intersections(gray: np.ndarray, **kwargs) -> int:
    """
    Number of distinct intersections found in the image.
    Accepts the same keyword overrides as find_intersections().
    """
    return len(find_intersections(gray, **kwargs))
