from typing import List, Optional, Tuple

from models.pixel import Pixel
from models.binary_image import BinaryImage
from detectors.flood_fill import bounded_flood_fill
from utils.geometry import pairwise_similar


# ----------------------------------------------------------------------
# 1. EXTREMAL PIXELS
# ----------------------------------------------------------------------
# Ties keep the first pixel in input order (strict comparisons).

def get_leftmost(pixels: List[Pixel]) -> Optional[Pixel]:
    """Pixel with the minimum row coordinate."""
    best = None
    for p in pixels:
        if best is None or p.row < best.row:
            best = p
    return best


def get_rightmost(pixels: List[Pixel]) -> Optional[Pixel]:
    """Pixel with the maximum row coordinate."""
    best = None
    for p in pixels:
        if best is None or p.row > best.row:
            best = p
    return best


def get_topmost(pixels: List[Pixel]) -> Optional[Pixel]:
    """Pixel with the minimum column coordinate."""
    best = None
    for p in pixels:
        if best is None or p.col < best.col:
            best = p
    return best


def get_bottommost(pixels: List[Pixel]) -> Optional[Pixel]:
    """Pixel with the maximum column coordinate."""
    best = None
    for p in pixels:
        if best is None or p.col > best.col:
            best = p
    return best


def get_extremal_pixels(pixels: List[Pixel]) -> Optional[Tuple[Pixel, Pixel, Pixel, Pixel]]:
    """
    (leftmost, rightmost, topmost, bottommost), or None for an empty input.
    """
    if not pixels:
        return None
    return (
        get_leftmost(pixels),
        get_rightmost(pixels),
        get_topmost(pixels),
        get_bottommost(pixels),
    )


# ----------------------------------------------------------------------
# 2. SHAPE DECISION
# ----------------------------------------------------------------------

def is_junction_shape(pixels: List[Pixel], threshold=None) -> bool:
    """
    A sampled stroke region looks like a junction when none of the six
    pairs of extremal pixels are near each other.

    Strokes converging from several directions keep the extremal pixels
    apart; a curve or straight segment collapses at least two of them.
    Empty and single-pixel regions are never junctions.
    """
    extremal = get_extremal_pixels(pixels)
    if extremal is None:
        return False
    return not pairwise_similar(extremal, threshold)


def is_intersection(
    seed: Pixel,
    image: BinaryImage,
    threshold=None,
    bounded=None,
    min_visits=None,
    max_visits=None,
) -> bool:
    """
    Samples the stroke shape around `seed` and classifies it.
    """
    stroke_pixels = bounded_flood_fill(
        seed,
        image,
        bounded=bounded,
        min_visits=min_visits,
        max_visits=max_visits,
    )
    return is_junction_shape(stroke_pixels, threshold)
