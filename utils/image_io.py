"""
Image I/O utilities for the intersection counting pipeline.

This module provides:
    • load_grayscale(path)
    • to_grayscale(image)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  COLOUR CONVERSION
# -------------------------------------------------------------------------

def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Returns a single-channel view of the image.
    BGR and BGRA inputs are converted with OpenCV; 2-D input is returned as-is.
    """
    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    if image.ndim == 3 and image.shape[2] == 1:
        return image[:, :, 0]
    return image


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_grayscale(path: str) -> np.ndarray:
    """
    Decode an image file into a 2-D uint8 intensity grid.

    A file that is missing or cannot be decoded yields an empty (0, 0)
    grid instead of raising, so the pipeline degrades to a zero count.
    """
    img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if img is None:
        return np.zeros((0, 0), dtype=np.uint8)
    return to_grayscale(img)


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Save an image to disk, ensuring the directory exists.
    Returns OpenCV's success flag.
    """
    ensure_output_dir(os.path.dirname(path))
    return bool(cv2.imwrite(path, image))
