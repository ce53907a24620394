"""
Utility Functions

Provides pixel similarity tests, candidate deduplication,
image I/O utilities, and helper functions used across detectors.
"""

from .geometry import are_similar_values, are_similar, pairwise_similar
from .clustering import (
    mark_duplicates,
    deduplicate_candidates,
    count_unique,
)
from .image_io import load_grayscale, to_grayscale, ensure_output_dir, save_image

__all__ = [
    "are_similar_values",
    "are_similar",
    "pairwise_similar",
    "mark_duplicates",
    "deduplicate_candidates",
    "count_unique",
    "load_grayscale",
    "to_grayscale",
    "ensure_output_dir",
    "save_image",
]
