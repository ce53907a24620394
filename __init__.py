"""
Line Intersection Counter

This package counts junctions in black/white line-art images
(grids, mazes, scanned diagrams), including:

- Binary pixel classification
- Bounded flood-fill shape sampling
- Junction classification from extremal pixels
- Strided candidate scanning & deduplication
- Output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
