"""
Data Models

Defines the core data structures:
- Pixel
- BinaryImage
"""

from .pixel import Pixel
from .binary_image import BinaryImage

__all__ = ["Pixel", "BinaryImage"]
