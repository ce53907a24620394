import numpy as np
import pytest


def _blank(size):
    return np.zeros((size, size), dtype=np.uint8)


@pytest.fixture
def plus_image():
    """Factory for a '+' of 255-valued strokes on a zero background."""
    def make(size=61, center=(30, 30), arm=20, thickness=1):
        img = _blank(size)
        r, c = center
        half = thickness // 2
        img[r - half:r - half + thickness, c - arm:c + arm + 1] = 255
        img[r - arm:r + arm + 1, c - half:c - half + thickness] = 255
        return img
    return make


@pytest.fixture
def hline_image():
    """Factory for a single horizontal stroke."""
    def make(size=61, row=30, start=5, stop=55, thickness=1):
        img = _blank(size)
        img[row:row + thickness, start:stop + 1] = 255
        return img
    return make
