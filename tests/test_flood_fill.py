import numpy as np

from models.binary_image import BinaryImage
from models.pixel import Pixel
from detectors.flood_fill import bounded_flood_fill


def test_collects_stroke_pixels_in_bfs_order():
    gray = np.zeros((3, 3), dtype=np.uint8)
    gray[1, 1] = 255
    gray[2, 2] = 255

    result = bounded_flood_fill(Pixel(0, 0), BinaryImage(gray))

    assert result == [Pixel(1, 1), Pixel(2, 2)]


def test_background_only_region_yields_nothing():
    image = BinaryImage(np.zeros((20, 20), dtype=np.uint8))
    assert bounded_flood_fill(Pixel(10, 10), image) == []


def test_bounded_fill_stays_local():
    gray = np.zeros((100, 100), dtype=np.uint8)
    gray[80, 80] = 255
    image = BinaryImage(gray)

    assert bounded_flood_fill(Pixel(10, 10), image) == []
    assert bounded_flood_fill(Pixel(10, 10), image, bounded=False) == [Pixel(80, 80)]


def test_stroke_dominated_region_stops_at_upper_cap():
    image = BinaryImage(np.full((50, 50), 255, dtype=np.uint8))

    result = bounded_flood_fill(Pixel(25, 25), image)

    # stroke counter starts at 1, so max_visits - 1 pixels are dequeued
    assert len(result) == 399
    assert len(bounded_flood_fill(Pixel(25, 25), image, max_visits=50)) == 49


def test_literal_fill_visits_every_pixel_exactly_once():
    rng = np.random.default_rng(0)
    gray = (rng.random((30, 40)) < 0.3).astype(np.uint8) * 255
    image = BinaryImage(gray)

    result = bounded_flood_fill(Pixel(0, 0), image, bounded=False)

    assert len(result) == len(set(result))
    assert len(result) == int(np.count_nonzero(gray))


def test_fill_is_deterministic(plus_image):
    image = BinaryImage(plus_image())
    first = bounded_flood_fill(Pixel(28, 28), image)
    second = bounded_flood_fill(Pixel(28, 28), image)
    assert first == second
    assert first
