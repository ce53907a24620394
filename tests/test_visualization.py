import cv2
import numpy as np

from models.pixel import Pixel
from visualization.draw_intersections import draw_intersections, to_bgr
from visualization.save_outputs import save_all_outputs


def test_to_bgr_converts_grayscale():
    vis = to_bgr(np.zeros((5, 7), dtype=np.uint8))
    assert vis.shape == (5, 7, 3)


def test_marker_is_drawn_at_row_col():
    vis = to_bgr(np.zeros((40, 60), dtype=np.uint8))

    draw_intersections(vis, [Pixel(10, 30)])

    assert tuple(vis[10, 30]) == (0, 0, 255)
    assert tuple(vis[30, 10]) == (0, 0, 0)


def test_save_all_outputs(tmp_path):
    base = np.zeros((20, 20), dtype=np.uint8)

    path = save_all_outputs(str(tmp_path / "o"), "img", base, [Pixel(5, 5)])

    assert path is not None
    assert cv2.imread(path) is not None


def test_save_all_outputs_ignores_empty_image(tmp_path):
    empty = np.zeros((0, 0), dtype=np.uint8)
    assert save_all_outputs(str(tmp_path), "img", empty, []) is None
