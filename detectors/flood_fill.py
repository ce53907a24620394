from collections import deque
from typing import List

import numpy as np

from models.pixel import Pixel
from models.binary_image import BinaryImage
from config import get_active_params


# ----------------------------------------------------------------------
# SHAPE SAMPLER: BOUNDED BREADTH-FIRST FLOOD FILL
# ----------------------------------------------------------------------

def bounded_flood_fill(
    seed: Pixel,
    image: BinaryImage,
    bounded=None,
    min_visits=None,
    max_visits=None,
) -> List[Pixel]:
    """
    Breadth-first traversal from `seed` over 4-connected neighbours,
    returning the stroke pixels met, in visitation order.

    The traversal crosses both classes: every unvisited in-bounds
    neighbour is enqueued. Only stroke pixels are recorded.

    Stopping rule (bounded mode):
      - stroke_count starts at 1, background_count at 0
      - each dequeued pixel increments one of the two counters
      - the loop runs while the queue is non-empty AND
        (background_count < stroke_count OR total < min_visits) AND
        total < max_visits

    With bounded=False the counters are never advanced, which leaves the
    traversal to run until the queue is exhausted.

    Parameters
    ----------
    seed : Pixel
        Start position, must lie inside the image.
    image : BinaryImage
        Read-only classification grid.

    Returns
    -------
    list[Pixel]
        Stroke pixels, each at most once, in BFS order.
    """
    params = get_active_params()
    if bounded is None:
        bounded = params["BOUNDED_FILL"]
    if min_visits is None:
        min_visits = params["FILL_MIN_VISITS"]
    if max_visits is None:
        max_visits = params["FILL_MAX_VISITS"]

    visited = np.zeros(image.shape, dtype=bool)
    queue = deque([seed])
    visited[seed.row, seed.col] = True

    background_count = 0
    stroke_count = 1  # seed
    stroke_pixels: List[Pixel] = []

    while (
        queue
        and (background_count < stroke_count
             or background_count + stroke_count < min_visits)
        and background_count + stroke_count < max_visits
    ):
        pixel = queue.popleft()

        if image.is_background(pixel.row, pixel.col):
            if bounded:
                background_count += 1
        else:
            stroke_pixels.append(pixel)
            if bounded:
                stroke_count += 1

        for nb in image.neighbours(pixel.row, pixel.col):
            if not visited[nb.row, nb.col]:
                visited[nb.row, nb.col] = True
                queue.append(nb)

    return stroke_pixels
