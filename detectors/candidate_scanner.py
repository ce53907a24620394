from typing import List

from models.pixel import Pixel
from models.binary_image import BinaryImage
from detectors.junction_classifier import is_intersection
from config import get_active_params


# ----------------------------------------------------------------------
# STRIDED CANDIDATE SCAN
# ----------------------------------------------------------------------

def scan_candidates(
    image: BinaryImage,
    step=None,
    row_skip=None,
    threshold=None,
    bounded=None,
    min_visits=None,
    max_visits=None,
) -> List[Pixel]:
    """
    Detect raw intersection candidates on a coarse sampling grid.

      - Samples every `step` rows and columns, row-major
      - Only background samples are tested
      - Each positive sample is recorded as a candidate
      - Every hit moves the row cursor `row_skip` rows down at once; the
        remaining columns of the pass are sampled on the new row, and the
        pass ends early when that row falls outside the image

    Duplicate hits on one physical junction are expected here and are
    removed later by utils.clustering.

    Returns
    -------
    list[Pixel]
        Candidates in scan order.
    """
    params = get_active_params()
    if step is None:
        step = params["SCAN_STEP"]
    if row_skip is None:
        row_skip = params["SCAN_ROW_SKIP"]
    if step <= 0:
        raise ValueError(f"scan step must be positive, got {step}")

    rows, columns = image.rows(), image.columns()
    candidates: List[Pixel] = []

    row = 0
    while row < rows:
        col = 0
        while col < columns and row < rows:
            if image.is_background(row, col):
                seed = Pixel(row, col)
                if is_intersection(
                    seed,
                    image,
                    threshold=threshold,
                    bounded=bounded,
                    min_visits=min_visits,
                    max_visits=max_visits,
                ):
                    candidates.append(seed)
                    row += row_skip
            col += step
        row += step

    return candidates
