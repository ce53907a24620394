"""
This module provides:
    - are_similar_values
    - are_similar   (with auto threshold from config)
    - pairwise_similar
"""

from itertools import combinations

from config import get_active_params


# ----------------------------------------------------------------------
#  SCALAR SIMILARITY
# ----------------------------------------------------------------------

def are_similar_values(a, b, threshold):
    """True when |a - b| is strictly below threshold."""
    return abs(a - b) < threshold


# ----------------------------------------------------------------------
#  PIXEL SIMILARITY (AUTO-THRESHOLD FROM CONFIG)
# ----------------------------------------------------------------------

def are_similar(p1, p2, threshold=None):
    """
    Returns True if two pixels are "near": the row difference AND the
    column difference are both below the threshold. This is a per-axis
    box test, not a Euclidean distance.
    """
    if threshold is None:
        params = get_active_params()
        threshold = params["SIMILARITY_THRESHOLD"]

    return (
        are_similar_values(p1.row, p2.row, threshold)
        and are_similar_values(p1.col, p2.col, threshold)
    )


# ----------------------------------------------------------------------
#  ANY SIMILAR PAIR
# ----------------------------------------------------------------------

def pairwise_similar(pixels, threshold=None):
    """
    Checks every unordered pair of pixels.

    Output:
        idx_pairs: list of (i, j) index tuples (i < j) whose pixels are near
    """
    idx_pairs = []
    for (i, a), (j, b) in combinations(enumerate(pixels), 2):
        if are_similar(a, b, threshold):
            idx_pairs.append((i, j))
    return idx_pairs
