"""
This module provides:
    • mark_duplicates()
    • deduplicate_candidates()
    • count_unique()
"""

from typing import List

from models.pixel import Pixel
from utils.geometry import are_similar


# -------------------------------------------------------------------------
#  DUPLICATE FLAGGING
# -------------------------------------------------------------------------

def mark_duplicates(candidates: List[Pixel], threshold=None) -> List[bool]:
    """
    Returns a "bad" flag per candidate.

    For every pair (i, j) with i < j, candidate j is flagged when it is near
    candidate i. Suppression only ever points forward, so the first-seen
    candidate of a group always survives. A flagged candidate still
    suppresses later ones.
    """
    is_bad = [False] * len(candidates)

    for i in range(len(candidates)):
        for j in range(i + 1, len(candidates)):
            if are_similar(candidates[i], candidates[j], threshold):
                is_bad[j] = True

    return is_bad


# -------------------------------------------------------------------------
#  DEDUPLICATION
# -------------------------------------------------------------------------

def deduplicate_candidates(candidates: List[Pixel], threshold=None) -> List[Pixel]:
    """
    Drops every flagged candidate, keeping scan order.
    """
    is_bad = mark_duplicates(candidates, threshold)
    return [c for c, bad in zip(candidates, is_bad) if not bad]


def count_unique(candidates: List[Pixel], threshold=None) -> int:
    """
    Number of candidates not suppressed by an earlier one.
    """
    return sum(1 for bad in mark_duplicates(candidates, threshold) if not bad)

