"""
Configuration file for the intersection-counting system.

Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"


# ---------------------------------------------------------------
# SCANNER PARAMETERS
# ---------------------------------------------------------------

SCAN_STEP = 5                 # stride of the sampling grid (rows & cols)
SCAN_ROW_SKIP = 20            # extra rows skipped after a positive hit


# ---------------------------------------------------------------
# SHAPE SAMPLER (FLOOD FILL) PARAMETERS
# ---------------------------------------------------------------

# When False the fill runs until the queue is exhausted
BOUNDED_FILL = True

FILL_MIN_VISITS = 200
FILL_MAX_VISITS = 400


# ---------------------------------------------------------------
# CLASSIFIER / DEDUPLICATION
# ---------------------------------------------------------------

SIMILARITY_THRESHOLD = 5      # per-axis, strict "<"


# ---------------------------------------------------------------
# VISUALIZATION
# ---------------------------------------------------------------

COLOR_INTERSECTION = (0, 0, 255)   # red (BGR)
MARKER_SIZE = 12
MARKER_THICKNESS = 2


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so detectors
    only need to import this function.
    """
    return {
        "SCAN_STEP": SCAN_STEP,
        "SCAN_ROW_SKIP": SCAN_ROW_SKIP,
        "BOUNDED_FILL": BOUNDED_FILL,
        "FILL_MIN_VISITS": FILL_MIN_VISITS,
        "FILL_MAX_VISITS": FILL_MAX_VISITS,
        "SIMILARITY_THRESHOLD": SIMILARITY_THRESHOLD,
        "COLOR_INTERSECTION": COLOR_INTERSECTION,
        "MARKER_SIZE": MARKER_SIZE,
        "MARKER_THICKNESS": MARKER_THICKNESS,
    }
