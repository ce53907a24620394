import argparse
import os
import sys
from typing import Optional, Sequence

import numpy as np

from utils.image_io import load_grayscale
from detectors.intersection_counter import find_intersections
from visualization.save_outputs import save_all_outputs

from config import OUTPUT_FOLDER


USAGE = "You need to give name of png file"


def log(message: str, verbose: bool):
    """Status lines go to stderr so stdout only carries the count."""
    if verbose:
        print(message, file=sys.stderr)


def process_image(
    gray: np.ndarray,
    image_name: str,
    verbose: bool = False,
    annotate: bool = False,
    output_dir: str = OUTPUT_FOLDER,
    bounded: Optional[bool] = None,
) -> int:
    """
    Runs the complete pipeline for one image:
      1. Binary classification of the intensity grid
      2. Strided candidate scan (flood fill + junction test per sample)
      3. Deduplication of nearby candidates
      4. Optional annotated output
    Returns the intersection count.
    """
    log(f"[INFO] Processing {image_name}, shape {gray.shape[:2]}", verbose)

    if gray.size == 0:
        log(f"[WARN] Empty image for {image_name}, nothing to scan.", verbose)

    # ------------------------------
    # STEPS 1-3: DETECT & DEDUPLICATE
    # ------------------------------
    intersections = find_intersections(gray, bounded=bounded)
    log(f"[INFO] {len(intersections)} intersection(s) after deduplication", verbose)

    # ------------------------------
    # STEP 4: SAVE OUTPUTS
    # ------------------------------
    if annotate:
        path = save_all_outputs(
            output_dir=output_dir,
            image_id=image_name,
            base_image=gray,
            intersections=intersections,
        )
        if path is None:
            log(f"[WARN] No annotated output written for {image_name}", verbose)
        else:
            log(f"[OK] Saved {path}", verbose)

    return len(intersections)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count line intersections in a black/white line-art image."
    )
    parser.add_argument(
        "images",
        nargs="*",
        metavar="image",
        help="Path to the image file (decoded as grayscale). Extra paths are ignored.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print status lines to stderr.",
    )
    parser.add_argument(
        "--annotate",
        action="store_true",
        help="Save a copy of the image with detected intersections marked.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=OUTPUT_FOLDER,
        help=f"Directory for annotated output (default: {OUTPUT_FOLDER}).",
    )
    parser.add_argument(
        "--literal-fill",
        action="store_true",
        help="Let each flood fill run until its queue is exhausted.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point:
      - Loads the image given on the command line
      - Prints the intersection count to stdout
    Returns the process exit code.
    """
    args = parse_args(argv)
    if not args.images:
        print(USAGE)
        return 1
    image_path = args.images[0]

    gray = load_grayscale(image_path)
    if gray.size == 0:
        log(f"[WARN] Could not decode image: {image_path}", args.verbose)

    image_name = os.path.splitext(os.path.basename(image_path))[0]
    count = process_image(
        gray,
        image_name,
        verbose=args.verbose,
        annotate=args.annotate,
        output_dir=args.output_dir,
        bounded=False if args.literal_fill else None,
    )

    print(count)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
