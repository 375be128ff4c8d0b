#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

import os
import logging

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


def _reserve(candidate: str) -> bool:
    """Create ``candidate`` exclusively; False if it already exists."""
    try:
        with open(candidate, "x"):
            pass
        return True
    except FileExistsError:
        return False
    except OSError as e:
        logger.error(f"Cannot create file {candidate}: {e}")
        raise ValueError(f"Cannot create file: {e}")


def generate_output_filename(input_filename: str) -> str:
    """
    Generate an output HTML filename next to the input and reserve it.

    "run.gpx" becomes "run track.html"; if that exists " (1)", " (2)", ...
    are tried. Names are reserved with an exclusive create so two runs
    never write the same file.

    Args:
        input_filename: Path to the input GPX file

    Returns:
        Filename that has been created as an empty file

    Raises:
        RuntimeError: If no available filename was found
        ValueError: If a file cannot be created (permissions, invalid name)
    """
    input_dir = os.path.dirname(input_filename)
    base_name, extension = os.path.splitext(os.path.basename(input_filename))
    if extension.lower() != ".gpx":
        base_name += extension
    base_output = os.path.join(input_dir, base_name + " track")

    if _reserve(base_output + ".html"):
        return base_output + ".html"

    for i in range(1, MAX_ATTEMPTS + 1):
        candidate = f"{base_output} ({i}).html"
        if _reserve(candidate):
            return candidate

    logger.error(
        f"Could not find an available filename after {MAX_ATTEMPTS} attempts. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(f"No available filename found after {MAX_ATTEMPTS} attempts")
