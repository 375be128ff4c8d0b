#!/usr/bin/env python3
"""
Runner track filter.
This script replays the fixes recorded in a GPX file through the position
quality pipeline, prints the filtered distance, and generates an
interactive HTML map of the cleaned track.

Requirements:
    pip install gpxpy folium

"""

from typing import List, Optional
import webbrowser
import argparse
import logging
import sys
import os
from gpxpy import gpx

from . import __version__
from . import visualization
from .acquisition import (
    AcquisitionError,
    AcquisitionFailure,
    FailureKind,
    acquire_initial_fix,
)
from .config import FilterConfig, TrackerConfig
from .file_utils import generate_output_filename
from .fix import Fix
from .gpx import load_fixes
from .metrics import collect_metrics, log_metrics
from .session import Accepted, ProcessResult, TrackingSession

logger = logging.getLogger("runtrack")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    defaults = FilterConfig()
    tracker_defaults = TrackerConfig()
    parser = argparse.ArgumentParser(
        description="Filter a recorded GPS track and measure its distance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX file to replay",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output HTML map file (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--min-accuracy",
        type=float,
        default=defaults.min_accuracy,
        help=f"Accuracy ceiling in meters (default: {defaults.min_accuracy})",
    )
    parser.add_argument(
        "--max-speed",
        type=float,
        default=defaults.max_speed,
        help=f"Speed ceiling in m/s (default: {defaults.max_speed})",
    )
    parser.add_argument(
        "--min-distance",
        type=float,
        default=defaults.min_distance,
        help=f"Minimum displacement between accepted fixes in meters (default: {defaults.min_distance})",
    )
    parser.add_argument(
        "--max-acceleration",
        type=float,
        default=defaults.max_acceleration,
        help=f"Maximum speed change (default: {defaults.max_acceleration})",
    )
    parser.add_argument(
        "--heading-in-radians",
        action="store_true",
        help="Convert headings to radians before dead reckoning",
    )
    parser.add_argument(
        "--kalman",
        action="store_true",
        help="Smooth exported track points with a Kalman filter",
    )
    parser.add_argument(
        "--default-accuracy",
        type=float,
        default=tracker_defaults.default_accuracy,
        help=f"Accuracy in meters for points without HDOP (default: {tracker_defaults.default_accuracy})",
    )
    parser.add_argument(
        "--uere",
        type=float,
        default=tracker_defaults.uere,
        help=f"Range error in meters used to turn HDOP into accuracy (default: {tracker_defaults.uere})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=tracker_defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {tracker_defaults.log_level})",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Don't automatically open the HTML file in browser",
    )
    parser.add_argument(
        "--no-map",
        action="store_true",
        help="Don't write an HTML map",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"runtrack {__version__}",
    )
    return parser


def build_filter_config(args: argparse.Namespace) -> FilterConfig:
    return FilterConfig(
        min_accuracy=args.min_accuracy,
        max_speed=args.max_speed,
        min_distance=args.min_distance,
        max_acceleration=args.max_acceleration,
        heading_in_radians=args.heading_in_radians,
        kalman_smoothing=args.kalman,
    )


def determine_output_filename(input_filename: str, output_arg: Optional[str]) -> str:
    """
    Determine the output filename to use.

    Args:
        input_filename: Path to the input GPX file
        output_arg: Value from --output argument (None if not specified)

    Returns:
        Output filename to use

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if output_arg is not None:
        return output_arg

    try:
        return generate_output_filename(input_filename)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        raise


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except Exception as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def setup_logging(args: argparse.Namespace) -> None:
    """Setup logging configuration."""
    level = getattr(logging, args.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def replay(session: TrackingSession, fixes: List[Fix]) -> List[ProcessResult]:
    """
    Replay recorded fixes through a tracking session.

    The first fix is obtained through the initial-fix policy, the rest are
    pushed one by one.

    Raises:
        AcquisitionError: If no initial fix could be obtained
    """
    source = iter(fixes)

    def next_position(timeout: float):
        return next(
            source,
            AcquisitionFailure(FailureKind.POSITION_UNAVAILABLE),
        )

    initial_fix = acquire_initial_fix(next_position)
    results: List[ProcessResult] = [session.start_session(initial_fix)]
    results.extend(session.feed(source))
    session.stop_session()
    return results


def print_summary(session: TrackingSession, results: List[ProcessResult]) -> None:
    accepted = [r for r in results if isinstance(r, Accepted)]
    print(
        f"Distance: {session.track.distance / 1000:.2f} km | "
        f"Points: {len(session.track)}/{len(results)} accepted"
    )
    if accepted:
        last = accepted[-1]
        print(
            f"Position Source: {last.source} | "
            f"Signal Quality: {last.quality * 100:.0f}%"
        )


def main():
    """
    Parses command-line arguments, replays the GPX file through the filter,
    and generates an interactive map.
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    setup_logging(args)

    try:
        config = build_filter_config(args)
    except ValueError as e:
        logger.error(f"Invalid filter settings: {e}")
        sys.exit(1)

    try:
        fixes = load_fixes(args.filename, args.default_accuracy, args.uere)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    logger.info(f"Loaded {len(fixes)} fixes")

    session = TrackingSession(config)
    try:
        results = replay(session, fixes)
    except AcquisitionError as e:
        logger.error(f"Error getting initial location: {e}")
        sys.exit(1)

    print_summary(session, results)

    metrics = collect_metrics(results, session.track)

    if not args.no_map and session.track:
        try:
            output_filename = determine_output_filename(args.filename, args.output)
            visualization.create_track_map(session.track, fixes, output_filename, metrics)
        except Exception as e:
            logger.error(f"Failed to create map: {e}")
            sys.exit(1)
        if not args.no_open:
            open_file_in_browser(output_filename)

    log_metrics(metrics, args.metrics)


if __name__ == "__main__":
    main()
