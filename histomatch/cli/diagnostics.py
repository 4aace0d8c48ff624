"""
Diagnostic commands for the CLI interface.

- compare: score a single pair of image files
- histogram: write the level<TAB>count histogram of image files

Both are strict: a file that cannot be decoded fails the command.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..exceptions import HistomatchError
from ..models import format_score
from ..scanner import SCORERS, compare_files, get_scorer, histogram_for_file, write_histogram_dat
from ..user_config import get_user_config
from .orchestrator import setup_logging


def compare_main(argv=None) -> int:
    """
    Score two image files and print the result.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = argparse.ArgumentParser(
        prog='histomatch compare',
        description='Score the histogram similarity of two images',
    )
    parser.add_argument('first', type=Path, help='First image')
    parser.add_argument('second', type=Path, help='Second image')
    parser.add_argument(
        '-s', '--scorer',
        choices=sorted(SCORERS),
        default=get_user_config().default_scorer,
        help='Similarity algorithm'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    try:
        score = compare_files(args.first, args.second, scorer=get_scorer(args.scorer))
    except HistomatchError as e:
        logger.error(str(e))
        return 1

    print(f"({args.first.name}, {args.second.name}) : {format_score(score)}")
    return 0


def histogram_main(argv=None) -> int:
    """
    Write a .dat histogram file for each image given.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = argparse.ArgumentParser(
        prog='histomatch histogram',
        description='Write level<TAB>count luminance histograms for manual inspection',
    )
    parser.add_argument('files', type=Path, nargs='+', help='Images to dump')
    parser.add_argument(
        '-o', '--output-dir',
        type=Path,
        default=None,
        help='Directory for the .dat files (default: beside each image)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    try:
        for filepath in args.files:
            histogram = histogram_for_file(filepath)
            dest = write_histogram_dat(histogram, filepath, args.output_dir)
            logger.info(f"{filepath.name}: {histogram.pixel_count:,} pixels -> {dest}")
    except HistomatchError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    return 0


__all__ = ['compare_main', 'histogram_main']
