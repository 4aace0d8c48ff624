"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
histomatch command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..scanner.scoring import SCORERS
from ..user_config import get_user_config


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance

    Notes:
        - Defaults for --workers, --scorer and --output-dir come from the
          user configuration (environment or ~/.histomatch/config.json)
        - The output directory has no built-in default
    """
    user_config = get_user_config()

    parser = argparse.ArgumentParser(
        description='Pair up similar JPEG images by luminance histogram and copy them in ranked order',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /path/to/photos --output-dir ./sorted
      Compare all JPEGs, then copy them to ./sorted as 0.jpg, 1.jpg, ...
      with the most similar pair first

  %(prog)s /path/to/photos --report-only -v
      Print every pair score and the ranking, copy nothing

  %(prog)s /path/to/photos -o ./sorted --dry-run
      Show which copies would be made

  %(prog)s /path/to/photos --scorer ratio --report-only
      Rank with the per-level ratio algorithm instead of cross-correlation

  %(prog)s /path/to/photos --histograms ./dat --report-only
      Also write a level<TAB>count histogram file per image
        """
    )

    # Positional argument
    parser.add_argument(
        'directory',
        type=Path,
        help='Directory containing the JPEG images to compare'
    )

    # Output options
    parser.add_argument(
        '-o', '--output-dir',
        type=Path,
        default=user_config.output_dir,
        help='Directory receiving the renamed copies (or set output_dir in the config)'
    )

    parser.add_argument(
        '--report-only',
        action='store_true',
        help='Print the ranking without copying any file'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Log the copies that would be made without performing them'
    )

    # Scoring options
    parser.add_argument(
        '-s', '--scorer',
        choices=sorted(SCORERS),
        default=user_config.default_scorer,
        help=f'Similarity algorithm. Default: {user_config.default_scorer}'
    )

    # Performance options
    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=user_config.default_workers,
        help=f'Number of parallel workers. Default: {user_config.default_workers}'
    )

    parser.add_argument(
        '--no-cache',
        action='store_true',
        help='Decode images again for every pair instead of keeping histograms in memory'
    )

    # Diagnostics
    parser.add_argument(
        '--histograms',
        nargs='?',
        const='',
        default=None,
        metavar='DIR',
        help='Write a .dat histogram file per image (beside the image, or in DIR)'
    )

    # Export options
    parser.add_argument(
        '-e', '--export',
        type=Path,
        help='Export the ranked pairs to file'
    )

    parser.add_argument(
        '--export-format',
        choices=['txt', 'csv'],
        default='txt',
        help='Export format. Default: txt'
    )

    # Output options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output (prints every pair score)'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '--workers', '8'])
        >>> args.directory
        PosixPath('/path/to/photos')
        >>> args.workers
        8
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
