"""
Histomatch
==========
Pairs up visually similar JPEG images by comparing luminance histograms.

Features:
- 256-level luminance histogram per image
- Pluggable similarity scorers (cross-correlation by default)
- Parallel all-pairs comparison, each pair scored once
- Best match per image, ranked by similarity strength
- Ranked, renumbered copy of the images into an output directory
- Histogram dumps for manual inspection
"""

__version__ = "1.0.0"
__author__ = "Zedidence"

from .models import Histogram, PairScore, RankedPair, CopyOperation, ComparisonStats
from .exceptions import (
    HistomatchError,
    DecodeError,
    UnsupportedPixelFormat,
    DirectoryReadError,
    CopyError,
    ConfigurationError,
)
from .config import JPEG_EXTENSIONS, HISTOGRAM_LEVELS, DEFAULT_SCORER
from .scanner import (
    is_jpeg,
    list_image_files,
    decode_luma,
    extract_histogram,
    histogram_for_file,
    write_histogram_dat,
    cross_correlation,
    absolute_difference,
    bin_ratio,
    get_scorer,
    compare_images,
    compare_directory,
    compare_files,
    select_best_matches,
    rank_pairs,
    lookup_score,
)
from .cli.actions import plan_copies, materialize

__all__ = [
    "Histogram",
    "PairScore",
    "RankedPair",
    "CopyOperation",
    "ComparisonStats",
    "HistomatchError",
    "DecodeError",
    "UnsupportedPixelFormat",
    "DirectoryReadError",
    "CopyError",
    "ConfigurationError",
    "JPEG_EXTENSIONS",
    "HISTOGRAM_LEVELS",
    "DEFAULT_SCORER",
    "is_jpeg",
    "list_image_files",
    "decode_luma",
    "extract_histogram",
    "histogram_for_file",
    "write_histogram_dat",
    "cross_correlation",
    "absolute_difference",
    "bin_ratio",
    "get_scorer",
    "compare_images",
    "compare_directory",
    "compare_files",
    "select_best_matches",
    "rank_pairs",
    "lookup_score",
    "plan_copies",
    "materialize",
]
