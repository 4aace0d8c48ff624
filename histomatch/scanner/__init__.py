"""
Scanner package for Histomatch.

Provides luminance histogram extraction, similarity scoring and the
parallel all-pairs comparison of a directory of JPEG images, followed by
best-match selection and ranking.

Public API:
- is_jpeg / list_image_files: Discover JPEG files in a directory
- decode_luma: Decode an image to its luma channel
- extract_histogram / histogram_for_file: Build luminance histograms
- write_histogram_dat: Dump a histogram for manual inspection
- cross_correlation / absolute_difference / bin_ratio: Scoring algorithms
- get_scorer: Look up a scorer by name
- compare_images / compare_directory: All-pairs comparison in parallel
- compare_files: Score a single pair of files
- select_best_matches / rank_pairs: Best match per image, ordered by strength
- lookup_score: Find a pair's score in either stored direction
"""

from __future__ import annotations

from .file_discovery import is_jpeg, list_image_files
from .analysis import decode_luma, histogram_for_file
from .histogram import extract_histogram, write_histogram_dat, read_histogram_dat
from .scoring import (
    SCORERS,
    NO_SCORE,
    is_valid_score,
    cross_correlation,
    absolute_difference,
    bin_ratio,
    get_scorer,
)
from .cache import HistogramCache
from .parallel import compare_images, compare_directory, compare_files
from .matching import select_best_matches, rank_pairs, lookup_score


# Public API exports
__all__ = [
    # File discovery
    'is_jpeg',
    'list_image_files',
    # Decoding and histograms
    'decode_luma',
    'histogram_for_file',
    'extract_histogram',
    'write_histogram_dat',
    'read_histogram_dat',
    'HistogramCache',
    # Scoring
    'SCORERS',
    'NO_SCORE',
    'is_valid_score',
    'cross_correlation',
    'absolute_difference',
    'bin_ratio',
    'get_scorer',
    # Comparison
    'compare_images',
    'compare_directory',
    'compare_files',
    # Selection and ranking
    'select_best_matches',
    'rank_pairs',
    'lookup_score',
]
