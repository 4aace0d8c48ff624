"""
Parallel comparison module for the scanner package.

Provides the all-pairs comparison engine. Images are compared in a fixed
enumeration order; each reference image is one unit of work that scores it
against every image enumerated after it, so each unordered pair is computed
exactly once. Workers return their own results, which the caller merges
once every worker has finished.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Callable, Any

from ..config import DEFAULT_WORKERS
from ..exceptions import DecodeError
from ..models import PairScore, MatchTable, ComparisonStats, Histogram, format_score
from .analysis import Decoder, decode_luma, histogram_for_file
from .cache import HistogramCache
from .dependencies import tqdm, _logger
from .file_discovery import list_image_files
from .scoring import Scorer, cross_correlation, is_valid_score


class _ProgressTracker:
    """Shared progress counters, progress bar and callback, guarded by one lock."""

    def __init__(
        self,
        stats: ComparisonStats,
        show_progress: bool,
        progress_callback: Optional[Callable[[int, int], None]],
    ):
        self.stats = stats
        self._lock = threading.Lock()
        self._callback = progress_callback
        self._pbar: Optional[Any] = None
        if show_progress and stats.expected_pairs > 0:
            self._pbar = tqdm(
                total=stats.expected_pairs,
                desc="Comparing images",
                unit="pair",
                ncols=80,
            )

    def scored(self, entry: PairScore) -> None:
        with self._lock:
            self.stats.compared += 1
            if not entry.has_score:
                self.stats.degenerate += 1
            self._advance(1)

    def failed(self, pairs: int, filepath: str) -> None:
        with self._lock:
            self.stats.failed += pairs
            if filepath not in self.stats.failed_files:
                self.stats.failed_files.append(filepath)
            self._advance(pairs)

    def _advance(self, pairs: int) -> None:
        if self._pbar is not None:
            self._pbar.update(pairs)
        if self._callback:
            self._callback(self.stats.processed, self.stats.expected_pairs)

    def close(self) -> None:
        if self._pbar is not None:
            self._pbar.close()


def _compare_reference(
    index: int,
    filepaths: list[str],
    scorer: Scorer,
    load: Callable[[str], Histogram],
    tracker: _ProgressTracker,
    logger: logging.Logger,
) -> tuple[str, list[PairScore]]:
    """
    Score one reference image against every image enumerated after it.

    Decode failures are logged and the affected pairs skipped.
    UnsupportedPixelFormat propagates and aborts the run.

    Returns:
        Tuple of (reference path, its PairScore entries in enumeration order)
    """
    reference = filepaths[index]
    candidates = filepaths[index + 1:]
    entries: list[PairScore] = []

    try:
        reference_histogram = load(reference)
    except DecodeError as e:
        logger.warning(f"Skipping {len(candidates)} pair(s): {e}")
        tracker.failed(len(candidates), reference)
        return reference, entries

    for candidate in candidates:
        try:
            candidate_histogram = load(candidate)
        except DecodeError as e:
            logger.warning(f"Skipping pair ({Path(reference).name}, {Path(candidate).name}): {e}")
            tracker.failed(1, candidate)
            continue

        entry = PairScore(reference, candidate, float(scorer(reference_histogram, candidate_histogram)))
        entries.append(entry)
        tracker.scored(entry)
        logger.debug(f"({Path(reference).name}, {Path(candidate).name}) : {format_score(entry.score)}")

    return reference, entries


def compare_images(
    filepaths: list[str],
    scorer: Scorer = cross_correlation,
    max_workers: int = DEFAULT_WORKERS,
    decoder: Decoder = decode_luma,
    use_cache: bool = True,
    cache: Optional[HistogramCache] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = True,
    logger: Optional[logging.Logger] = None,
) -> tuple[MatchTable, ComparisonStats]:
    """
    Score every unordered pair of images in parallel.

    Args:
        filepaths: Image paths in enumeration order
        scorer: Similarity algorithm (Histogram, Histogram) -> float
        max_workers: Number of parallel workers
        decoder: Callable turning a path into a luma grid
        use_cache: Keep histograms in memory so each file is decoded once
        cache: Histogram cache to fill, so the caller can reuse the histograms
            after the run. Created internally when omitted and use_cache is set.
        progress_callback: Optional callback(current, total) for progress updates
        show_progress: Whether to show tqdm progress bar
        logger: Optional logger for status messages

    Returns:
        Tuple of (MatchTable, ComparisonStats). The table maps each reference
        path to its comparisons against later images, in enumeration order;
        references without any scored pair are left out.

    Raises:
        UnsupportedPixelFormat: If any image cannot yield luma values
        ValueError: If max_workers is below 1
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    logger = logger or _logger
    n = len(filepaths)
    stats = ComparisonStats(images=n, expected_pairs=(n * (n - 1)) // 2)
    table: MatchTable = {}

    if n < 2:
        return table, stats

    if not use_cache:
        cache = None
    elif cache is None:
        cache = HistogramCache(decoder)
    if cache is not None:
        load = cache.get
    else:
        def load(filepath: str) -> Histogram:
            return histogram_for_file(filepath, decoder)

    tracker = _ProgressTracker(stats, show_progress, progress_callback)

    try:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(_compare_reference, index, filepaths, scorer, load, tracker, logger)
                for index in range(n - 1)
            ]

            # Surface fatal errors as soon as a worker raises one
            try:
                for future in as_completed(futures):
                    future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                raise

        # Merge in enumeration order, not completion order
        for future in futures:
            reference, entries = future.result()
            if entries:
                table[reference] = entries
    finally:
        tracker.close()

    if cache is not None:
        stats.cache_hits = cache.hits
        stats.cache_misses = cache.misses

    if stats.failed:
        logger.warning(
            f"Skipped {stats.failed:,} of {stats.expected_pairs:,} pairs "
            f"({len(stats.failed_files)} unreadable file(s))"
        )
    if stats.degenerate:
        logger.info(f"{stats.degenerate:,} pair(s) produced no score (flat histogram)")

    return table, stats


def compare_directory(
    directory: str | Path,
    **kwargs,
) -> tuple[MatchTable, ComparisonStats]:
    """
    Compare every pair of JPEG files in a directory.

    Accepts the same keyword arguments as compare_images.

    Raises:
        DirectoryReadError: If the directory cannot be listed
        UnsupportedPixelFormat: If any image cannot yield luma values
    """
    logger = kwargs.get('logger') or _logger
    filepaths = list_image_files(directory)
    logger.info(f"Found {len(filepaths):,} JPEG files in {directory}")
    return compare_images(filepaths, **kwargs)


def compare_files(
    first: str | Path,
    second: str | Path,
    scorer: Scorer = cross_correlation,
    decoder: Decoder = decode_luma,
) -> float:
    """
    Score a single pair of image files.

    Unlike the directory comparison, a decode failure here is not recovered.

    Raises:
        DecodeError: If either image cannot be decoded
        UnsupportedPixelFormat: If either image cannot yield luma values
    """
    first_histogram = histogram_for_file(first, decoder)
    second_histogram = histogram_for_file(second, decoder)
    return float(scorer(first_histogram, second_histogram))


def iter_pair_scores(table: MatchTable):
    """Yield every PairScore of a table in enumeration order."""
    for entries in table.values():
        yield from entries


def count_valid_scores(table: MatchTable) -> int:
    """Number of pairs in a table that carry a real score."""
    return sum(1 for entry in iter_pair_scores(table) if is_valid_score(entry.score))


__all__ = [
    'compare_images',
    'compare_directory',
    'compare_files',
    'iter_pair_scores',
    'count_valid_scores',
]
