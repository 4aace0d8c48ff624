"""
CLI workflow orchestration for Histomatch.

Provides the CLIOrchestrator class that coordinates the ranking workflow
from argument parsing through materialization of the sorted copies.
"""

from __future__ import annotations

import logging
import time

from ..exceptions import HistomatchError
from ..scanner import (
    list_image_files,
    compare_images,
    select_best_matches,
    rank_pairs,
    get_scorer,
    write_histogram_dat,
    HistogramCache,
    histogram_for_file,
)
from ..utils.exporters import export_results
from ..utils.formatters import format_duration
from ..utils.validators import (
    validate_directory,
    validate_output_dir,
    validate_workers,
    validate_scorer,
)
from .actions import plan_copies, materialize
from .arg_parser import parse_arguments
from .reporting import print_ranking_report


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI ranking workflow.

    Manages the complete lifecycle from argument parsing through
    comparison, selection, ranking, reporting and copying.
    """

    def __init__(self, argv=None):
        """Initialize the orchestrator."""
        self.argv = argv
        self.logger = None
        self.args = None
        self.scorer = None
        self.image_files = []
        self.cache = None
        self.table = {}
        self.stats = None
        self.best_matches = {}
        self.ranked = []

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Validation
        3. Scanning
        4. Comparison
        5. Selection, ranking & reporting
        6. Materialization
        """
        exit_code = self._setup_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        # Fatal errors from here on abort the run with a logged message
        try:
            if not self._scan_phase():
                return 0

            self._compare_phase()
            self._rank_phase()
            self._report_phase()

            if not self.args.report_only:
                self._materialize_phase()
        except HistomatchError as e:
            self.logger.error(str(e))
            return 1
        except OSError as e:
            self.logger.error(f"I/O error: {e}")
            return 1

        return 0

    def _setup_phase(self) -> int:
        """
        Phase 1: Parse arguments and setup logging.

        Returns:
            0 for success, non-zero for error
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)
        self.show_progress = not self.args.no_progress
        self.use_cache = not self.args.no_cache
        self.cache = HistogramCache() if self.use_cache else None
        if self.args.no_cache:
            self.logger.info("Histogram cache disabled - decoding images for every pair")
        return 0

    def _validate_phase(self) -> int:
        """
        Phase 2: Validate arguments and check prerequisites.

        Returns:
            0 for success, 1 for validation error
        """
        is_valid, error = validate_directory(self.args.directory)
        if not is_valid:
            self.logger.error(error)
            return 1

        is_valid, error = validate_workers(self.args.workers)
        if not is_valid:
            self.logger.error(error)
            return 1

        if not self.args.report_only:
            is_valid, error = validate_output_dir(self.args.output_dir, self.args.directory)
            if not is_valid:
                self.logger.error(error)
                return 1

        is_valid, error = validate_scorer(self.args.scorer)
        if not is_valid:
            self.logger.error(error)
            return 1
        self.scorer = get_scorer(self.args.scorer)

        return 0

    def _scan_phase(self) -> bool:
        """
        Phase 3: List the JPEG files to compare.

        Returns:
            True if there are at least two images to compare. Fewer is not
            an error: the run ends with nothing ranked and nothing copied.
        """
        self.logger.info(f"Scanning {self.args.directory} for JPEG images...")
        self.image_files = list_image_files(self.args.directory)
        self.logger.info(f"Found {len(self.image_files):,} JPEG files")

        if len(self.image_files) < 2:
            self.logger.info("Need at least two images to compare. Nothing to rank.")
            return False

        return True

    def _compare_phase(self) -> None:
        """Phase 4: Score every pair of images in parallel."""
        n = len(self.image_files)
        self.logger.info(
            f"Comparing {n * (n - 1) // 2:,} pairs with '{self.args.scorer}' "
            f"using {self.args.workers} workers..."
        )

        started = time.time()
        self.table, self.stats = compare_images(
            self.image_files,
            scorer=self.scorer,
            max_workers=self.args.workers,
            use_cache=self.use_cache,
            cache=self.cache,
            show_progress=self.show_progress,
            logger=self.logger,
        )
        self.logger.info(f"Comparison finished in {format_duration(time.time() - started)}")

        if self.use_cache and self.stats.cache_hits > 0:
            self.logger.debug(
                f"Histogram cache: {self.stats.cache_hits:,} hits, {self.stats.cache_misses:,} misses "
                f"({self.stats.hit_rate:.1f}% hit rate)"
            )

        if self.args.histograms is not None:
            self._dump_histograms()

    def _dump_histograms(self) -> None:
        """Write a .dat histogram file for every readable image."""
        output_dir = self.args.histograms or None
        written = 0
        for filepath in self.image_files:
            # Histograms built during the comparison are reused as is
            histogram = self.cache.peek(filepath) if self.cache is not None else None
            if histogram is None:
                try:
                    histogram = histogram_for_file(filepath)
                except HistomatchError as e:
                    self.logger.warning(f"No histogram dump for {filepath}: {e}")
                    continue
            dest = write_histogram_dat(histogram, filepath, output_dir)
            self.logger.debug(f"Wrote {dest}")
            written += 1
        self.logger.info(f"Wrote {written:,} histogram file(s)")

    def _rank_phase(self) -> None:
        """Phase 5: Select the best match per image and rank the pairs."""
        self.best_matches = select_best_matches(self.table)
        self.ranked = rank_pairs(self.best_matches)
        self.logger.info(f"Ranked {len(self.ranked):,} best-match pairs")

    def _report_phase(self) -> None:
        """Phase 5b: Display the report, handle exports."""
        print_ranking_report(
            self.best_matches,
            self.ranked,
            self.stats,
            show_all=self.args.verbose,
            table=self.table,
        )

        if self.args.export:
            export_results(self.ranked, self.args.export, self.args.export_format)
            self.logger.info(f"Results exported to: {self.args.export}")

    def _materialize_phase(self) -> None:
        """Phase 6: Copy the images to the output directory in ranked order."""
        plan = plan_copies(self.ranked, self.args.output_dir)

        if self.args.dry_run:
            self.logger.info("\n[DRY RUN MODE - No files will be copied]")

        copied = materialize(
            plan,
            self.args.output_dir,
            dry_run=self.args.dry_run,
            logger=self.logger,
        )
        self.logger.info(
            f"{'Would copy' if self.args.dry_run else 'Copied'} {copied:,} files "
            f"to {self.args.output_dir}"
        )


__all__ = ['CLIOrchestrator', 'setup_logging']
