"""
Report formatting and display for the CLI interface.

Provides functions to print comparison results in a human-readable format.
"""

from __future__ import annotations

import os

from ..models import ComparisonStats, MatchTable, PairScore, RankedPair, format_score
from ..scanner.parallel import count_valid_scores


def _name(path: str) -> str:
    return os.path.basename(path)


def _format_pair(first: str, second: str, score: float) -> str:
    """Format one pair as "(a.jpg, b.jpg) : +0.791355"."""
    return f"({_name(first)}, {_name(second)}) : {format_score(score)}"


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def print_all_scores(table: MatchTable) -> None:
    """Print every scored pair in enumeration order."""
    _print_section_header("ALL PAIRS")
    for entries in table.values():
        for entry in entries:
            print(_format_pair(entry.reference, entry.candidate, entry.score))


def print_ranking_report(
    best_matches: dict[str, PairScore],
    ranked: list[RankedPair],
    stats: ComparisonStats,
    show_all: bool = False,
    table: MatchTable = None,
) -> None:
    """
    Print a report of the best matches and their ranking.

    Args:
        best_matches: Reference path -> best PairScore
        ranked: Ranked pairs, strongest first
        stats: Counters from the comparison
        show_all: Also print every pair score (requires table)
        table: The all-pairs MatchTable
    """
    print("\n" + "=" * 70)
    print("HISTOGRAM SIMILARITY REPORT")
    print("=" * 70)

    print(f"\nImages compared: {stats.images:,}")
    print(f"Pairs scored: {stats.compared:,} of {stats.expected_pairs:,}")
    if table is not None:
        print(f"Pairs with a score: {count_valid_scores(table):,}")
    if stats.failed:
        print(f"Pairs skipped (unreadable images): {stats.failed:,}")
    if stats.degenerate:
        print(f"Pairs without a score (flat histogram): {stats.degenerate:,}")

    if show_all and table:
        print_all_scores(table)

    if best_matches:
        _print_section_header("BEST MATCHES")
        for reference, entry in best_matches.items():
            print(_format_pair(reference, entry.candidate, entry.score))

    if ranked:
        _print_section_header("RANKED PAIRS")
        for position, pair in enumerate(ranked):
            print(f"{position:>4}  {_format_pair(pair.first, pair.second, pair.rank)}")

    print("\n" + "=" * 70)


__all__ = ['print_all_scores', 'print_ranking_report']
