"""
Matching module for the scanner package.

Reduces an all-pairs MatchTable to one best match per reference image and
orders those matches by similarity strength.
"""

from __future__ import annotations

from typing import Optional

from ..models import PairScore, MatchTable, RankedPair


def select_best_matches(table: MatchTable) -> dict[str, PairScore]:
    """
    Pick the candidate with the greatest absolute score for each reference.

    Candidates are scanned in their stored order and only a strictly greater
    magnitude replaces the current best, so ties keep the first-encountered
    candidate. Entries without a score are ignored; a reference left with no
    scored candidate is omitted.

    Args:
        table: Reference path -> PairScore entries

    Returns:
        Reference path -> best PairScore, in the table's key order
    """
    best_matches: dict[str, PairScore] = {}

    for reference, entries in table.items():
        best: Optional[PairScore] = None
        for entry in entries:
            if not entry.has_score:
                continue
            if best is None or abs(entry.score) > abs(best.score):
                best = entry
        if best is not None:
            best_matches[reference] = best

    return best_matches


def rank_pairs(best_matches: dict[str, PairScore]) -> list[RankedPair]:
    """
    Order best matches by descending absolute score.

    The sort is stable: pairs of equal strength keep their input order.

    Args:
        best_matches: Reference path -> best PairScore

    Returns:
        List of RankedPair, strongest first
    """
    pairs = [
        RankedPair(first=reference, second=entry.candidate, rank=entry.score)
        for reference, entry in best_matches.items()
    ]
    return sorted(pairs, key=lambda pair: -pair.strength)


def lookup_score(table: MatchTable, first: str, second: str) -> Optional[PairScore]:
    """
    Find the comparison of two images in either stored direction.

    Only one direction of each pair is stored, so both first -> second and
    second -> first are checked.

    Returns:
        The stored PairScore, or None if the pair was never scored
    """
    for reference, candidate in ((first, second), (second, first)):
        for entry in table.get(reference, ()):
            if entry.candidate == candidate:
                return entry
    return None


__all__ = [
    'select_best_matches',
    'rank_pairs',
    'lookup_score',
]
