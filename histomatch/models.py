"""
Data models for Histomatch.

Contains the luminance histogram and the dataclasses that carry comparison
results from the comparator through selection, ranking and materialization.
"""

from dataclasses import dataclass, field
from typing import Optional
import math
import os

import numpy as np

from .config import HISTOGRAM_LEVELS


class Histogram:
    """
    Occurrence count of each luminance level (0-255) of one image.

    The counts array is read-only once built; its sum equals the pixel
    count of the source image.
    """

    __slots__ = ('_counts',)

    def __init__(self, counts):
        counts = np.array(counts, dtype=np.int64)
        if counts.shape != (HISTOGRAM_LEVELS,):
            raise ValueError(
                f"Histogram needs {HISTOGRAM_LEVELS} bins, got shape {counts.shape}"
            )
        if (counts < 0).any():
            raise ValueError("Histogram counts must be non-negative")
        counts.flags.writeable = False
        self._counts = counts

    @classmethod
    def from_dict(cls, data: dict) -> 'Histogram':
        """Create a Histogram from a level -> count mapping; missing levels are 0."""
        counts = np.zeros(HISTOGRAM_LEVELS, dtype=np.int64)
        for level, count in data.items():
            counts[int(level)] = count
        return cls(counts)

    @property
    def counts(self) -> np.ndarray:
        """Read-only array of 256 counts indexed by level."""
        return self._counts

    @property
    def pixel_count(self) -> int:
        """Total number of samples counted."""
        return int(self._counts.sum())

    def levels(self) -> list:
        """Occupied levels in ascending order."""
        return [int(level) for level in np.flatnonzero(self._counts)]

    def as_dict(self) -> dict:
        """Return occupied levels as a level -> count mapping."""
        return {level: int(self._counts[level]) for level in self.levels()}

    def __getitem__(self, level: int) -> int:
        return int(self._counts[level])

    def __len__(self) -> int:
        return HISTOGRAM_LEVELS

    def __eq__(self, other):
        if not isinstance(other, Histogram):
            return NotImplemented
        return bool(np.array_equal(self._counts, other._counts))

    def __hash__(self):
        return hash(self._counts.tobytes())

    def __repr__(self):
        return f"Histogram(pixels={self.pixel_count}, levels={len(self.levels())})"


@dataclass(frozen=True)
class PairScore:
    """
    Score of one comparison between a reference image and a candidate.

    Attributes:
        reference: Path of the image the comparison was run from
        candidate: Path of the image it was compared against
        score: Similarity value; NaN when the scorer could not produce one
    """
    reference: str
    candidate: str
    score: float

    @property
    def has_score(self) -> bool:
        """False when the score is the "no score" sentinel (NaN)."""
        return not math.isnan(self.score)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'reference': self.reference,
            'candidate': self.candidate,
            'score': self.score if self.has_score else None,
        }


# Reference image path -> comparisons against images enumerated after it
MatchTable = dict


@dataclass(frozen=True)
class RankedPair:
    """
    A best-match pair placed in the similarity ranking.

    Attributes:
        first: Reference image of the best match
        second: Its best-matching candidate
        rank: Score of the pair; ordering uses its absolute value
    """
    first: str
    second: str
    rank: float

    @property
    def strength(self) -> float:
        """Absolute value of the rank."""
        return abs(self.rank)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'first': self.first,
            'second': self.second,
            'rank': self.rank,
        }


@dataclass(frozen=True)
class CopyOperation:
    """One file copy of the materialization plan."""
    source: str
    destination: str

    @property
    def destination_name(self) -> str:
        """Return just the filename of the destination."""
        return os.path.basename(self.destination)


@dataclass
class ComparisonStats:
    """
    Counters collected during an all-pairs comparison.

    Attributes:
        images: Number of eligible images compared
        expected_pairs: n * (n - 1) / 2 for n images
        compared: Pairs that produced a score (including degenerate ones)
        failed: Pairs skipped because an image could not be decoded
        degenerate: Pairs whose score is the "no score" sentinel
        cache_hits: Histograms served from the in-memory cache
        cache_misses: Histograms decoded from disk
    """
    images: int = 0
    expected_pairs: int = 0
    compared: int = 0
    failed: int = 0
    degenerate: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    failed_files: list = field(default_factory=list)

    @property
    def processed(self) -> int:
        """Pairs handled so far, whether scored or skipped."""
        return self.compared + self.failed

    @property
    def hit_rate(self) -> float:
        """Histogram cache hit rate as a percentage."""
        total = self.cache_hits + self.cache_misses
        if total == 0:
            return 0.0
        return (self.cache_hits / total) * 100


def format_score(score: Optional[float]) -> str:
    """Format a score with sign and six decimals, or 'n/a' for no score."""
    if score is None or math.isnan(score):
        return "n/a"
    return f"{score:+.6f}"
