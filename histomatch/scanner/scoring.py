"""
Scoring module for the scanner package.

Provides interchangeable similarity algorithms over luminance histograms.
Every scorer is a pure function (Histogram, Histogram) -> float and returns
NaN when it cannot produce a score; callers treat NaN as "no score".

Available scorers:
- xcorr: Pearson cross-correlation of the two histograms (default). In [-1, 1];
  the sign tells correlated from anti-correlated, the magnitude the strength.
  Empirically the closest to perceived similarity of the three, which does
  not make it a proven optimum.
- absdiff: Sum of absolute per-level differences over the pixel count of the
  second image. Scales badly when image sizes differ.
- ratio: Mean of per-level min/max count ratios over levels present in both
  images. Under-penalizes large structural differences.
"""

from __future__ import annotations

import math
from typing import Callable

from ..config import DEFAULT_SCORER
from ..exceptions import ConfigurationError
from ..models import Histogram
from .dependencies import np

Scorer = Callable[[Histogram, Histogram], float]

NO_SCORE = float('nan')


def is_valid_score(value: float) -> bool:
    """Return True unless value is the "no score" sentinel."""
    return not math.isnan(value)


def cross_correlation(first: Histogram, second: Histogram) -> float:
    """
    Pearson correlation coefficient of two histograms over levels 0-255.

    Args:
        first: Histogram of the first image
        second: Histogram of the second image

    Returns:
        Value in [-1, 1], or NaN when either histogram has zero variance
    """
    x = first.counts.astype(np.float64)
    y = second.counts.astype(np.float64)

    dx = x - x.mean()
    dy = y - y.mean()

    sxy = float(np.sum(dx * dy))
    sx = float(np.sum(dx * dx))
    sy = float(np.sum(dy * dy))

    denominator = math.sqrt(sx * sy)
    if denominator == 0:
        return NO_SCORE
    return sxy / denominator


def absolute_difference(first: Histogram, second: Histogram) -> float:
    """
    Sum of absolute per-level count differences, normalized by pixel count.

    0 means identical histograms; larger is more different.

    Returns:
        Normalized difference, or NaN when the second histogram is empty
    """
    total = second.pixel_count
    if total == 0:
        return NO_SCORE
    diff = np.abs(first.counts - second.counts).sum()
    return float(diff) / float(total)


def bin_ratio(first: Histogram, second: Histogram) -> float:
    """
    Mean min/max count ratio over the levels occupied in both histograms.

    Each ratio is at most 1. The sum is divided by the number of levels
    occupied in the first histogram, so levels missing from the second one
    lower the result.

    Returns:
        Value in [0, 1], or NaN when the first histogram is empty
    """
    x = first.counts
    y = second.counts

    occupied = np.count_nonzero(x)
    if occupied == 0:
        return NO_SCORE

    shared = (x > 0) & (y > 0)
    low = np.minimum(x[shared], y[shared]).astype(np.float64)
    high = np.maximum(x[shared], y[shared]).astype(np.float64)
    return float(np.sum(low / high)) / float(occupied)


# Registry of available scorers by name
SCORERS: dict[str, Scorer] = {
    'xcorr': cross_correlation,
    'absdiff': absolute_difference,
    'ratio': bin_ratio,
}


def get_scorer(name: str = DEFAULT_SCORER) -> Scorer:
    """
    Look up a scorer by name.

    Raises:
        ConfigurationError: If no scorer has that name
    """
    try:
        return SCORERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown scorer: {name!r}. Choose one of: {', '.join(SCORERS)}"
        ) from None


__all__ = [
    'Scorer',
    'NO_SCORE',
    'SCORERS',
    'is_valid_score',
    'cross_correlation',
    'absolute_difference',
    'bin_ratio',
    'get_scorer',
]
