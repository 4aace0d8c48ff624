"""
Histogram module for the scanner package.

Provides luminance histogram extraction from a grid of luma samples and the
two-column diagnostic dump of a histogram.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..config import HISTOGRAM_LEVELS, HISTOGRAM_DUMP_EXTENSION
from ..exceptions import UnsupportedPixelFormat
from ..models import Histogram
from .dependencies import np


def extract_histogram(grid) -> Histogram:
    """
    Count the occurrences of each luminance level in a luma grid.

    Args:
        grid: 2-D array-like of shape (height, width) holding integer
              samples in 0-255

    Returns:
        Histogram whose counts sum to width * height

    Raises:
        UnsupportedPixelFormat: If the grid is not 2-D, not integral, or
            holds samples outside 0-255
    """
    samples = np.asarray(grid)

    if samples.ndim != 2:
        raise UnsupportedPixelFormat(
            f"Expected a 2-D luma grid, got {samples.ndim} dimension(s)"
        )
    if samples.size and not np.issubdtype(samples.dtype, np.integer):
        raise UnsupportedPixelFormat(
            f"Luma samples must be integers, got dtype {samples.dtype}"
        )

    flat = samples.ravel().astype(np.int64, copy=False)
    if flat.size and (flat.min() < 0 or flat.max() >= HISTOGRAM_LEVELS):
        raise UnsupportedPixelFormat(
            f"Luma samples must be within 0-{HISTOGRAM_LEVELS - 1}, "
            f"got range {flat.min()}-{flat.max()}"
        )

    return Histogram(np.bincount(flat, minlength=HISTOGRAM_LEVELS))


def histogram_dump_path(image_path: str | Path, output_dir: Optional[str | Path] = None) -> Path:
    """
    Return where the dump of an image's histogram goes.

    The dump keeps the image's base name with a .dat extension, beside the
    image unless output_dir is given.

    Examples:
        >>> histogram_dump_path('/photos/beach.jpg')
        PosixPath('/photos/beach.dat')
    """
    image_path = Path(image_path)
    name = image_path.stem + HISTOGRAM_DUMP_EXTENSION
    if output_dir is not None:
        return Path(output_dir) / name
    return image_path.with_name(name)


def write_histogram_dat(
    histogram: Histogram,
    image_path: str | Path,
    output_dir: Optional[str | Path] = None,
) -> Path:
    """
    Write a histogram as "level<TAB>count" lines for manual inspection.

    Only occupied levels are written, in ascending order.

    Args:
        histogram: Histogram to dump
        image_path: Image the histogram was built from (names the output file)
        output_dir: Optional directory for the dump (created if absent)

    Returns:
        Path of the written file
    """
    dest = histogram_dump_path(image_path, output_dir)
    if output_dir is not None:
        os.makedirs(dest.parent, exist_ok=True)

    with open(dest, 'w', encoding='utf-8') as f:
        for level, count in histogram.as_dict().items():
            f.write(f"{level}\t{count}\n")

    return dest


def read_histogram_dat(path: str | Path) -> Histogram:
    """Read back a dump written by write_histogram_dat."""
    data = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            level, count = line.split('\t')
            data[int(level)] = int(count)
    return Histogram.from_dict(data)


__all__ = [
    'extract_histogram',
    'histogram_dump_path',
    'write_histogram_dat',
    'read_histogram_dat',
]
