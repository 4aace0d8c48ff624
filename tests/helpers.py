"""
Shared helpers for the test suite: synthetic luma grids and a fake decoder.
"""

import numpy as np

from histomatch.exceptions import DecodeError


def two_level_grid(first, second):
    """8x8 luma grid with 32 samples at each of two levels."""
    return np.array([first] * 32 + [second] * 32, dtype=np.uint8).reshape(8, 8)


def gradient(low, high, width=64, height=48):
    """Horizontal luma gradient from low to high."""
    row = np.linspace(low, high, width).astype(np.uint8)
    return np.tile(row, (height, 1))


class FakeDecoder:
    """Decoder collaborator serving luma grids from memory."""

    def __init__(self, grids):
        self.grids = dict(grids)
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        if path not in self.grids:
            raise DecodeError(path, "not in fake decoder")
        return self.grids[path]
