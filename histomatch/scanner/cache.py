"""
In-memory histogram cache for the scanner package.

Keeps the histogram of each file for the duration of one comparison run so
that every image is decoded once instead of once per pair. Nothing is
persisted.
"""

from __future__ import annotations

import threading
from typing import Optional

from ..models import Histogram
from .analysis import Decoder, decode_luma, histogram_for_file


class HistogramCache:
    """
    Thread-safe path -> Histogram cache.

    Decode failures are not cached: a file that failed is attempted again
    by the next comparison that needs it.
    """

    def __init__(self, decoder: Decoder = decode_luma):
        self._decoder = decoder
        self._histograms: dict[str, Histogram] = {}
        self._decoding: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, filepath: str) -> Histogram:
        """
        Return the histogram of a file, decoding it on first request.

        Raises:
            DecodeError: If the image cannot be decoded
            UnsupportedPixelFormat: If the pixels cannot yield luma values
        """
        with self._lock:
            file_lock = self._decoding.setdefault(filepath, threading.Lock())

        # Workers asking for the same file wait for a single decode;
        # different files decode concurrently
        with file_lock:
            with self._lock:
                cached = self._histograms.get(filepath)
                if cached is not None:
                    self.hits += 1
                    return cached
                self.misses += 1

            histogram = histogram_for_file(filepath, self._decoder)

            with self._lock:
                self._histograms[filepath] = histogram
            return histogram

    def peek(self, filepath: str) -> Optional[Histogram]:
        """Return a cached histogram without decoding."""
        with self._lock:
            return self._histograms.get(filepath)

    def clear(self) -> None:
        """Drop all cached histograms."""
        with self._lock:
            self._histograms.clear()
            self._decoding.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._histograms)


__all__ = ['HistogramCache']
