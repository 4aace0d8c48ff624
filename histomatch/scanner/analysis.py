"""
Image analysis module for the scanner package.

Provides single-image decoding to a luma grid with comprehensive error
handling, and the decode-then-extract step used for every compared image.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ..config import LUMA_MODES
from ..exceptions import DecodeError, UnsupportedPixelFormat
from ..models import Histogram
from .dependencies import Image, np
from .histogram import extract_histogram

# Decoder signature: path -> 2-D uint8 luma grid
Decoder = Callable[[str], "np.ndarray"]


def decode_luma(filepath: str | Path) -> np.ndarray:
    """
    Decode an image file and return its luminance channel.

    Args:
        filepath: Path to the image file

    Returns:
        uint8 array of shape (height, width) with the Y (luma) samples

    Raises:
        DecodeError: If the file is missing, unreadable, truncated or not an image
        UnsupportedPixelFormat: If the image mode cannot yield a luma channel
    """
    filepath = str(filepath)

    if not os.path.exists(filepath):
        raise DecodeError(filepath, "File not found")

    if not os.access(filepath, os.R_OK):
        raise DecodeError(filepath, "File not readable (permission denied)")

    try:
        with Image.open(filepath) as img:
            # Read the stored YCbCr samples of colour JPEGs instead of RGB
            if img.format == 'JPEG' and img.mode == 'RGB':
                img.draft('YCbCr', img.size)

            # Force load to detect truncated images early
            try:
                img.load()
            except (OSError, SyntaxError, ValueError) as load_err:
                raise DecodeError(filepath, f"Corrupt or truncated image: {load_err}") from load_err

            if img.mode not in LUMA_MODES:
                raise UnsupportedPixelFormat(
                    f"{filepath}: pixel mode {img.mode!r} has no luma channel "
                    f"(supported: {', '.join(sorted(LUMA_MODES))})"
                )

            if img.mode == 'L':
                luma = img
            else:
                luma = img.convert('YCbCr').getchannel('Y')
            return np.asarray(luma, dtype=np.uint8)

    except Image.UnidentifiedImageError as e:
        raise DecodeError(filepath, f"Not a valid image file: {e}") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(filepath, f"Image too large: {e}") from e
    except OSError as e:
        raise DecodeError(filepath, f"Failed to open image: {e}") from e


def histogram_for_file(filepath: str | Path, decoder: Decoder = decode_luma) -> Histogram:
    """
    Decode an image and build its luminance histogram.

    Args:
        filepath: Path to the image file
        decoder: Callable turning a path into a luma grid

    Returns:
        Histogram of the image

    Raises:
        DecodeError: If the image cannot be decoded
        UnsupportedPixelFormat: If the pixels cannot yield luma values
    """
    return extract_histogram(decoder(str(filepath)))


__all__ = ['Decoder', 'decode_luma', 'histogram_for_file']
