"""
Configuration constants for Histomatch.

This module contains all configurable settings including:
- Accepted image extensions
- Histogram and pixel format settings
- Default scoring algorithm and worker count
"""

import os

# Only JPEG files take part in a directory comparison
JPEG_EXTENSIONS = ('.jpg', '.jpeg')

# Number of luminance levels in a histogram (8-bit luma)
HISTOGRAM_LEVELS = 256

# PIL image modes that can yield a luma channel
# Anything else (CMYK, I;16, F, 1, P, ...) is rejected as an unsupported pixel format
LUMA_MODES = {'L', 'RGB', 'RGBA', 'YCbCr'}

# Default similarity algorithm (see scanner/scoring.py)
# Cross-correlation is the empirically preferred variant, not a proven optimum
DEFAULT_SCORER = 'xcorr'

# Default number of parallel comparison workers
DEFAULT_WORKERS = 4

# Extension of per-image histogram dump files
HISTOGRAM_DUMP_EXTENSION = '.dat'

# User configuration location
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.histomatch')

# PIL decompression bomb limit, raised for large photo collections
MAX_IMAGE_PIXELS = 500_000_000
