"""
Dependency initialization for the scanner package.

Handles PIL, numpy and tqdm imports with proper error handling and
configuration.
"""

from __future__ import annotations

import warnings
import logging

from ..user_config import get_user_config

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    from PIL import Image
    import numpy as np
    from tqdm import tqdm
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install Pillow numpy tqdm"
    )

# Default is ~89MP (178 million pixels); the configured limit allows large photos
Image.MAX_IMAGE_PIXELS = get_user_config().max_image_pixels

# Suppress DecompressionBombWarning: we've increased the limit appropriately
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)


__all__ = [
    'Image',
    'np',
    'tqdm',
    '_logger',
]
