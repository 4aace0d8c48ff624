"""
File discovery module for the scanner package.

Provides the JPEG filename predicate and the directory listing that builds
the fixed enumeration order used by the comparator.
"""

from __future__ import annotations

from pathlib import Path

from ..config import JPEG_EXTENSIONS
from ..exceptions import DirectoryReadError


def is_jpeg(filename: str | Path) -> bool:
    """
    Check whether a filename carries a JPEG extension.

    Args:
        filename: File name or path

    Returns:
        True for names ending in .jpg or .jpeg, in any letter case

    Examples:
        >>> is_jpeg('IMG_0001.JPG')
        True
        >>> is_jpeg('notes.txt')
        False
    """
    return str(filename).lower().endswith(JPEG_EXTENSIONS)


def list_image_files(directory: str | Path) -> list[str]:
    """
    List the JPEG files directly inside a directory.

    Args:
        directory: Directory to list (not searched recursively)

    Returns:
        Absolute file paths as strings, sorted by file name

    Raises:
        DirectoryReadError: If the directory cannot be listed
    """
    root = Path(directory)

    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise DirectoryReadError(f"Cannot list directory {root}: {e}") from e

    images = []
    for filepath in entries:
        if is_jpeg(filepath.name) and filepath.is_file():
            images.append(str(filepath.absolute()))

    images.sort(key=lambda p: Path(p).name)
    return images


__all__ = ['is_jpeg', 'list_image_files']
