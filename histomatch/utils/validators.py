"""
Input validation for Histomatch.

Provides validators for the directories and run parameters given on the
command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..scanner.scoring import SCORERS


def validate_directory(directory: str | Path) -> tuple[bool, str]:
    """
    Validate that a directory exists and is readable.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    directory = str(directory)

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_output_dir(output_dir: Optional[str | Path], source_dir: str | Path) -> tuple[bool, str]:
    """
    Validate the directory that receives the renamed copies.

    It may not exist yet, but must not be a file and must not be the
    source directory itself (copies would overwrite source names).

    Examples:
        >>> validate_output_dir(None, '/photos')
        (False, 'No output directory: pass --output-dir or set output_dir in the config')
    """
    if not output_dir:
        return False, "No output directory: pass --output-dir or set output_dir in the config"

    if os.path.exists(output_dir) and not os.path.isdir(output_dir):
        return False, f"Output path is not a directory: {output_dir}"

    if Path(output_dir).resolve() == Path(source_dir).resolve():
        return False, "Output directory must differ from the source directory"

    return True, ""


def validate_workers(workers) -> tuple[bool, str]:
    """
    Validate the number of parallel workers.

    Examples:
        >>> validate_workers(4)
        (True, '')
        >>> validate_workers(0)
        (False, 'Workers must be between 1 and 64')
    """
    try:
        workers = int(workers)
    except (ValueError, TypeError):
        return False, "Workers must be an integer"

    if not 1 <= workers <= 64:
        return False, "Workers must be between 1 and 64"

    return True, ""


def validate_scorer(name: str) -> tuple[bool, str]:
    """Validate that a scorer name is registered."""
    if name not in SCORERS:
        return False, f"Unknown scorer: {name}. Choose one of: {', '.join(SCORERS)}"
    return True, ""


__all__ = [
    'validate_directory',
    'validate_output_dir',
    'validate_workers',
    'validate_scorer',
]
