"""
Utilities package for Histomatch.

Provides:
- formatters: Human-readable formatting for durations and scores
- validators: Input validation for command-line parameters
- exporters: Export ranked pairs to files
"""

from __future__ import annotations

# Import submodules for convenient access
from . import formatters
from . import validators
from . import exporters

# Export commonly used functions
from .formatters import format_duration, format_score
from .validators import (
    validate_directory,
    validate_output_dir,
    validate_workers,
    validate_scorer,
)
from .exporters import export_results

__all__ = [
    # Submodules
    'formatters',
    'validators',
    'exporters',
    # Formatters
    'format_duration',
    'format_score',
    # Validators
    'validate_directory',
    'validate_output_dir',
    'validate_workers',
    'validate_scorer',
    # Exporters
    'export_results',
]
