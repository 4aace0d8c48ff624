"""
Export functionality for Histomatch.

Provides functions to export ranked pairs to TXT or CSV files.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TextIO

from ..models import RankedPair, format_score


def _export_txt(pairs: list[RankedPair], file_handle: TextIO) -> None:
    """
    Export ranked pairs to TXT format.

    Args:
        pairs: Ranked pairs, strongest first
        file_handle: Open file handle to write to
    """
    file_handle.write("RANKED PAIRS\n")
    file_handle.write("=" * 70 + "\n\n")
    for position, pair in enumerate(pairs):
        file_handle.write(f"{position}\t{format_score(pair.rank)}\t{pair.first}\t{pair.second}\n")


def _export_csv(pairs: list[RankedPair], file_handle: TextIO) -> None:
    """
    Export ranked pairs to CSV format.

    Notes:
        CSV includes: position, rank, first, second
    """
    writer = csv.writer(file_handle)
    writer.writerow(['position', 'rank', 'first', 'second'])
    for position, pair in enumerate(pairs):
        writer.writerow([position, f"{pair.rank:.6f}", pair.first, pair.second])


def export_results(
    pairs: list[RankedPair],
    output_path: Path,
    export_format: str = 'txt'
) -> None:
    """
    Export ranked pairs to a file.

    Args:
        pairs: Ranked pairs, strongest first
        output_path: Path to output file
        export_format: Export format ('txt' or 'csv'). Default: 'txt'

    Raises:
        ValueError: If export_format is not 'txt' or 'csv'
        OSError: If file cannot be written
    """
    if export_format not in ('txt', 'csv'):
        raise ValueError(f"Unsupported export format: {export_format}. Use 'txt' or 'csv'.")

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        if export_format == 'txt':
            _export_txt(pairs, f)
        else:
            _export_csv(pairs, f)


__all__ = ['export_results']
