"""
Materialization actions for the CLI interface.

Turns the ranked pair sequence into a numbered copy of each image in an
output directory, so that similar images sit next to each other when the
directory is browsed in name order.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Optional

from ..exceptions import CopyError
from ..models import RankedPair, CopyOperation

# Copy collaborator signature: (source, destination) -> None, raises OSError on failure
CopyFunc = Callable[[str, str], object]


def _destination(dest_dir: Path, index: int, source: str) -> str:
    """Numbered destination path that keeps the source file's extension."""
    return str(dest_dir / f"{index}{os.path.splitext(source)[1]}")


def plan_copies(pairs: list[RankedPair], dest_dir: str | Path) -> list[CopyOperation]:
    """
    Assign output names to the images of a ranked pair sequence.

    Pair k names its first image 2k and its second image 2k+1, keeping the
    original extension. An image that already received a name in an earlier
    pair keeps that name and is not copied again.

    Args:
        pairs: Ranked pairs, strongest first
        dest_dir: Output directory

    Returns:
        Copy operations in the order they must be performed

    Examples:
        >>> plan = plan_copies([RankedPair('a.jpg', 'b.jpg', 0.9),
        ...                     RankedPair('b.jpg', 'c.jpg', 0.5)], 'out')
        >>> [op.destination_name for op in plan]
        ['0.jpg', '1.jpg', '3.jpg']
    """
    dest_dir = Path(dest_dir)
    done: set[str] = set()
    plan: list[CopyOperation] = []

    for k, pair in enumerate(pairs):
        for index, source in ((2 * k, pair.first), (2 * k + 1, pair.second)):
            if source in done:
                continue
            plan.append(CopyOperation(source, _destination(dest_dir, index, source)))
            done.add(source)

    return plan


def materialize(
    plan: list[CopyOperation],
    dest_dir: str | Path,
    copy_func: CopyFunc = shutil.copy2,
    dry_run: bool = False,
    logger: Optional[logging.Logger] = None,
) -> int:
    """
    Perform the copies of a materialization plan, in order.

    The destination directory is created if absent. The first failed copy
    stops the run; later copies are not attempted.

    Args:
        plan: Copy operations from plan_copies
        dest_dir: Output directory
        copy_func: Callable copying source to destination
        dry_run: Log the copies without touching the filesystem
        logger: Optional logger instance

    Returns:
        Number of files copied (or that would be copied in dry-run mode)

    Raises:
        CopyError: If the directory cannot be created or a copy fails
    """
    if dry_run:
        for op in plan:
            if logger:
                logger.info(f"[DRY RUN] Would copy: {op.source} -> {op.destination}")
        return len(plan)

    try:
        os.makedirs(dest_dir, exist_ok=True)
    except OSError as e:
        raise CopyError('', dest_dir, f"cannot create output directory: {e}") from e

    copied = 0
    for op in plan:
        try:
            copy_func(op.source, op.destination)
        except OSError as e:
            raise CopyError(op.source, op.destination, e) from e
        copied += 1
        if logger:
            logger.debug(f"Copied: {op.source} -> {op.destination}")

    return copied


__all__ = ['CopyFunc', 'plan_copies', 'materialize']
