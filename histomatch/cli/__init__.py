"""
CLI package for Histomatch.

Provides the command-line interface that compares a directory of JPEG
images, ranks the best-matching pairs and copies the images in ranked order,
plus single-pair and histogram diagnostics.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- plan_copies / materialize: Ranked copy of the images
- print_ranking_report: Function to display results report
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .actions import plan_copies, materialize
from .reporting import print_ranking_report
from .diagnostics import compare_main, histogram_main


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)

    Examples:
        >>> # Called from __main__.py
        >>> exit_code = main()
        >>> sys.exit(exit_code)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'plan_copies',
    'materialize',
    'print_ranking_report',
    'compare_main',
    'histogram_main',
]
