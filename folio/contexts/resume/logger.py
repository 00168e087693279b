"""
Resume context logger.

Provides logging interface for the resume context with automatic [resume] prefix.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[resume]"


def _log_info(message: str) -> None:
    """Log info message with [resume] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [resume] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [resume] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_start(resume_path: Path) -> None:
    _log_info(f"Loading resume content from {resume_path}")


def log_compose_result(tree, elapsed_time: float) -> None:
    """Log the composed document outline."""
    positions = sum(1 for level, _ in tree.outline() if level > 1)
    _log_success(
        f"Composed {len(tree.sections)} section(s), {positions} position(s) ({elapsed_time:.2f}s)"
    )
    for line in tree.table_of_contents.splitlines():
        _log_debug(f"  {line}")
