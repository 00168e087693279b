"""
Blog context logger.

Provides logging interface for the blog context with automatic [blog] prefix.
All blog modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[blog]"


def _log_info(message: str) -> None:
    """Log info message with [blog] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [blog] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [blog] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [blog] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [blog] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_start(posts_path: Path, file_count: int) -> None:
    """Log start of post loading."""
    _log_info(f"Loading {file_count} post(s) from {posts_path}")


def log_post_loaded(post) -> None:
    """Log a single parsed post at debug level."""
    _log_debug(f"  {post.id}: '{post.title}' ({post.date.date().isoformat()})")


def log_post_failed(path: Path, error: Exception, skipped: bool) -> None:
    """Log a post that failed to parse or register."""
    if skipped:
        _log_warning(f"Skipping {path.name}: {error}")
    else:
        _log_error(f"{path.name}: {error}")


def log_load_result(collection, failures: list, elapsed_time: float) -> None:
    """
    Log result of post loading.

    Args:
        collection: PostCollection built by the loader
        failures: List of (path, error) pairs
        elapsed_time: Time taken
    """
    if failures:
        _log_warning(f"Loaded {len(collection)} post(s), {len(failures)} failed ({elapsed_time:.2f}s)")
    else:
        _log_success(f"Loaded {len(collection)} post(s) ({elapsed_time:.2f}s)")
    categories = collection.categories()
    if categories:
        _log_debug(f"  Categories: {', '.join(f'{name} ({count})' for name, count in categories.items())}")
