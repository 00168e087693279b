"""
Loguru configuration for folio command sessions.

A session is one CLI invocation that writes outputs (currently `folio build`).
Each session gets its own timestamped directory under LOGS_PATH holding a
DEBUG-level log file, while INFO and above also go to the console. The log
opens with a header recording the folio version, the command line and the
content/output directories, so a build log can be matched to what produced it.

Context modules log through their own prefixed wrappers
(contexts/{context}/logger.py) and never configure sinks themselves.
"""

import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from folio import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(logs_root: Path, command: str) -> Path:
    """Timestamped directory for one command session (e.g. logs/build_20240525_120000)."""
    return Path(logs_root) / f"{command}_{time.strftime('%Y%m%d_%H%M%S')}"


def setup_logger(session_name: str, log_dir: Path, header: Optional[Dict[str, Any]] = None) -> Path:
    """
    Route loguru output for a command session to a log file and the console.

    Replaces any existing sinks, so calling it twice in one process starts a
    fresh session.

    Args:
        session_name: Log file stem (e.g. "build")
        log_dir: Session directory, created if missing
        header: Extra key/value lines for the session header (e.g. content and
            output directories)

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{session_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_session_header(session_name, header)
    return log_file


def log_session_header(session_name: str, header: Optional[Dict[str, Any]] = None) -> None:
    """Write the session header: folio version, command line, working directory, extras."""
    logger.info("=" * 72)
    logger.info(f"folio {__version__} | session: {session_name}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (header or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 72)
