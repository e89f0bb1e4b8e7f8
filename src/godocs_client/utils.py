"""Utility functions for godocs-client."""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DATA_DIR_NAME = ".godocs"
LOG_FILE_NAME = "godocs.log"

BYTE_UNIT = 1024
BYTE_PREFIXES = "KMGTPE"


def config_dir_path() -> Path:
    """Directory holding config.json and the log file.

    GODOCS_CONFIG_DIR wins over $HOME/.godocs so tests and parallel
    installs can isolate their state.
    """
    if config_dir := os.getenv("GODOCS_CONFIG_DIR"):
        return Path(config_dir)
    home = os.getenv("HOME", Path.home())
    return Path(home) / DATA_DIR_NAME


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_to_stderr: bool = False,
    log_file: Optional[Path] = None,
) -> None:  # pragma: no cover
    """Configure loguru sinks for the current process.

    Args:
        log_level: Minimum level for every sink
        log_to_file: Write to a rotating log file in the config directory
        log_to_stderr: Write to stderr (never stdout, which carries command output)
        log_file: Explicit log file path, overrides the config directory location
    """
    logger.remove()

    if log_to_file:
        path = log_file or config_dir_path() / LOG_FILE_NAME
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=log_level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )

    if log_to_stderr:
        logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=False)

    logger.debug(f"Logging configured: level={log_level} file={log_to_file} stderr={log_to_stderr}")


def format_bytes(size: int) -> str:
    """Format a byte count the way the document browser shows file sizes.

    >>> format_bytes(512)
    '512 B'
    >>> format_bytes(2048)
    '2.0 KB'
    """
    if size < BYTE_UNIT:
        return f"{size} B"

    div, exp = BYTE_UNIT, 0
    n = size // BYTE_UNIT
    while n >= BYTE_UNIT:
        div *= BYTE_UNIT
        exp += 1
        n //= BYTE_UNIT
    return f"{size / div:.1f} {BYTE_PREFIXES[exp]}B"
