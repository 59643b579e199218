"""Logging configuration for whspr."""
import logging
import sys
from typing import Optional, Union


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """Configure logging for whspr.

    Args:
        level: Logging level (e.g., logging.INFO, logging.DEBUG or "DEBUG")
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(message)s"

    # Log lines go to stderr so stdout stays clean for command output
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True,
    )


def verbosity_to_level(base: int, verbose: int = 0, quiet: int = 0) -> int:
    """Shift a base logging level by -v/-q counts.

    Each -v lowers the threshold by one level (INFO -> DEBUG), each -q
    raises it (INFO -> WARNING -> ERROR -> CRITICAL).
    """
    level = base + (quiet - verbose) * 10
    return max(logging.DEBUG, min(logging.CRITICAL, level))
