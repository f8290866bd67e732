"""
Logging configuration using loguru.

Provides a simple setup function that configures loguru with sensible defaults.
Consumers can call setup_logging() at app startup, or just use loguru directly.
"""

import os
import sys

from loguru import logger


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the console sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config) -> None:
    """Configure logging from the ``logging.*`` section of a daybook Config.

    ``logging.file`` may be an absolute path or a file name relative to
    ``paths.log_dir``. An empty value disables the file sink.
    """
    level = str(config.get("logging.level", "WARNING") or "WARNING")
    log_file = config.get("logging.file", "") or None
    if log_file and not os.path.isabs(os.path.expanduser(log_file)):
        log_dir = os.path.expanduser(config.get("paths.log_dir", "."))
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, log_file)
    setup_logging(level=level, log_file=log_file)
