"""Logger configuration for clubcoach.

Console output stays compact for CLI use; `verbose` (the CLI's --debug)
adds call sites and the structured context passed as logger kwargs. The
optional file sink always records full context.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"
VERBOSE_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> | {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    *,
    verbose: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional path of a rotating log file
        verbose: Show call sites and structured context on the console
        rotation: File rotation trigger (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT,
        level=level,
        backtrace=verbose,
        diagnose=verbose,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Logger configured", level=level, log_file=log_file, verbose=verbose)
