"""Centralized logging configuration for the FPL live leagues client."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.WARNING,
    log_to_file: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for the application.

    Console output goes to stderr so it never lands inside a menu frame
    drawn on stdout.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: WARNING)
        log_to_file: Whether to log to file (default: False)
        log_to_console: Whether to log to console (default: True)

    Returns:
        Configured logger instance

    Example:
        from fpl_live.logging_config import setup_logging
        logger = setup_logging(level=logging.DEBUG)
        logger.debug("Fetching bootstrap data")
    """
    logger = logging.getLogger('fpl_live')
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    simple_formatter = logging.Formatter('%(levelname)s: %(message)s')

    if log_to_file:
        if log_dir is None:
            log_dir = Path('logs')
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'fpl_live_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'fpl_live') -> logging.Logger:
    """Get a logger instance under the fpl_live namespace."""
    return logging.getLogger(name)
