"""
Logging utilities for scholar_parser CLI.

Provides logging setup and header printing functions with tqdm compatibility.
"""

import logging
import sys
import time
from pathlib import Path

from scholar_parser.utils.tqdm_logging import TqdmLoggingHandler


def setup_logging(
    script_name: str,
    execute: bool = False,
    log_dir: Path = Path("logs"),
    tqdm_compatible: bool = True,
) -> logging.Logger:
    """
    Set up logging for a script.

    Args:
        script_name: Name of the script (for log file naming)
        execute: If True, log to file + console. If False, only console.
        log_dir: Directory for log files
        tqdm_compatible: If True, use TqdmLoggingHandler for clean progress bar output

    Returns:
        Configured logger instance
    """
    console_formatter = logging.Formatter("%(message)s")
    if tqdm_compatible:
        console_handler = TqdmLoggingHandler(level=logging.INFO)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)

    logger = logging.getLogger(script_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = []  # Clear any existing handlers
    logger.addHandler(console_handler)
    # Prevent propagation to root logger (avoid duplicate messages)
    logger.propagate = False

    # Suppress noisy external library loggers
    for noisy_logger in ["bs4", "urllib3"]:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)

    pkg_logger = logging.getLogger("scholar_parser")
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.handlers = []
    pkg_logger.propagate = False

    # Console shows only WARNING+ from the package; its DEBUG lines are per page
    pkg_console_handler = (
        TqdmLoggingHandler(level=logging.WARNING)
        if tqdm_compatible
        else logging.StreamHandler(sys.stderr)
    )
    pkg_console_handler.setLevel(logging.WARNING)
    pkg_console_handler.setFormatter(console_formatter)
    pkg_logger.addHandler(pkg_console_handler)

    if not execute:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"{script_name}_{timestamp}.log"

    # Flush after each emit so the log is readable while a long run is going
    class FlushingFileHandler(logging.FileHandler):
        def emit(self, record):
            super().emit(record)
            self.flush()

    # File handler: DEBUG and above (detailed logs)
    file_handler = FlushingFileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    logger.addHandler(file_handler)
    pkg_logger.addHandler(file_handler)  # All package levels to file

    logger.info(f"Log file: {log_file}")
    return logger


def print_execute_header(title: str, logger: logging.Logger | None = None):
    """
    Print a standard header for a script run.

    Args:
        title: Title for the run
        logger: Optional logger instance (if None, uses this module's logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(title)
    logger.info("=" * 70)
