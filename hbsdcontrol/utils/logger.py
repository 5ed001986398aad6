#!/usr/bin/env python3
"""
Logging utilities for hbsdcontrol
"""

import logging
import sys
from pathlib import Path

import colorlog

LOGGER_NAME = "hbsdcontrol"


class _StderrProxy:
    """Resolve sys.stderr on every write so redirected streams are honoured."""

    def write(self, data: str) -> int:
        return sys.stderr.write(data)

    def flush(self) -> None:
        sys.stderr.flush()

    def isatty(self) -> bool:
        return sys.stderr.isatty()


_VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
}


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.WARNING,
    log_file: str | None = None,
) -> logging.Logger:
    """Setup logger with a colored stderr handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(_StderrProxy())
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            logger.addHandler(file_handler)
        except OSError as exc:
            logger.warning(f"Could not open log file {log_file}: {exc}")

    return logger


def configure_logging_levels(verbose: int) -> None:
    """Map the -v count onto the hbsdcontrol logger hierarchy."""
    level = _VERBOSITY_LEVELS.get(verbose, logging.DEBUG)
    logging.getLogger(LOGGER_NAME).setLevel(level)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
